# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color names used by askpw when writing to a Rich console.

Rich drops every style when the target stream is not a terminal, so these only
affect interactive sessions.
"""


class OneColors:
    DARK_RED = "#BE5046"
    BLUE = "#61AFEF"

    DARK_RED_b = f"bold {DARK_RED}"
    BLUE_b = f"bold {BLUE}"
