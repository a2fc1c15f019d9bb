# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for askpw.

`console` carries version and help output on stdout. `err_console` carries the
entry prompt and error reports on stderr so stdout stays free for the password
manager.
"""
from rich.console import Console

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
