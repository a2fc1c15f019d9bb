# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Flag`, the descriptor for one askpw command-line switch, and the fixed
set of switches askpw understands.

Valued flags take their value inline (`--bin=PATH`, `-b=PATH`) and are matched
by prefix, so a bare `--bin` is accepted and simply carries no value. Boolean
flags only match their exact spelling.

Example:
    BIN_FLAG.matches("--bin=/usr/bin/pwsafe")   → True
    BIN_FLAG.extract_value("--bin=/usr/bin/pwsafe") → ("/usr/bin/pwsafe", True)
    BIN_FLAG.extract_value("--bin=")            → ("", False)
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Flag:
    """
    Represents a single command-line switch.

    Attributes:
        long (str): Long name, used as `--<long>`.
        short (str): Short name, used as `-<short>`.
        valued (bool): True if the flag carries an inline `=value`.
    """

    long: str
    short: str
    valued: bool = False

    @property
    def long_flag(self) -> str:
        return f"--{self.long}"

    @property
    def short_flag(self) -> str:
        return f"-{self.short}"

    def matches(self, token: str) -> bool:
        """Return True if `token` selects this flag."""
        if self.valued:
            return token.startswith(self.long_flag) or token.startswith(self.short_flag)
        return token in (self.long_flag, self.short_flag)

    def extract_value(self, token: str) -> tuple[str, bool]:
        """Split `token` on its first `=` and return `(value, present)`.

        `present` is False when there is no `=` or nothing follows it.
        """
        _, separator, value = token.partition("=")
        if separator and value:
            return value, True
        return "", False

    def __str__(self) -> str:
        suffix = "=VALUE" if self.valued else ""
        return f"{self.long_flag}{suffix}, {self.short_flag}{suffix}"


FORWARD_MARKER = "--"

BIN_FLAG = Flag("bin", "b", valued=True)
ENTRY_FLAG = Flag("entry", "e", valued=True)
STDERR_FLAG = Flag("stderr", "2")
VERSION_FLAG = Flag("version", "v")
HELP_ALT_FLAG = Flag("help", "?")
HELP_FLAG = Flag("help", "h")

# Checked in this order; the first match wins.
KNOWN_FLAGS: tuple[Flag, ...] = (
    VERSION_FLAG,
    HELP_ALT_FLAG,
    HELP_FLAG,
    STDERR_FLAG,
    BIN_FLAG,
    ENTRY_FLAG,
)
