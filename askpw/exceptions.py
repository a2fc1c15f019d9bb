# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by askpw.

Every error is terminal for the run. The dispatcher prints `prefix` followed by
the error message on stderr and exits with `exit_code`.

Exception Hierarchy:
- AskpwError
    ├── ParseError            (9)
    │   └── ConfigError       (9)
    ├── PromptIOError         (3)
    ├── ResolutionError       (4)
    └── SubprocessError       (1)
"""
from askpw.mode import ExitCode


class AskpwError(Exception):
    """Base exception for askpw."""

    exit_code: ExitCode = ExitCode.FAILURE
    prefix: str = "Error:"


class ParseError(AskpwError):
    """Exception raised when the command line cannot be parsed."""

    exit_code = ExitCode.PARSE_ERROR
    prefix = "Unable to parse command line:"


class ConfigError(ParseError):
    """Exception raised when the environment holds an invalid setting."""


class PromptIOError(AskpwError):
    """Exception raised when the entry cannot be read from standard input."""

    exit_code = ExitCode.PROMPT_ERROR
    prefix = "Invalid password entry:"


class ResolutionError(AskpwError):
    """Exception raised when the manager command is not found on the search path."""

    exit_code = ExitCode.RESOLUTION_ERROR
    prefix = "Invalid manager command:"


class SubprocessError(AskpwError):
    """Exception raised when the manager fails to start or exits non-zero."""

    exit_code = ExitCode.FAILURE
    prefix = "Password manager error:"

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
