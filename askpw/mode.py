# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `AskpwAction`, the action selected on the command line, and `ExitCode`,
the process exit codes askpw reports.
"""
from enum import Enum, IntEnum


class AskpwAction(Enum):
    RUN_COMMAND = "run-command"
    SHOW_VERSION = "show-version"
    SHOW_HELP = "show-help"

    def __str__(self) -> str:
        return self.value


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    PROMPT_ERROR = 3
    RESOLUTION_ERROR = 4
    PARSE_ERROR = 9
