# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models for the askpw argument parser.

Contents:
- `ParsedArguments`: Accumulator filled in token by token while parsing.
- `VisitorState`: Which rule the parser applies to the next token.
"""
from dataclasses import dataclass, field
from enum import Enum

from askpw.mode import AskpwAction


class VisitorState(Enum):
    """
    How the parser treats the next token.

    Members:
        DISPATCHING: Match the token against the known flags.
        FORCE_FORWARD: Forward every token, set after a bare `--`.
        DISCARD: Drop every token, set after `--version` or `--help`.
    """

    DISPATCHING = "dispatching"
    FORCE_FORWARD = "force-forward"
    DISCARD = "discard"


@dataclass
class ParsedArguments:
    """Result of parsing the askpw command line.

    An empty `bin` means the configured default executable is used, an empty
    `entry` means no entry was given on the command line.
    """

    action: AskpwAction = AskpwAction.RUN_COMMAND
    use_stderr: bool = False
    bin: str = ""
    entry: str = ""
    pass_through: list[str] = field(default_factory=list)

    def forward(self, token: str) -> None:
        self.pass_through.append(token)
