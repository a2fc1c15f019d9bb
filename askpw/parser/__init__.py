"""
Askpw Entry Prompt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import ArgumentParser
from .flag import (
    BIN_FLAG,
    ENTRY_FLAG,
    FORWARD_MARKER,
    HELP_ALT_FLAG,
    HELP_FLAG,
    KNOWN_FLAGS,
    STDERR_FLAG,
    VERSION_FLAG,
    Flag,
)
from .parser_types import ParsedArguments, VisitorState

__all__ = [
    "ArgumentParser",
    "Flag",
    "ParsedArguments",
    "VisitorState",
    "KNOWN_FLAGS",
    "FORWARD_MARKER",
    "BIN_FLAG",
    "ENTRY_FLAG",
    "STDERR_FLAG",
    "VERSION_FLAG",
    "HELP_ALT_FLAG",
    "HELP_FLAG",
]
