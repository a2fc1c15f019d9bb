# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the hand-rolled command-line parser used
by askpw.

askpw cannot use argparse: every token it does not recognise has to reach the
password manager untouched and in order, including tokens that look like flags,
and a malformed `--bin=` or `--entry=` must be ignored rather than rejected.

Parsing rules:
- Tokens are visited left to right, one at a time.
- A bare `--` forwards every later token verbatim and is not forwarded itself.
- `--version` or `--help` (`-h`, `-?`) selects that action and every later token
  is discarded.
- `--stderr` (`-2`) sets `use_stderr`.
- `--bin=PATH` and `--entry=NAME` overwrite the stored value only when a
  non-empty value follows the `=`; the last one wins.
- Anything else is forwarded to the password manager.

Example Usage:
    parser = ArgumentParser()
    parsed = parser.parse(["extra1", "--entry=x", "extra2"])

    # parsed.entry == "x"
    # parsed.pass_through == ["extra1", "extra2"]
"""
from __future__ import annotations

from typing import Sequence

from askpw.logger import logger
from askpw.mode import AskpwAction
from askpw.parser.flag import (
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
from askpw.parser.parser_types import ParsedArguments, VisitorState


class ArgumentParser:
    """
    Parses the askpw command line into `ParsedArguments`.

    The parser keeps no state between calls; `parse()` may be called repeatedly.
    It never raises for the current grammar. `ParseError` is reserved for stricter
    validation.
    """

    def __init__(self, flags: Sequence[Flag] = KNOWN_FLAGS) -> None:
        self.flags: tuple[Flag, ...] = tuple(flags)

    def parse(self, tokens: Sequence[str]) -> ParsedArguments:
        """Parse `tokens` (without the program name)."""
        parsed = ParsedArguments()
        if not tokens:
            logger.debug("no arguments provided")
            return parsed

        state = VisitorState.DISPATCHING
        for token in tokens:
            state = self._visit(state, token, parsed)
        return parsed

    def _visit(
        self, state: VisitorState, token: str, parsed: ParsedArguments
    ) -> VisitorState:
        if state is VisitorState.DISCARD:
            return state
        if state is VisitorState.FORCE_FORWARD:
            logger.debug("pass-through argument: %s", token)
            parsed.forward(token)
            return state
        if token == FORWARD_MARKER:
            return VisitorState.FORCE_FORWARD
        return self._dispatch(token, parsed)

    def _match(self, token: str) -> Flag | None:
        return next((flag for flag in self.flags if flag.matches(token)), None)

    def _dispatch(self, token: str, parsed: ParsedArguments) -> VisitorState:
        flag = self._match(token)
        if flag is VERSION_FLAG:
            logger.debug("displaying command version")
            parsed.action = AskpwAction.SHOW_VERSION
            return VisitorState.DISCARD
        if flag in (HELP_ALT_FLAG, HELP_FLAG):
            logger.debug("displaying usage message")
            parsed.action = AskpwAction.SHOW_HELP
            return VisitorState.DISCARD
        if flag is STDERR_FLAG:
            logger.debug("prompting on stderr")
            parsed.use_stderr = True
        elif flag is BIN_FLAG:
            logger.debug("binary argument: %s", token)
            value, present = flag.extract_value(token)
            if present:
                parsed.bin = value
        elif flag is ENTRY_FLAG:
            logger.debug("entry argument: %s", token)
            value, present = flag.extract_value(token)
            if present:
                parsed.entry = value
        else:
            logger.debug("pass-through argument: %s", token)
            parsed.forward(token)
        return VisitorState.DISPATCHING

    def __str__(self) -> str:
        return f"ArgumentParser(flags={len(self.flags)})"

    def __repr__(self) -> str:
        return str(self)
