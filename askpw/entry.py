# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves the entry name handed to the password manager.

The entry comes from the first non-empty source of:
1. `--entry=NAME` on the command line
2. the `ASKPW_ENTRY` environment variable
3. an interactive prompt on stderr, reading one line from stdin

An empty answer is not an error. The dispatcher treats it as "nothing to do".

On a terminal the prompt uses a Prompt Toolkit session bound to stderr, which gives
line editing without touching stdout. When stdin is a pipe the prompt text is
written to stderr and a single newline-terminated line is read.
"""
from __future__ import annotations

import sys
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_input
from prompt_toolkit.output import Output, create_output
from rich.console import Console

from askpw.console import err_console
from askpw.exceptions import PromptIOError
from askpw.logger import logger


class EntryPrompt:
    """
    Asks the user which entry to select.

    Args:
        prompt_text (str): Text shown before the cursor.
        stdin (TextIO | None): Stream to read from. Defaults to `sys.stdin`.
        console (Console | None): Console the prompt is written to when stdin
            is not a terminal. Defaults to the stderr console.
        session (PromptSession | None): Session used when stdin is a terminal.
            Created on first use when omitted, reading from `stdin`.
        output (Output | None): Prompt Toolkit output for that session.
            Defaults to stderr.
    """

    def __init__(
        self,
        prompt_text: str,
        *,
        stdin: TextIO | None = None,
        console: Console | None = None,
        session: PromptSession | None = None,
        output: Output | None = None,
    ) -> None:
        self.prompt_text = prompt_text
        self.stdin = stdin
        self.console = console or err_console
        self.session = session
        self.output = output

    def _is_terminal(self, stdin: TextIO) -> bool:
        try:
            return stdin.isatty()
        except (AttributeError, ValueError):
            return False

    def read(self) -> str:
        """Prompt once and return the answer with surrounding whitespace removed.

        Raises:
            PromptIOError: If input ends before a full line is read.
        """
        stdin = self.stdin or sys.stdin
        if self._is_terminal(stdin):
            line = self._read_terminal(stdin)
        else:
            line = self._read_stream(stdin)
        return line.strip()

    def _read_terminal(self, stdin: TextIO) -> str:
        if self.session is None:
            self.session = PromptSession(
                input=create_input(stdin),
                output=self.output or create_output(stdout=sys.stderr),
            )
        try:
            return self.session.prompt(self.prompt_text)
        except EOFError as error:
            raise PromptIOError("EOF") from error
        except KeyboardInterrupt as error:
            raise PromptIOError("interrupted") from error

    def _read_stream(self, stdin: TextIO) -> str:
        self.console.print(self.prompt_text, end="", markup=False)
        try:
            line = stdin.readline()
        except (OSError, ValueError) as error:
            raise PromptIOError(str(error)) from error
        except KeyboardInterrupt as error:
            raise PromptIOError("interrupted") from error
        if not line.endswith("\n"):
            raise PromptIOError("EOF")
        return line


def resolve_entry(
    override: str,
    env_entry: str | None,
    use_stderr: bool,
    prompt: EntryPrompt,
) -> str:
    """Return the entry to look up, prompting only if no other source has one.

    `use_stderr` is recorded for diagnostics; the prompt is written to stderr
    either way.
    """
    current = override or env_entry or ""
    if current:
        logger.debug("entry already defined as %s", current)
        return current

    logger.debug("prompting for entry (stderr=%s)", use_stderr)
    return prompt.read()
