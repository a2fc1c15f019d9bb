# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for askpw.

`Askpw` runs the whole pipeline for one invocation:

    parse → (version | help | resolve entry) → resolve manager → invoke

and maps every outcome to a process exit code:

    0  success, version/help shown, or no entry given
    1  the password manager failed to start or exited non-zero
    3  the entry prompt could not read a line
    4  the manager command was not found
    9  the command line or environment was invalid

`run()` returns the exit code instead of exiting so the pipeline can be driven
from tests. `askpw.__main__.main()` is the console entry point.
"""
from __future__ import annotations

import os
from typing import Callable, Mapping, Sequence, TextIO

from rich.console import Console
from rich.markup import escape

from askpw.config import AskpwConfig
from askpw.console import console as default_console
from askpw.console import err_console as default_err_console
from askpw.entry import EntryPrompt, resolve_entry
from askpw.exceptions import AskpwError
from askpw.invoker import InvocationResult, invoke
from askpw.logger import logger
from askpw.mode import AskpwAction, ExitCode
from askpw.parser import ArgumentParser, ParsedArguments
from askpw.resolver import resolve_executable
from askpw.signals import AbortSignal
from askpw.themes import OneColors


class Askpw:
    """
    Entry prompt front-end for a password manager.

    Args:
        config (AskpwConfig | None): Settings for this run.
        console (Console | None): Console for version and help output.
        err_console (Console | None): Console for the prompt and error reports.
        stdin (TextIO | None): Stream the entry prompt reads from.
        environ (Mapping[str, str] | None): Environment holding the fallback entry.
        resolver (Callable | None): Maps a command name to an executable path.
        invoker (Callable | None): Runs the manager.
    """

    def __init__(
        self,
        config: AskpwConfig | None = None,
        *,
        console: Console | None = None,
        err_console: Console | None = None,
        stdin: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
        resolver: Callable[[str], str] | None = None,
        invoker: Callable[[str, Sequence[str], str], InvocationResult] | None = None,
    ) -> None:
        self.config: AskpwConfig = config or AskpwConfig()
        self.console: Console = console or default_console
        self.err_console: Console = err_console or default_err_console
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.parser = ArgumentParser()
        self.prompt = EntryPrompt(
            self.config.prompt_text, stdin=stdin, console=self.err_console
        )
        self.resolver = resolver or resolve_executable
        self.invoker = invoker or invoke

    def render_version(self) -> None:
        self.console.print(
            f"[{OneColors.BLUE_b}]{self.config.program}[/] {escape(self.config.version)}"
        )

    def render_help(self) -> None:
        self.console.print(self.config.usage(), markup=False)

    def report(self, error: AskpwError) -> None:
        """Print `error` once on the error console."""
        self.err_console.print(
            f"[{OneColors.DARK_RED_b}]{escape(error.prefix)}[/] {escape(str(error))}"
        )

    def resolve_entry(self, args: ParsedArguments) -> str:
        entry = resolve_entry(
            args.entry,
            self.environ.get(self.config.entry_env),
            args.use_stderr,
            self.prompt,
        )
        if not entry:
            raise AbortSignal()
        return entry

    def execute(self, args: ParsedArguments) -> InvocationResult:
        """Resolve the entry and manager for `args`, then run the manager."""
        entry = self.resolve_entry(args)
        path = self.resolver(args.bin or self.config.default_bin)
        return self.invoker(path, args.pass_through, entry)

    def run(self, argv: Sequence[str]) -> int:
        """Run askpw for `argv` (without the program name) and return the exit code."""
        try:
            args = self.parser.parse(argv)
            if args.action is AskpwAction.SHOW_VERSION:
                self.render_version()
                return ExitCode.SUCCESS
            if args.action is AskpwAction.SHOW_HELP:
                self.render_help()
                return ExitCode.SUCCESS
            self.execute(args)
        except AbortSignal as signal:
            logger.debug("%s", signal)
            return ExitCode.SUCCESS
        except AskpwError as error:
            logger.debug("%s: %s", type(error).__name__, error)
            self.report(error)
            return error.exit_code
        return ExitCode.SUCCESS
