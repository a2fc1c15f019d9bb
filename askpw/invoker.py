# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runs the password manager with the resolved entry.

The child inherits this process's stdin, stdout and stderr unchanged, so the
manager can prompt for its master password and print secrets directly on the
terminal. askpw waits for it to finish and only looks at the exit status.
"""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Sequence

from askpw.exceptions import SubprocessError
from askpw.logger import logger


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of a successful password manager run."""

    argv: tuple[str, ...]
    returncode: int = 0


def build_argv(path: str, pass_through: Sequence[str], entry: str) -> list[str]:
    """Return the command vector: `path`, the pass-through tokens, then `entry`."""
    return [path, *pass_through, entry]


def invoke(path: str, pass_through: Sequence[str], entry: str) -> InvocationResult:
    """
    Run `path` with `pass_through` followed by `entry` and wait for it.

    Raises:
        SubprocessError: If the process cannot be started or exits non-zero.
    """
    argv = build_argv(path, pass_through, entry)
    logger.debug("command: %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as error:
        logger.debug("unable to start %s: %s", path, error)
        raise SubprocessError(f"{path} did not exit successfully") from error

    if completed.returncode != 0:
        logger.debug("%s exited with status %d", path, completed.returncode)
        raise SubprocessError(
            f"{path} did not exit successfully", returncode=completed.returncode
        )
    return InvocationResult(argv=tuple(argv), returncode=completed.returncode)
