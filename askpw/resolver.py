# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""resolver.py
Maps the manager command name to an executable path."""
from __future__ import annotations

import os
import shutil

from askpw.exceptions import ResolutionError
from askpw.logger import logger


def resolve_executable(name: str) -> str:
    """Return the absolute path of `name` as found on `PATH`.

    A name containing a path separator is checked directly.

    Raises:
        ResolutionError: If no executable named `name` exists.
    """
    path = shutil.which(name) if name else None
    if not path:
        raise ResolutionError(f"Unable to resolve {name}")
    path = os.path.abspath(path)
    logger.debug("resolved %s to %s", name, path)
    return path
