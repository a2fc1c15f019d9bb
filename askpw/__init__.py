"""
Askpw Entry Prompt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .askpw import Askpw
from .config import AskpwConfig
from .logger import logger
from .version import __version__

__all__ = [
    "Askpw",
    "AskpwConfig",
    "logger",
    "__version__",
]
