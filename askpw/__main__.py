"""
Askpw Entry Prompt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich.markup import escape

from askpw.askpw import Askpw
from askpw.config import AskpwConfig
from askpw.console import err_console
from askpw.exceptions import ConfigError
from askpw.themes import OneColors
from askpw.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> None:
    """Console entry point for `askpw`."""
    try:
        config = AskpwConfig.from_env()
    except ConfigError as error:
        err_console.print(
            f"[{OneColors.DARK_RED_b}]{escape(error.prefix)}[/] {escape(str(error))}"
        )
        sys.exit(error.exit_code)

    setup_logging(
        mode=config.log_mode,
        console_log_level=logging.DEBUG if config.debug else logging.WARNING,
    )
    sys.exit(Askpw(config).run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
