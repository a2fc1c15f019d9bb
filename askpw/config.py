# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Runtime configuration for askpw.

`AskpwConfig` is built once at startup and handed to the dispatcher, so nothing
below it reads global state.

Environment Variables:
    ASKPW_ENTRY: Fallback entry name when `--entry` is not given.
    ASKPW_BIN: Default manager command (`--bin` still wins).
    ASKPW_DEBUG: `1`, `true`, `yes` or `on` enables debug logging.
    ASKPW_LOG_MODE: `cli` or `json`.
"""
from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from askpw.exceptions import ConfigError
from askpw.utils import is_truthy
from askpw.version import __version__

PROGRAM = "askpw"
PWSAFE_BIN = "pwsafe"
ENTRY_ENV = "ASKPW_ENTRY"
PROMPT_TEXT = "Which entry to select (blank to skip): "


class AskpwConfig(BaseModel):
    """Immutable settings for one askpw run."""

    model_config = ConfigDict(frozen=True)

    program: str = PROGRAM
    version: str = __version__
    default_bin: str = PWSAFE_BIN
    entry_env: str = ENTRY_ENV
    prompt_text: str = PROMPT_TEXT
    debug: bool = False
    log_mode: Literal["cli", "json"] | None = None

    @field_validator("program", "default_bin", "entry_env")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AskpwConfig:
        """Build a config from `ASKPW_*` environment variables."""
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {"debug": is_truthy(environ.get("ASKPW_DEBUG"))}
        log_mode = environ.get("ASKPW_LOG_MODE", "").strip().lower()
        if log_mode:
            values["log_mode"] = log_mode
        default_bin = environ.get("ASKPW_BIN", "").strip()
        if default_bin:
            values["default_bin"] = default_bin
        try:
            return cls(**values)
        except ValidationError as error:
            details = "; ".join(
                f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
                for item in error.errors()
            )
            raise ConfigError(f"invalid environment setting ({details})") from error

    def usage(self) -> str:
        return (
            f"{self.program} [OPTION]...\n"
            "Prompt for the entry key to read from a password manager.\n"
            "\n"
            "    --bin=PATH              the absolute path to the invoked binary\n"
            "    --entry=NAME            this will not ask for the entry via prompt\n"
            "    --stderr                ask for the entry key on stderr\n"
            f"    --version               display the {self.program} version and exit\n"
            "    --help                  display the usage/help message and exit\n"
            "    --                      pass all remaining arguments to the binary\n"
            "Alternatively the entry can also be set via the environment "
            f"({self.entry_env})\n"
            f"The default command is {self.default_bin}"
        )
