"""Dataclass settings for gofr-dotenv.

Each settings class has a ``from_env`` constructor taking a variable
prefix (default ``GOFR_DOTENV``), the same way every GOFR service reads
its own configuration.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from gofr_dotenv.exceptions import ConfigurationError

DEFAULT_PREFIX = "GOFR_DOTENV"
DEFAULT_APP_ENV_NAME = "APP_ENV"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(raw: Optional[str], default: bool = False, name: str = "value") -> bool:
    """Interpret a flag taken from the environment.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    if raw is None or raw.strip() == "":
        return default

    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ConfigurationError(
        "INVALID_BOOLEAN",
        f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}",
        {"name": name, "value": raw},
    )


@dataclass
class LoaderSettings:
    """Loader configuration

    Attributes:
        path: Base .env file or directory containing it
        app_env_name: Variable that selects the application environment
        overwrite: Whether loaded values replace variables already set
    """

    path: Optional[str] = None
    app_env_name: str = DEFAULT_APP_ENV_NAME
    overwrite: bool = False

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env: Optional[Mapping[str, str]] = None,
    ) -> "LoaderSettings":
        """Load loader settings from environment variables

        Args:
            prefix: Environment variable prefix
            env: Mapping to read from (default: os.environ)

        Environment variables:
            {prefix}_PATH: Base path
            {prefix}_APP_ENV_NAME: Application environment variable name
            {prefix}_OVERWRITE: Overwrite flag (true/false)
        """
        source = os.environ if env is None else env
        return cls(
            path=source.get(f"{prefix}_PATH") or None,
            app_env_name=source.get(f"{prefix}_APP_ENV_NAME") or DEFAULT_APP_ENV_NAME,
            overwrite=parse_bool(
                source.get(f"{prefix}_OVERWRITE"), False, name=f"{prefix}_OVERWRITE"
            ),
        )


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines instead of text
        log_file: Optional file receiving a copy of the output
    """

    level: str = "INFO"
    json_format: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env: Optional[Mapping[str, str]] = None,
    ) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_JSON: "true" for JSON output
            {prefix}_LOG_FILE: Log file path
        """
        source = os.environ if env is None else env
        return cls(
            level=source.get(f"{prefix}_LOG_LEVEL", "INFO").upper(),
            json_format=source.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
            log_file=source.get(f"{prefix}_LOG_FILE") or None,
        )
