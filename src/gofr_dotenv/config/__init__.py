"""Configuration for gofr-dotenv.

Example:
    from gofr_dotenv.config import LoaderSettings

    settings = LoaderSettings.from_env()          # GOFR_DOTENV_PATH, ...
    settings = LoaderSettings.from_env("MY_APP")  # MY_APP_PATH, ...
"""

from gofr_dotenv.config.settings import (
    DEFAULT_APP_ENV_NAME,
    DEFAULT_PREFIX,
    LoaderSettings,
    LogSettings,
    parse_bool,
)

__all__ = [
    "LoaderSettings",
    "LogSettings",
    "parse_bool",
    "DEFAULT_PREFIX",
    "DEFAULT_APP_ENV_NAME",
]
