"""gofr-dotenv - layered .env loading for GOFR projects.

Loads NAME=value declarations from a base .env file, its .local variant,
and application-environment overlays (.env-production, .env-production.local)
into the process environment.

- loader: Dotenv orchestration (load, process_file, process_file_list, write_vars)
- paths: base path resolution and candidate file lists
- parser / validators: line parsing and name/value rules
- store: environment variable stores (os.environ, in-memory)
- config: typed settings from GOFR_DOTENV_* variables
- logger: structured logging
- exceptions: structured error classes
"""

__version__ = "1.0.0"

from gofr_dotenv.config import LoaderSettings, LogSettings
from gofr_dotenv.exceptions import (
    ConfigurationError,
    DotenvError,
    EnvEncodingError,
    EnvNameError,
    EnvSyntaxError,
    EnvValueError,
    EnvVarError,
    PathAlreadySetError,
    PathError,
    PathNotAccessibleError,
    PathNotSetError,
    ValidationError,
)
from gofr_dotenv.loader import Dotenv, get_var, load_dotenv
from gofr_dotenv.logger import Logger, StructuredLogger, create_logger, get_logger
from gofr_dotenv.paths import ResolvedLocation, candidate_files, resolve_location
from gofr_dotenv.store import EnvStore, MemoryEnvStore, OsEnvStore
from gofr_dotenv.validators import is_valid_name, is_valid_value

__all__ = [
    "__version__",
    # Loader
    "Dotenv",
    "load_dotenv",
    "get_var",
    # Paths
    "ResolvedLocation",
    "resolve_location",
    "candidate_files",
    # Validators
    "is_valid_name",
    "is_valid_value",
    # Stores
    "EnvStore",
    "OsEnvStore",
    "MemoryEnvStore",
    # Config
    "LoaderSettings",
    "LogSettings",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "DotenvError",
    "ConfigurationError",
    "PathError",
    "PathNotSetError",
    "PathNotAccessibleError",
    "PathAlreadySetError",
    "ValidationError",
    "EnvVarError",
    "EnvSyntaxError",
    "EnvNameError",
    "EnvValueError",
    "EnvEncodingError",
]
