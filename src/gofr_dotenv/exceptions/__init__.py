"""Exceptions raised by gofr-dotenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for diagnostics

Usage:
    from gofr_dotenv.exceptions import DotenvError, PathError, EnvVarError

    try:
        Dotenv("/srv/app").load()
    except PathError as e:
        print(e.code, e.details["path"])
"""

from gofr_dotenv.exceptions.base import (
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

__all__ = [
    # Base
    "DotenvError",
    "ConfigurationError",
    # Path errors
    "PathError",
    "PathNotSetError",
    "PathNotAccessibleError",
    "PathAlreadySetError",
    # Validation errors
    "ValidationError",
    "EnvVarError",
    "EnvSyntaxError",
    "EnvNameError",
    "EnvValueError",
    "EnvEncodingError",
]
