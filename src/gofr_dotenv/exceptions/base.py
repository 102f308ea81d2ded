"""Base exception classes for gofr-dotenv.

All errors carry structured information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: The offending path, line, name or value
"""

from typing import Any, Dict, Optional


class DotenvError(Exception):
    """Base exception for all gofr-dotenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_NAME")
        message: Human-readable error message
        details: Optional additional context for diagnostics
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DotenvError):
    """Raised when loader settings are invalid or incomplete."""

    pass


# ---------------------------------------------------------------------------
# Path errors
# ---------------------------------------------------------------------------


class PathError(DotenvError):
    """Base for path errors.

    The base path is unset, or a required file or directory is missing
    or unreadable.
    """

    pass


class PathNotSetError(PathError):
    """Raised when no base path has been configured."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("PATH_NOT_SET", "Path not set!", details)


class PathNotAccessibleError(PathError):
    """Raised when a path does not exist or cannot be read."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        self.path = path
        super().__init__(
            "PATH_NOT_ACCESSIBLE",
            f'"{path}" does not exist or is not accessible!',
            {"path": path, **(details or {})},
        )


class PathAlreadySetError(PathError):
    """Raised on a second attempt to set the base path."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        self.path = path
        super().__init__(
            "PATH_ALREADY_SET",
            "Path can not be overwritten once set!",
            {"path": path, **(details or {})},
        )


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class ValidationError(DotenvError):
    """Base for all validation errors."""

    pass


class EnvVarError(ValidationError):
    """A variable declaration failed structural, name or value validation.

    Parsers add ``source`` (file path) to ``details`` when the declaration
    comes from a file.
    """

    pass


class EnvSyntaxError(EnvVarError):
    """Raised when a line has no name/value separator."""

    def __init__(self, line: str, details: Optional[Dict[str, Any]] = None):
        self.line = line
        super().__init__(
            "WRONG_DEFINITION",
            f'The definition of the environment variable "{line}" is missing equals-sign.',
            {"line": line, **(details or {})},
        )


class EnvNameError(EnvVarError):
    """Raised when a variable name does not match the name pattern."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        self.name = name
        super().__init__(
            "INVALID_NAME",
            f'Not valid environment variable name "{name}"! It must begin with an '
            "alphabetic character or an underscore, followed by alphanumeric "
            "characters or underscores.",
            {"name": name, **(details or {})},
        )


class EnvValueError(EnvVarError):
    """Raised when a variable value contains a raw control character."""

    def __init__(self, value: str, details: Optional[Dict[str, Any]] = None):
        self.value = value
        super().__init__(
            "INVALID_VALUE",
            f"Not valid environment variable value {value!r}! Escape sequences "
            "must be preceded by a backslash.",
            {"value": value, **(details or {})},
        )


class EnvEncodingError(EnvVarError):
    """Raised when a .env file is not valid UTF-8 text."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        self.path = path
        super().__init__(
            "INVALID_ENCODING",
            f'"{path}" is not valid UTF-8 text!',
            {"source": path, **(details or {})},
        )
