"""Name and value rules for environment variable declarations.

Pure predicates, usable without touching the file system.

Values are validated, never decoded: ``\\n`` written in a file is the two
characters backslash and ``n`` and stays that way in the environment.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from gofr_dotenv.exceptions import EnvNameError, EnvValueError

VAR_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]+$"

# Raw C0 and C1 control characters and DEL. Their backslash-escaped spellings
# (\a \b \t \n \v \f \r \0 \e) are plain printable text.
CONTROL_CHAR_PATTERN = r"[\x00-\x1f\x7f-\x9f]"

_NAME_RE = re.compile(VAR_NAME_PATTERN)
_CONTROL_RE = re.compile(CONTROL_CHAR_PATTERN)


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` is a valid variable name."""
    # fullmatch: "$" alone would accept a trailing newline
    return _NAME_RE.fullmatch(name) is not None


def is_valid_value(value: str) -> bool:
    """Return True if ``value`` is empty or free of raw control characters."""
    return _CONTROL_RE.search(value) is None


def validate_name(name: str, details: Optional[Dict[str, Any]] = None) -> str:
    """Return ``name`` unchanged or raise EnvNameError."""
    if not is_valid_name(name):
        raise EnvNameError(name, details)
    return name


def validate_value(value: str, details: Optional[Dict[str, Any]] = None) -> str:
    """Return ``value`` unchanged or raise EnvValueError."""
    if not is_valid_value(value):
        raise EnvValueError(value, details)
    return value


__all__ = [
    "VAR_NAME_PATTERN",
    "CONTROL_CHAR_PATTERN",
    "is_valid_name",
    "is_valid_value",
    "validate_name",
    "validate_value",
]
