"""Reading and parsing of .env files.

File format, one declaration per line::

    # comment line, ignored
    NAME=value

Blank lines are ignored. Everything before the first ``=`` is the name,
everything after it is the value; both are stripped of surrounding spaces
and tabs. Any other control character is left in place and rejected.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from gofr_dotenv.exceptions import EnvEncodingError, EnvSyntaxError, PathNotAccessibleError
from gofr_dotenv.paths import is_readable_file
from gofr_dotenv.validators import validate_name, validate_value

COMMENT_PREFIX = "#"
SEPARATOR = "="
WHITESPACE = " \t"


def read_lines(path: str) -> List[str]:
    """Return the non-blank lines of a text file, newlines stripped.

    Raises:
        PathNotAccessibleError: If path is not a readable file
        EnvEncodingError: If the file is not valid UTF-8
    """
    if not is_readable_file(path):
        raise PathNotAccessibleError(str(path))

    try:
        with open(path, encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as e:
        raise EnvEncodingError(str(path), {"reason": str(e)}) from e
    except OSError as e:
        raise PathNotAccessibleError(str(path), {"reason": str(e)}) from e

    return [line for line in lines if line.strip(WHITESPACE)]


def is_comment(line: str) -> bool:
    return line.lstrip(WHITESPACE).startswith(COMMENT_PREFIX)


def parse_line(line: str, details: Optional[dict] = None) -> Tuple[str, str]:
    """Turn one declaration line into a validated (name, value) pair.

    Args:
        line: Raw line, not a comment
        details: Extra context (source file) attached to errors

    Raises:
        EnvSyntaxError: If the line has no "="
        EnvNameError: If the name does not match the name pattern
        EnvValueError: If the value contains a raw control character
    """
    name, sep, value = line.partition(SEPARATOR)
    if not sep:
        raise EnvSyntaxError(line, details)

    return (
        validate_name(name.strip(WHITESPACE), details),
        validate_value(value.strip(WHITESPACE), details),
    )


def parse_lines(lines: Iterable[str], source: Optional[str] = None) -> Dict[str, str]:
    """Parse declaration lines into a variable set.

    A later declaration of the same name replaces an earlier one. Nothing is
    returned unless every line is valid.
    """
    details = {"source": source} if source else None
    variables: Dict[str, str] = {}
    for line in lines:
        if not line.strip(WHITESPACE) or is_comment(line):
            continue
        name, value = parse_line(line, details)
        variables[name] = value
    return variables


def parse_file(path: str) -> Dict[str, str]:
    """Read and parse a single .env file."""
    return parse_lines(read_lines(path), source=str(path))


__all__ = [
    "COMMENT_PREFIX",
    "SEPARATOR",
    "WHITESPACE",
    "read_lines",
    "is_comment",
    "parse_line",
    "parse_lines",
    "parse_file",
]
