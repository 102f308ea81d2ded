"""Base path resolution and candidate file lists.

A base path is either a file (``/srv/app/my-app.vars``) or a directory
(``/srv/app``, implying ``.env``). From the resolved location the loader
derives, per layer::

    <dir><file>[-<suffix>]
    <dir><file>[-<suffix>].local

keeping only the candidates that exist and are readable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from gofr_dotenv.exceptions import PathNotAccessibleError, PathNotSetError

DEFAULT_ENV_FILE = ".env"
LOCAL_SUFFIX = ".local"


@dataclass(frozen=True)
class ResolvedLocation:
    """Directory (always ending with one separator) and base filename."""

    directory: str
    filename: str = DEFAULT_ENV_FILE

    def file_path(self, suffix: str = "") -> str:
        name = f"{self.filename}-{suffix}" if suffix else self.filename
        return f"{self.directory}{name}"


def is_readable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def is_readable_dir(path: str) -> bool:
    return os.path.isdir(path) and os.access(path, os.R_OK | os.X_OK)


def _normalize_dir(directory: str) -> str:
    stripped = directory.rstrip(os.sep)
    if not stripped:
        # Filesystem root
        return os.sep
    return stripped + os.sep


def resolve_location(path: Optional[str]) -> ResolvedLocation:
    """Split a base path into directory and filename.

    Args:
        path: File or directory; None or "" means not configured

    Returns:
        ResolvedLocation for the path

    Raises:
        PathNotSetError: If path is None or empty
        PathNotAccessibleError: If path is neither a readable file nor directory
    """
    if not path:
        raise PathNotSetError()

    path = os.fspath(path)

    if is_readable_file(path):
        directory, filename = os.path.split(path)
        return ResolvedLocation(_normalize_dir(directory or os.curdir), filename)

    if is_readable_dir(path):
        return ResolvedLocation(_normalize_dir(path), DEFAULT_ENV_FILE)

    raise PathNotAccessibleError(path)


def candidate_files(location: ResolvedLocation, suffix: str = "") -> List[str]:
    """Build the ordered list of files to read for one layer.

    Args:
        location: Resolved base location
        suffix: Application environment name; "" for the base layer

    Returns:
        Readable files among ``<file>[-suffix]`` and its ``.local`` variant
    """
    main = location.file_path(suffix)
    return [
        candidate
        for candidate in (main, main + LOCAL_SUFFIX)
        if is_readable_file(candidate)
    ]


__all__ = [
    "DEFAULT_ENV_FILE",
    "LOCAL_SUFFIX",
    "ResolvedLocation",
    "is_readable_file",
    "is_readable_dir",
    "resolve_location",
    "candidate_files",
]
