"""Environment variable stores.

The loader never touches ``os.environ`` directly; it reads and writes
through an ``EnvStore``. ``OsEnvStore`` is the process environment,
``MemoryEnvStore`` is a plain dict for tests and dry runs.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, MutableMapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvStore(Protocol):
    """Protocol for environment variable tables.

    Example:
        class VaultBackedStore:
            def get(self, name: str) -> Optional[str]: ...
            def set(self, name: str, value: str) -> None: ...
            def contains(self, name: str) -> bool: ...
    """

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None when undefined."""
        ...

    def set(self, name: str, value: str) -> None:
        """Define or replace ``name``."""
        ...

    def contains(self, name: str) -> bool:
        """Return True if ``name`` is defined."""
        ...


class OsEnvStore:
    """Store backed by the process environment.

    Not thread-safe: concurrent writers must be serialized by the caller.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def set(self, name: str, value: str) -> None:
        self._environ[name] = value

    def contains(self, name: str) -> bool:
        return name in self._environ


class MemoryEnvStore:
    """In-memory store.

    Example:
        store = MemoryEnvStore({"APP_ENV": "production"})
        Dotenv("/srv/app", store=store).load()
        store.as_dict()
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._store: Dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._store.get(name)

    def set(self, name: str, value: str) -> None:
        self._store[name] = value

    def contains(self, name: str) -> bool:
        return name in self._store

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the stored variables."""
        return self._store.copy()

    def clear(self) -> None:
        self._store.clear()


__all__ = ["EnvStore", "OsEnvStore", "MemoryEnvStore"]
