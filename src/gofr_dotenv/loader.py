"""Layered .env loader.

Files are read in this order, later files overriding earlier ones::

    .env
    .env.local
    .env-<APP_ENV>
    .env-<APP_ENV>.local

``<APP_ENV>`` is the value of the application environment variable
(``APP_ENV`` by default), taken from the process environment or, when it
is unset there or overwrite mode is on, from the base files themselves.
Missing files are skipped. Invalid files abort the load before anything
is written to the environment.

Usage:
    from gofr_dotenv import Dotenv

    Dotenv("/srv/app").load()
    Dotenv("/srv/app/my-app.vars", app_env_name="STAGE", overwrite=True).load()
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from dotenv import find_dotenv

from gofr_dotenv.config import DEFAULT_APP_ENV_NAME, LoaderSettings
from gofr_dotenv.exceptions import PathAlreadySetError, PathNotAccessibleError, PathNotSetError
from gofr_dotenv.logger import Logger, create_logger
from gofr_dotenv.parser import parse_file
from gofr_dotenv.paths import (
    DEFAULT_ENV_FILE,
    ResolvedLocation,
    candidate_files,
    resolve_location,
)
from gofr_dotenv.store import EnvStore, OsEnvStore
from gofr_dotenv.validators import validate_name


class Dotenv:
    """Loads variables declared in .env files into an environment store."""

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        app_env_name: str = DEFAULT_APP_ENV_NAME,
        overwrite: bool = False,
        store: Optional[EnvStore] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialize the loader.

        Args:
            path: Base .env file, or a directory containing ``.env``.
                An empty or missing path leaves the path unset.
            app_env_name: Variable selecting the application environment
            overwrite: Replace variables that are already defined
            store: Environment to read and write (default: os.environ)
            logger: Optional logger instance. Creates one if not provided.

        Raises:
            EnvNameError: If app_env_name is not a valid variable name
        """
        self._path: Optional[str] = None
        self._app_env_name = DEFAULT_APP_ENV_NAME
        self._overwrite = False
        self._store: EnvStore = store if store is not None else OsEnvStore()
        self.logger = logger if logger is not None else create_logger()

        if path:
            self.set_path(path)
        self.set_app_env_name(app_env_name)
        self.set_overwrite(overwrite)

    @classmethod
    def from_settings(
        cls,
        settings: LoaderSettings,
        *,
        store: Optional[EnvStore] = None,
        logger: Optional[Logger] = None,
    ) -> "Dotenv":
        """Create a loader from LoaderSettings (e.g. ``LoaderSettings.from_env()``)."""
        return cls(
            settings.path,
            app_env_name=settings.app_env_name,
            overwrite=settings.overwrite,
            store=store,
            logger=logger,
        )

    @classmethod
    def discover(
        cls,
        filename: str = DEFAULT_ENV_FILE,
        **kwargs,
    ) -> "Dotenv":
        """Create a loader for the nearest ``filename`` above the working directory.

        The search always starts at the working directory and walks up to
        the file system root.

        Raises:
            PathNotAccessibleError: If no such file exists in any parent directory
        """
        found = find_dotenv(filename, usecwd=True)
        if not found:
            raise PathNotAccessibleError(filename, {"search": "parent directories"})
        return cls(found, **kwargs)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def app_env_name(self) -> str:
        return self._app_env_name

    @property
    def overwrite(self) -> bool:
        return self._overwrite

    @property
    def store(self) -> EnvStore:
        return self._store

    def set_path(self, path: str) -> "Dotenv":
        """Set the base path. The path can be set only once.

        Raises:
            PathNotSetError: If path is empty
            PathAlreadySetError: If a path has already been set
        """
        if self._path is not None:
            raise PathAlreadySetError(self._path, {"rejected": str(path)})
        if not path:
            raise PathNotSetError()
        self._path = str(path)
        return self

    def set_app_env_name(self, app_env_name: str) -> "Dotenv":
        """Set the variable that selects the application environment.

        Raises:
            EnvNameError: If the name is not a valid variable name
        """
        self._app_env_name = validate_name(app_env_name)
        return self

    def set_overwrite(self, overwrite: bool) -> "Dotenv":
        self._overwrite = bool(overwrite)
        return self

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def load(self) -> Dict[str, str]:
        """Load the base and application environment files into the store.

        Returns:
            The merged variables that were offered to the store

        Raises:
            PathError: If the base path is unset or not accessible
            EnvVarError: If any candidate file contains an invalid line
        """
        location = resolve_location(self._path)
        self.logger.debug(
            "Resolved base path", directory=location.directory, filename=location.filename
        )

        variables = self.process_file_list(self._candidates(location))

        app_env = self._detect_app_env(variables)
        if app_env:
            self.logger.info("Application environment detected", app_env=app_env)
            variables.update(self.process_file_list(self._candidates(location, app_env)))
        else:
            self.logger.debug("No application environment set", variable=self._app_env_name)

        self.write_vars(variables)
        return variables

    def process_file(self, path: str) -> Dict[str, str]:
        """Parse a single .env file.

        Raises:
            PathNotAccessibleError: If the file is missing or unreadable
            EnvVarError: If a line is invalid
        """
        variables = parse_file(path)
        self.logger.debug("Parsed file", path=str(path), count=len(variables))
        return variables

    def process_file_list(self, paths: Iterable[str]) -> Dict[str, str]:
        """Parse files in order and merge them, later files winning."""
        merged: Dict[str, str] = {}
        for path in paths:
            merged.update(self.process_file(path))
        return merged

    def write_vars(self, variables: Mapping[str, str]) -> None:
        """Write variables to the store.

        Variables already defined are kept unless overwrite mode is on.
        """
        written = kept = 0
        for name, value in variables.items():
            if self._overwrite or not self._store.contains(name):
                self._store.set(name, str(value))
                written += 1
            else:
                kept += 1

        self.logger.info(
            "Environment variables written",
            written=written,
            kept=kept,
            overwrite=self._overwrite,
        )

    @staticmethod
    def get_var(name: str, store: Optional[EnvStore] = None) -> str:
        """Return the value of ``name``, or "" when it is undefined.

        Reads ``os.environ`` unless ``store`` is given, even when called on
        an instance. Use :meth:`read_var` to read the loader's own store.
        """
        value = (store if store is not None else OsEnvStore()).get(name)
        return value if value is not None else ""

    def read_var(self, name: str) -> str:
        """Return the value of ``name`` from this loader's store, or ""."""
        return Dotenv.get_var(name, self._store)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidates(self, location: ResolvedLocation, suffix: str = "") -> List[str]:
        files = candidate_files(location, suffix)
        if not files:
            self.logger.debug(
                "No files found for layer",
                directory=location.directory,
                filename=location.filename,
                suffix=suffix,
            )
        return files

    def _detect_app_env(self, base_vars: Mapping[str, str]) -> str:
        current = self._store.get(self._app_env_name) or ""
        if (not current or self._overwrite) and self._app_env_name in base_vars:
            return base_vars[self._app_env_name]
        return current


def load_dotenv(path: str, **kwargs) -> Dict[str, str]:
    """Shortcut for ``Dotenv(path, **kwargs).load()``."""
    return Dotenv(path, **kwargs).load()


def get_var(name: str, store: Optional[EnvStore] = None) -> str:
    """Return the value of ``name`` from the environment, or ""."""
    return Dotenv.get_var(name, store)


__all__ = ["Dotenv", "load_dotenv", "get_var"]
