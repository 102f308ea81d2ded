"""Shared fixtures for gofr_dotenv tests."""

import logging
from pathlib import Path
from typing import Callable, Dict

import pytest

from gofr_dotenv.logger import StructuredLogger
from gofr_dotenv.store import MemoryEnvStore

DB_DEFAULTS: Dict[str, str] = {
    "DB_HOST": "example.host",
    "DB_PORT": "3306",
    "DB_USER": "appdb_user",
    "DB_PASS": "appdb-pass",
}


def write_env(directory: Path, name: str, variables: Dict[str, str], header: str = "") -> Path:
    """Write a .env-style file with one NAME=value line per variable."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = [header] if header else []
    lines += [f"{key}={value}" for key, value in variables.items()]
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_env_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing env files into tmp_path (or a subdirectory)."""

    def _make(name: str, variables: Dict[str, str], subdir: str = "", header: str = "") -> Path:
        return write_env(tmp_path / subdir if subdir else tmp_path, name, variables, header)

    return _make


@pytest.fixture
def db_defaults() -> Dict[str, str]:
    return dict(DB_DEFAULTS)


@pytest.fixture
def store() -> MemoryEnvStore:
    return MemoryEnvStore()


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    return StructuredLogger(name="gofr-dotenv-test", level=logging.CRITICAL)


@pytest.fixture
def fixtures_root(tmp_path: Path) -> Path:
    """Directory layouts covering every combination of base and overlay files."""
    root = tmp_path / "fixtures"

    write_env(root / "env_only", ".env", DB_DEFAULTS)

    write_env(root / "envlocal_only", ".env.local", DB_DEFAULTS)

    write_env(
        root / "env_and_envlocal",
        ".env",
        {"DB_HOST": "example.host", "DB_PORT": "3306", "DB_USER": "root", "DB_PASS": ""},
        header="# shared defaults",
    )
    write_env(
        root / "env_and_envlocal",
        ".env.local",
        {"DB_USER": "appdb_user", "DB_PASS": "appdb-pass"},
    )

    layered = root / "env_and_envlocal_and_appenv_and_appenvlocal"
    write_env(layered, ".env", {**DB_DEFAULTS, "DB_USER": "root", "APPLICATION_ENVIRONMENT": "production"})
    write_env(layered, ".env.local", {"DB_USER": "appdb_user"})
    write_env(layered, ".env-production", {"DB_USER": "appdb_admin", "DB_PASS": "prod-pass"})
    write_env(layered, ".env-production.local", {"DB_PASS": "appdb-password"})

    not_matching = root / "env_and_envlocal_and_unmatched_appenv"
    write_env(not_matching, ".env", {**DB_DEFAULTS, "APP_ENV": "staging"})
    write_env(not_matching, ".env.local", {"DB_PORT": "3306"})
    write_env(not_matching, ".env-production", {"DB_HOST": "prod.host"})

    write_env(root / "custom_filename", "my-app.vars", DB_DEFAULTS)
    write_env(root / "custom_filename", ".env", {"DB_HOST": "wrong.host"})

    return root
