# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from toado.server import Server


@pytest.fixture()
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "toado.sqlite3"


@pytest.fixture()
def server(database_path: Path) -> Iterator[Server]:
    """Lenient server over a fresh database file per test."""
    with Server.open(database_path) as server:
        server.init()
        yield server


@pytest.fixture()
def strict_server(database_path: Path) -> Iterator[Server]:
    with Server.open(database_path, strict_mapping=True) as server:
        server.init()
        yield server


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the configuration and data directories into tmp_path so commands
    never touch the user's real files.
    """
    from toado import configuration

    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.delenv(configuration.DATABASE_ENV_VAR, raising=False)
    return config_path
