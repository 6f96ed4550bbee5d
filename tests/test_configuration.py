# tests/test_configuration.py

from __future__ import annotations

from pathlib import Path

import pytest

from toado import configuration
from toado.initialize import initialize, open_server
from toado.model.table import Table


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = configuration.load_configuration(tmp_path / "nope.yaml")
    assert config == configuration.get_default_configuration()


def test_partial_file_is_filled_with_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("show_header: false\nlog_level: DEBUG\nunknown_key: 1\n")

    config = configuration.load_configuration(path)
    assert config["show_header"] is False
    assert config["log_level"] == "DEBUG"
    assert config["strict_mapping"] is False
    assert "unknown_key" not in config


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        configuration.load_configuration(path)


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    config = configuration.get_default_configuration()
    config["default_verbose"] = True
    config["data_path"] = str(tmp_path / "data")
    configuration.save_configuration(config, path)

    assert configuration.load_configuration(path) == config


def test_database_path_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "platform")
    monkeypatch.delenv(configuration.DATABASE_ENV_VAR, raising=False)
    config = configuration.get_default_configuration()

    assert configuration.get_database_path(config) == tmp_path / "platform" / "database"

    config["data_path"] = str(tmp_path / "configured")
    assert configuration.get_database_path(config) == tmp_path / "configured" / "database"

    monkeypatch.setenv(configuration.DATABASE_ENV_VAR, str(tmp_path / "env.sqlite3"))
    assert configuration.get_database_path(config) == tmp_path / "env.sqlite3"

    assert configuration.get_database_path(config, tmp_path / "cli.sqlite3") == (
        tmp_path / "cli.sqlite3"
    )


def test_initialize_writes_default_config(config_dir: Path) -> None:
    config = initialize()
    assert (config_dir / "config.yaml").is_file()
    assert config == configuration.get_default_configuration()


def test_open_server_creates_data_directory(config_dir: Path, tmp_path: Path) -> None:
    config = initialize()
    server = open_server(config)
    try:
        assert (tmp_path / "data" / "database").is_file()
        assert server.get_table_row_count(Table.TASKS) == 0
    finally:
        server.close()
