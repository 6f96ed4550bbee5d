# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from toado import configuration
from toado.errors import DatabaseConnectionError
from toado.server import Server


def initialize() -> configuration.Configuration:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    return configuration.load_configuration()


def open_server(
    config: configuration.Configuration, override: Optional[str | Path] = None
) -> Server:
    """Open and initialize the database selected by `config` and `override`."""
    database_path = configuration.get_database_path(config, override)
    try:
        database_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatabaseConnectionError(
            f"cannot create data directory {database_path.parent}: {e}"
        ) from e

    server = Server.open(database_path, strict_mapping=config["strict_mapping"])
    try:
        server.init()
    except DatabaseConnectionError:
        server.close()
        raise
    return server


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.save_configuration(configuration.get_default_configuration())
