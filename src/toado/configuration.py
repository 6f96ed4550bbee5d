# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "toado"
DATABASE_ENV_VAR = "TOADO_DATABASE"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATABASE_FILE_NAME = "database"


class Configuration(TypedDict):
    data_path: Optional[str]
    default_verbose: bool
    show_header: bool
    separate_rows: bool
    strict_mapping: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "default_verbose": False,
        "show_header": True,
        "separate_rows": False,
        "strict_mapping": False,
        "log_level": "WARNING",
    }


def load_configuration(path: Optional[Path] = None) -> Configuration:
    """
    Read the config file, filling in defaults for any key it does not set.

    A missing or empty file yields the default configuration.
    """
    config_path = path if path is not None else APP_CONFIG_PATH
    config = get_default_configuration()
    if not config_path.is_file():
        return config

    raw_config = load(config_path.read_text(), Loader=Loader)
    if raw_config is None:
        return config
    if not isinstance(raw_config, dict):
        raise ValueError(f"config file {config_path} must contain a mapping")

    for key in config:
        if key in raw_config:
            config[key] = raw_config[key]  # type: ignore[literal-required]
    return config


def save_configuration(config: Configuration, path: Optional[Path] = None) -> None:
    config_path = path if path is not None else APP_CONFIG_PATH
    config_path.write_text(dump(dict(config), Dumper=Dumper))


def get_database_path(
    config: Configuration, override: Optional[str | Path] = None
) -> Path:
    """
    Resolve the database file location.

    Precedence: explicit override, TOADO_DATABASE, the data_path config key,
    then the platform data directory.
    """
    if override is not None:
        return Path(override)
    env_path = os.environ.get(DATABASE_ENV_VAR)
    if env_path:
        return Path(env_path)
    if config["data_path"] is not None:
        return Path(config["data_path"]) / DATABASE_FILE_NAME
    return DATA_PATH / DATABASE_FILE_NAME
