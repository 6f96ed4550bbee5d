# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from toado.configuration import Configuration, get_default_configuration
from toado.server import Server

_server: ContextVar[Optional[Server]] = ContextVar("server", default=None)
_config: ContextVar[Optional[Configuration]] = ContextVar("config", default=None)


def set_server(server: Server) -> None:
    _server.set(server)


def get_server() -> Server:
    server = _server.get()
    if server is None:
        raise RuntimeError("database server has not been opened")
    return server


def set_config(config: Configuration) -> None:
    _config.set(config)


def get_config() -> Configuration:
    config = _config.get()
    if config is None:
        return get_default_configuration()
    return config
