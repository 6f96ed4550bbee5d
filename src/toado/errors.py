# SPDX-License-Identifier: MIT

from typing import Any, Optional


class ToadoError(Exception):
    pass


class DatabaseConnectionError(ToadoError):
    """The database file could not be opened or its schema initialized."""


class StatementError(ToadoError):
    """The database rejected a rendered statement."""

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        super().__init__(message)
        self.sql = sql


class MappingError(ToadoError):
    """A selected column value could not be decoded into its entity field."""

    def __init__(self, column: str, value: Any) -> None:
        super().__init__(f"cannot decode column '{column}' from value {value!r}")
        self.column = column
        self.value = value


class MisuseError(ToadoError):
    """An operation was requested that would produce a malformed statement."""


class NoMatchError(ToadoError):
    """A search term matched no task or project."""


class AmbiguousMatchError(ToadoError):
    """A search term matched more than one row where exactly one is required."""
