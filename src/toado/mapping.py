# SPDX-License-Identifier: MIT

import logging
import sqlite3
from typing import Any, Callable, Optional, TypeVar

from toado.errors import MappingError
from toado.model.item_status import ItemStatus
from toado.model.project import Project
from toado.model.task import Task
from toado.model.task_assignment import TaskAssignment

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")
    return value


def decode_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value


def decode_status(value: Any) -> ItemStatus:
    return ItemStatus.from_code(decode_int(value))


class RowMapper:
    """
    Converts result rows into entities.

    A field is None when its column was not selected, holds NULL, or holds a
    value of the wrong storage type. In strict mode the last case raises
    MappingError instead.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def field(
        self, row: sqlite3.Row, column: str, decode: Callable[[Any], T]
    ) -> Optional[T]:
        if column not in row.keys():
            return None
        value = row[column]
        if value is None:
            return None
        try:
            return decode(value)
        except (TypeError, ValueError) as e:
            if self.strict:
                raise MappingError(column, value) from e
            logger.debug("Leaving %s absent: %s", column, e)
            return None

    def task(self, row: sqlite3.Row) -> Task:
        return Task(
            id=self.field(row, "id", decode_int),
            name=self.field(row, "name", decode_str),
            priority=self.field(row, "priority", decode_int),
            status=self.field(row, "status", decode_status),
            start_time=self.field(row, "start_time", decode_str),
            end_time=self.field(row, "end_time", decode_str),
            repeat=self.field(row, "repeat", decode_str),
            notes=self.field(row, "notes", decode_str),
            projects=None,
        )

    def project(self, row: sqlite3.Row) -> Project:
        return Project(
            id=self.field(row, "id", decode_int),
            name=self.field(row, "name", decode_str),
            start_time=self.field(row, "start_time", decode_str),
            end_time=self.field(row, "end_time", decode_str),
            notes=self.field(row, "notes", decode_str),
            tasks=None,
        )

    def task_assignment(self, row: sqlite3.Row) -> TaskAssignment:
        return TaskAssignment(
            task_id=self.field(row, "task_id", decode_int),
            project_id=self.field(row, "project_id", decode_int),
        )
