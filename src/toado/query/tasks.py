# SPDX-License-Identifier: MIT

from typing import Any, Optional

from toado.model.item_status import ItemStatus
from toado.model.table import Table
from toado.query.order import OrderBy
from toado.query.query import (
    AddQuery,
    DeleteQuery,
    SelectQuery,
    UpdateCols,
    UpdateQuery,
)
from toado.query.update_action import UNTOUCHED, Set, UpdateAction, map_action


class AddTaskQuery(AddQuery):
    table = Table.TASKS

    def __init__(
        self,
        name: str,
        priority: int,
        status: ItemStatus = ItemStatus.INCOMPLETE,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        repeat: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        self.name = name
        self.priority = priority
        self.status = status
        self.start_time = start_time
        self.end_time = end_time
        self.repeat = repeat
        self.notes = notes

    def key_value_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("name", self.name),
            ("priority", self.priority),
            ("status", self.status.code),
            ("start_time", self.start_time),
            ("end_time", self.end_time),
            ("repeat", self.repeat),
            ("notes", self.notes),
        ]


class UpdateTaskCols(UpdateCols):
    def __init__(
        self,
        name: UpdateAction = UNTOUCHED,
        priority: UpdateAction = UNTOUCHED,
        status: UpdateAction = UNTOUCHED,
        start_time: UpdateAction = UNTOUCHED,
        end_time: UpdateAction = UNTOUCHED,
        repeat: UpdateAction = UNTOUCHED,
        notes: UpdateAction = UNTOUCHED,
    ) -> None:
        self.name = name
        self.priority = priority
        self.status = status
        self.start_time = start_time
        self.end_time = end_time
        self.repeat = repeat
        self.notes = notes

    @classmethod
    def status_only(cls, status: ItemStatus) -> "UpdateTaskCols":
        return cls(status=Set(status))

    def actions(self) -> list[tuple[str, UpdateAction]]:
        return [
            ("name", self.name),
            ("priority", self.priority),
            ("status", map_action(self.status, lambda status: ItemStatus(status).code)),
            ("start_time", self.start_time),
            ("end_time", self.end_time),
            ("repeat", self.repeat),
            ("notes", self.notes),
        ]


class UpdateTaskQuery(UpdateQuery):
    table = Table.TASKS


class DeleteTaskQuery(DeleteQuery):
    table = Table.TASKS


class SelectTasksQuery(SelectQuery):
    table = Table.TASKS
    default_order_by = OrderBy.PRIORITY
