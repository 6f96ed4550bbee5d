# SPDX-License-Identifier: MIT

from typing import Any, Optional

from toado.model.table import Table
from toado.query.order import OrderBy
from toado.query.query import (
    AddQuery,
    DeleteQuery,
    SelectQuery,
    UpdateCols,
    UpdateQuery,
)
from toado.query.update_action import UNTOUCHED, UpdateAction


class AddProjectQuery(AddQuery):
    table = Table.PROJECTS

    def __init__(
        self,
        name: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        self.name = name
        self.start_time = start_time
        self.end_time = end_time
        self.notes = notes

    def key_value_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("name", self.name),
            ("start_time", self.start_time),
            ("end_time", self.end_time),
            ("notes", self.notes),
        ]


class UpdateProjectCols(UpdateCols):
    def __init__(
        self,
        name: UpdateAction = UNTOUCHED,
        start_time: UpdateAction = UNTOUCHED,
        end_time: UpdateAction = UNTOUCHED,
        notes: UpdateAction = UNTOUCHED,
    ) -> None:
        self.name = name
        self.start_time = start_time
        self.end_time = end_time
        self.notes = notes

    def actions(self) -> list[tuple[str, UpdateAction]]:
        return [
            ("name", self.name),
            ("start_time", self.start_time),
            ("end_time", self.end_time),
            ("notes", self.notes),
        ]


class UpdateProjectQuery(UpdateQuery):
    table = Table.PROJECTS


class DeleteProjectQuery(DeleteQuery):
    table = Table.PROJECTS


class SelectProjectsQuery(SelectQuery):
    table = Table.PROJECTS
    default_order_by = OrderBy.NAME
