# SPDX-License-Identifier: MIT

from typing import Any, Optional

from toado.model.entity_id import EntityId
from toado.model.table import Table
from toado.query.columns import ALL_COLS, AllCols, QueryCols, SomeCols
from toado.query.condition import Condition, Equal
from toado.query.order import ALL_ROWS, OrderBy, OrderDir
from toado.query.query import AddQuery, DeleteQuery, SelectQuery


class AddTaskAssignmentQuery(AddQuery):
    table = Table.TASK_ASSIGNMENTS

    def __init__(self, task_id: EntityId, project_id: EntityId) -> None:
        self.task_id = task_id
        self.project_id = project_id

    def key_value_pairs(self) -> list[tuple[str, Any]]:
        return [("task_id", self.task_id), ("project_id", self.project_id)]


class DeleteTaskAssignmentQuery(DeleteQuery):
    table = Table.TASK_ASSIGNMENTS

    @classmethod
    def matching(cls, task_id: EntityId, project_id: EntityId) -> "DeleteTaskAssignmentQuery":
        return cls(Equal("task_id", task_id).and_(Equal("project_id", project_id)))


class SelectTaskAssignmentsQuery(SelectQuery):
    table = Table.TASK_ASSIGNMENTS
    default_order_by = OrderBy.ID

    def __init__(self, condition: Optional[Condition] = None) -> None:
        super().__init__(
            SomeCols("task_id", "project_id"), condition, limit=ALL_ROWS
        )


class JoinedSelectQuery(SelectQuery):
    """
    Selects rows of `table` linked through task_assignments to one row of the
    other table. Column names are qualified with `table` so that columns shared
    with the join table stay unambiguous.
    """

    join_col: str
    filter_col: str

    def __init__(
        self,
        linked_id: EntityId,
        cols: QueryCols = ALL_COLS,
        order_by: Optional[OrderBy] = None,
        order_dir: Optional[OrderDir] = None,
    ) -> None:
        super().__init__(
            cols,
            Equal(f"{Table.TASK_ASSIGNMENTS}.{self.filter_col}", linked_id),
            order_by,
            order_dir,
            ALL_ROWS,
        )

    def source(self) -> str:
        return (
            f"{self.table} INNER JOIN {Table.TASK_ASSIGNMENTS} "
            f"ON {Table.TASK_ASSIGNMENTS}.{self.join_col} = {self.table}.id"
        )

    def render_cols(self) -> str:
        match self.cols:
            case SomeCols():
                return ", ".join(f"{self.table}.{col}" for col in self.cols.cols)
            case AllCols():
                return f"{self.table}.*"
        raise TypeError(f"unknown columns {self.cols!r}")

    def order_column(self, order_by: OrderBy) -> str:
        return f"{self.table}.{order_by}"


class SelectTaskProjectsQuery(JoinedSelectQuery):
    """Projects a task is assigned to."""

    table = Table.PROJECTS
    default_order_by = OrderBy.NAME
    join_col = "project_id"
    filter_col = "task_id"


class SelectProjectTasksQuery(JoinedSelectQuery):
    """Tasks assigned to a project."""

    table = Table.TASKS
    default_order_by = OrderBy.PRIORITY
    join_col = "task_id"
    filter_col = "project_id"
