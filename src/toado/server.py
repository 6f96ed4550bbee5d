# SPDX-License-Identifier: MIT

import logging
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Iterable, Optional

from toado.errors import DatabaseConnectionError, MisuseError, StatementError
from toado.mapping import RowMapper
from toado.model.entity_id import EntityId
from toado.model.item_status import ItemStatus
from toado.model.project import Project
from toado.model.table import Table
from toado.model.task import Task
from toado.model.task_assignment import TaskAssignment
from toado.query.assignments import (
    AddTaskAssignmentQuery,
    DeleteTaskAssignmentQuery,
    SelectProjectTasksQuery,
    SelectTaskAssignmentsQuery,
    SelectTaskProjectsQuery,
)
from toado.query.columns import ALL_COLS, QueryCols
from toado.query.condition import Condition
from toado.query.order import OrderBy, OrderDir, RowLimit
from toado.query.projects import (
    AddProjectQuery,
    DeleteProjectQuery,
    SelectProjectsQuery,
    UpdateProjectCols,
    UpdateProjectQuery,
)
from toado.query.query import CountQuery, Statement, UpdateQuery
from toado.query.tasks import (
    AddTaskQuery,
    DeleteTaskQuery,
    SelectTasksQuery,
    UpdateTaskCols,
    UpdateTaskQuery,
)

logger = logging.getLogger(__name__)

SCHEMA = f"""
BEGIN;
CREATE TABLE IF NOT EXISTS {Table.TASKS}(
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    name TEXT NOT NULL,
    priority INTEGER NOT NULL,
    status INTEGER NOT NULL,
    start_time TEXT,
    end_time TEXT,
    repeat TEXT,
    notes TEXT
);
CREATE TABLE IF NOT EXISTS {Table.PROJECTS}(
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    name TEXT NOT NULL,
    start_time TEXT,
    end_time TEXT,
    notes TEXT
);
CREATE TABLE IF NOT EXISTS {Table.TASK_ASSIGNMENTS}(
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    task_id INTEGER NOT NULL,
    project_id INTEGER NOT NULL,
    FOREIGN KEY (task_id) REFERENCES {Table.TASKS}(id) ON DELETE CASCADE,
    FOREIGN KEY (project_id) REFERENCES {Table.PROJECTS}(id) ON DELETE CASCADE
);
COMMIT;
"""


class Server:
    """
    Owns the single SQLite connection of a toado process.

    Every public method renders one statement, executes it and returns the
    mapped result. Failures reported by SQLite are raised as StatementError.
    """

    def __init__(self, connection: sqlite3.Connection, strict_mapping: bool = False) -> None:
        self.connection = connection
        self.mapper = RowMapper(strict=strict_mapping)

    @classmethod
    def open(cls, file_path: str | Path, strict_mapping: bool = False) -> "Server":
        """Open the database file, creating it if it does not exist."""
        try:
            connection = sqlite3.connect(str(file_path), isolation_level=None)
            connection.row_factory = sqlite3.Row
            connection.execute("PRAGMA foreign_keys = ON;")
        except sqlite3.Error as e:
            raise DatabaseConnectionError(f"cannot open database {file_path}: {e}") from e
        logger.info("Opened database %s", file_path)
        return cls(connection, strict_mapping=strict_mapping)

    def init(self) -> None:
        """Create the tables if they do not exist yet."""
        try:
            self.connection.execute("PRAGMA foreign_keys = ON;")
            self.connection.executescript(SCHEMA)
        except sqlite3.Error as e:
            if self.connection.in_transaction:
                self.connection.execute("ROLLBACK;")
            raise DatabaseConnectionError(f"cannot initialize database: {e}") from e
        logger.info("Database schema ready")

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> "Server":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def __execute(self, statement: Statement) -> sqlite3.Cursor:
        logger.debug("Executing %s params=%s", statement.sql, statement.params)
        try:
            return self.connection.execute(statement.sql, statement.params)
        except sqlite3.Error as e:
            logger.warning("Statement failed: %s (%s)", statement.sql, e)
            raise StatementError(str(e), statement.sql) from e

    def __execute_update(self, query: UpdateQuery) -> int:
        if not query.update.has_updates():
            raise MisuseError("update requires at least one column to change")
        return self.__execute(query.build()).rowcount

    #
    # Tasks
    #

    def add_task(
        self,
        name: str,
        priority: int,
        status: ItemStatus = ItemStatus.INCOMPLETE,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        repeat: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> EntityId:
        """Add a new task. Returns the id the database assigned to it."""
        query = AddTaskQuery(name, priority, status, start_time, end_time, repeat, notes)
        return self.__last_row_id(self.__execute(query.build()))

    def update_task(self, condition: Optional[Condition], update: UpdateTaskCols) -> int:
        """
        Update tasks matching `condition`. A None condition updates every task.
        Returns the number of rows changed.
        """
        return self.__execute_update(UpdateTaskQuery(update, condition))

    def delete_task(self, condition: Optional[Condition]) -> int:
        """
        Delete tasks matching `condition`. A None condition deletes every task.
        Returns the number of rows deleted.
        """
        return self.__execute(DeleteTaskQuery(condition).build()).rowcount

    def select_tasks(
        self,
        cols: QueryCols = ALL_COLS,
        condition: Optional[Condition] = None,
        order_by: Optional[OrderBy] = None,
        order_dir: Optional[OrderDir] = None,
        limit: Optional[RowLimit] = None,
        offset: Optional[int] = None,
    ) -> list[Task]:
        query = SelectTasksQuery(cols, condition, order_by, order_dir, limit, offset)
        return [self.mapper.task(row) for row in self.__execute(query.build()).fetchall()]

    #
    # Projects
    #

    def add_project(
        self,
        name: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> EntityId:
        query = AddProjectQuery(name, start_time, end_time, notes)
        return self.__last_row_id(self.__execute(query.build()))

    def update_project(
        self, condition: Optional[Condition], update: UpdateProjectCols
    ) -> int:
        return self.__execute_update(UpdateProjectQuery(update, condition))

    def delete_project(self, condition: Optional[Condition]) -> int:
        return self.__execute(DeleteProjectQuery(condition).build()).rowcount

    def select_projects(
        self,
        cols: QueryCols = ALL_COLS,
        condition: Optional[Condition] = None,
        order_by: Optional[OrderBy] = None,
        order_dir: Optional[OrderDir] = None,
        limit: Optional[RowLimit] = None,
        offset: Optional[int] = None,
    ) -> list[Project]:
        query = SelectProjectsQuery(cols, condition, order_by, order_dir, limit, offset)
        return [
            self.mapper.project(row) for row in self.__execute(query.build()).fetchall()
        ]

    #
    # Assignments
    #

    def assign_task(self, task_id: EntityId, project_id: EntityId) -> None:
        """Link a task to a project. Assigning the same pair twice adds a second row."""
        self.__execute(AddTaskAssignmentQuery(task_id, project_id).build())

    def unassign_task(self, task_id: EntityId, project_id: EntityId) -> int:
        """Remove every link between a task and a project."""
        statement = DeleteTaskAssignmentQuery.matching(task_id, project_id).build()
        return self.__execute(statement).rowcount

    def batch_assign_tasks(self, pairs: Iterable[tuple[EntityId, EntityId]]) -> None:
        for task_id, project_id in pairs:
            self.assign_task(task_id, project_id)

    def batch_unassign_tasks(self, pairs: Iterable[tuple[EntityId, EntityId]]) -> int:
        return sum(
            self.unassign_task(task_id, project_id) for task_id, project_id in pairs
        )

    def select_task_assignments(
        self, condition: Optional[Condition] = None
    ) -> list[TaskAssignment]:
        statement = SelectTaskAssignmentsQuery(condition).build()
        return [
            self.mapper.task_assignment(row)
            for row in self.__execute(statement).fetchall()
        ]

    def select_task_projects(
        self, task_id: EntityId, cols: QueryCols = ALL_COLS
    ) -> list[Project]:
        statement = SelectTaskProjectsQuery(task_id, cols).build()
        return [self.mapper.project(row) for row in self.__execute(statement).fetchall()]

    def select_project_tasks(
        self, project_id: EntityId, cols: QueryCols = ALL_COLS
    ) -> list[Task]:
        statement = SelectProjectTasksQuery(project_id, cols).build()
        return [self.mapper.task(row) for row in self.__execute(statement).fetchall()]

    def populate_projects(self, tasks: list[Task]) -> list[Task]:
        """Fill in the projects list of every task that has an id."""
        for task in tasks:
            if task["id"] is not None:
                task["projects"] = self.select_task_projects(task["id"])
        return tasks

    def populate_tasks(self, projects: list[Project]) -> list[Project]:
        for project in projects:
            if project["id"] is not None:
                project["tasks"] = self.select_project_tasks(project["id"])
        return projects

    #
    # Tables
    #

    def get_table_row_count(self, table: Table, condition: Optional[Condition] = None) -> int:
        """Rows in `table`, or only those matching `condition` when one is given."""
        (count,) = self.__execute(CountQuery(table, condition).build()).fetchone()
        return int(count)

    def __last_row_id(self, cursor: sqlite3.Cursor) -> EntityId:
        row_id = cursor.lastrowid
        if row_id is None:
            raise StatementError("database did not return the id of the inserted row")
        return row_id
