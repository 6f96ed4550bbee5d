# tests/test_query.py

from __future__ import annotations

import pytest

from toado.model.item_status import ItemStatus
from toado.model.table import Table
from toado.query.assignments import (
    AddTaskAssignmentQuery,
    DeleteTaskAssignmentQuery,
    SelectProjectTasksQuery,
    SelectTaskAssignmentsQuery,
    SelectTaskProjectsQuery,
)
from toado.query.columns import SomeCols
from toado.query.condition import (
    Between,
    Equal,
    GreaterOrEqual,
    Group,
    In,
    Like,
    NotEqual,
)
from toado.query.order import ALL_ROWS, Limit, OrderBy, OrderDir
from toado.query.projects import (
    AddProjectQuery,
    SelectProjectsQuery,
    UpdateProjectCols,
    UpdateProjectQuery,
)
from toado.query.query import CountQuery, Statement
from toado.query.search import search_condition
from toado.query.tasks import (
    AddTaskQuery,
    DeleteTaskQuery,
    SelectTasksQuery,
    UpdateTaskCols,
    UpdateTaskQuery,
)
from toado.query.update_action import NULL, UNTOUCHED, Set, from_optional, map_action


def test_add_task_skips_absent_values() -> None:
    statement = AddTaskQuery("dishes", 3).build()
    assert statement == Statement(
        "INSERT INTO tasks(name, priority, status) VALUES(?, ?, ?);",
        ("dishes", 3, 0),
    )


def test_add_task_with_every_column() -> None:
    statement = AddTaskQuery(
        "laundry",
        1,
        ItemStatus.COMPLETE,
        "2024-01-01",
        "2024-01-02",
        "weekly",
        "both loads",
    ).build()
    assert statement.sql == (
        "INSERT INTO tasks(name, priority, status, start_time, end_time, repeat, notes) "
        "VALUES(?, ?, ?, ?, ?, ?, ?);"
    )
    assert statement.params == (
        "laundry",
        1,
        1,
        "2024-01-01",
        "2024-01-02",
        "weekly",
        "both loads",
    )


def test_add_project_and_assignment() -> None:
    assert AddProjectQuery("home").build() == Statement(
        "INSERT INTO projects(name) VALUES(?);", ("home",)
    )
    assert AddTaskAssignmentQuery(1, 2).build() == Statement(
        "INSERT INTO task_assignments(task_id, project_id) VALUES(?, ?);", (1, 2)
    )


def test_select_tasks_defaults() -> None:
    assert SelectTasksQuery().build() == Statement(
        "SELECT * FROM tasks ORDER BY priority DESC LIMIT 10;"
    )


def test_select_projects_defaults() -> None:
    assert str(SelectProjectsQuery()) == "SELECT * FROM projects ORDER BY name ASC LIMIT 10;"


def test_select_with_condition_and_offset() -> None:
    statement = SelectTasksQuery(
        SomeCols("id", "name"),
        Like("name", "%milk%"),
        OrderBy.NAME,
        offset=20,
    ).build()
    assert statement == Statement(
        "SELECT id, name FROM tasks WHERE name LIKE ? ORDER BY name ASC LIMIT 10 OFFSET 20;",
        ("%milk%",),
    )


def test_select_explicit_limit_and_direction() -> None:
    statement = SelectTasksQuery(
        order_by=OrderBy.START_TIME, order_dir=OrderDir.DESC, limit=Limit(3)
    ).build()
    assert statement.sql == "SELECT * FROM tasks ORDER BY start_time DESC LIMIT 3;"


def test_select_all_rows_ignores_offset() -> None:
    statement = SelectTasksQuery(limit=ALL_ROWS, offset=5).build()
    assert statement.sql == "SELECT * FROM tasks ORDER BY priority DESC;"


def test_negative_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        Limit(-1)


def test_update_renders_set_and_null_skipping_untouched() -> None:
    update = UpdateTaskCols(name=Set("renamed"), start_time=NULL)
    statement = UpdateTaskQuery(update, Equal("id", 4)).build()
    assert statement == Statement(
        "UPDATE tasks SET name = ?, start_time = NULL WHERE id = ?;",
        ("renamed", 4),
    )


def test_update_status_only_stores_code() -> None:
    update = UpdateTaskCols.status_only(ItemStatus.ARCHIVED)
    statement = UpdateTaskQuery(update, Equal("id", 2)).build()
    assert statement == Statement("UPDATE tasks SET status = ? WHERE id = ?;", (2, 2))


def test_update_without_condition_touches_every_row() -> None:
    statement = UpdateProjectQuery(UpdateProjectCols(notes=Set("n")), None).build()
    assert statement == Statement("UPDATE projects SET notes = ?;", ("n",))


def test_has_updates() -> None:
    assert not UpdateTaskCols().has_updates()
    assert UpdateTaskCols(notes=NULL).has_updates()
    assert not UpdateProjectCols(name=UNTOUCHED).has_updates()


def test_delete_renders_optional_where() -> None:
    assert DeleteTaskQuery(None).build() == Statement("DELETE FROM tasks;")
    assert DeleteTaskQuery(In("id", [1, 2, 3])).build() == Statement(
        "DELETE FROM tasks WHERE id IN (?, ?, ?);", (1, 2, 3)
    )


def test_delete_single_assignment() -> None:
    statement = DeleteTaskAssignmentQuery.matching(1, 2).build()
    assert statement == Statement(
        "DELETE FROM task_assignments WHERE task_id = ? AND project_id = ?;", (1, 2)
    )


def test_conditions_chain_left_to_right_without_grouping() -> None:
    condition = (
        Equal("priority", 1).or_(Equal("priority", 2)).and_(NotEqual("status", 1))
    )
    fragment = condition.render()
    assert fragment.sql == "priority = ? OR priority = ? AND status != ?"
    assert fragment.params == (1, 2, 1)


def test_group_adds_parentheses() -> None:
    condition = Group(Equal("priority", 1).or_(Equal("priority", 2))).and_(
        GreaterOrEqual("id", 5)
    )
    fragment = condition.render()
    assert fragment.sql == "(priority = ? OR priority = ?) AND id >= ?"
    assert fragment.params == (1, 2, 5)


def test_between_binds_both_bounds() -> None:
    fragment = Between("priority", 1, 5).render()
    assert fragment.sql == "priority BETWEEN ? AND ?"
    assert fragment.params == (1, 5)


def test_values_are_never_interpolated() -> None:
    hostile = "x'; DROP TABLE tasks; --"
    statement = SelectTasksQuery(condition=Equal("name", hostile)).build()
    assert hostile not in statement.sql
    assert statement.params == (hostile,)


def test_select_task_assignments() -> None:
    statement = SelectTaskAssignmentsQuery(Equal("task_id", 1)).build()
    assert statement == Statement(
        "SELECT task_id, project_id FROM task_assignments WHERE task_id = ? ORDER BY id ASC;",
        (1,),
    )


def test_select_task_projects_joins_assignments() -> None:
    statement = SelectTaskProjectsQuery(7, SomeCols("id", "name")).build()
    assert statement == Statement(
        "SELECT projects.id, projects.name FROM projects "
        "INNER JOIN task_assignments ON task_assignments.project_id = projects.id "
        "WHERE task_assignments.task_id = ? ORDER BY projects.name ASC;",
        (7,),
    )


def test_select_project_tasks_joins_assignments() -> None:
    statement = SelectProjectTasksQuery(3).build()
    assert statement == Statement(
        "SELECT tasks.* FROM tasks "
        "INNER JOIN task_assignments ON task_assignments.task_id = tasks.id "
        "WHERE task_assignments.project_id = ? ORDER BY tasks.priority DESC;",
        (3,),
    )


@pytest.mark.parametrize(
    "term,expected_sql,expected_params",
    [
        ("12", "id = ?", (12,)),
        (" 12 ", "id = ?", (12,)),
        ("milk", "name LIKE ?", ("%milk%",)),
        ("12 eggs", "name LIKE ?", ("%12 eggs%",)),
        ("²", "name LIKE ?", ("%²%",)),
        ("①", "name LIKE ?", ("%①%",)),
    ],
)
def test_search_condition(term: str, expected_sql: str, expected_params: tuple) -> None:
    fragment = search_condition(term).render()
    assert fragment.sql == expected_sql
    assert fragment.params == expected_params


def test_update_action_helpers() -> None:
    assert from_optional(None) is UNTOUCHED
    assert from_optional(0) == Set(0)
    assert map_action(Set(2), lambda v: v * 2) == Set(4)
    assert map_action(NULL, lambda v: v * 2) is NULL


def test_count_query_renders_optional_where() -> None:
    assert CountQuery(Table.TASKS).build() == Statement("SELECT COUNT(*) FROM tasks;")
    assert CountQuery(Table.PROJECTS, Like("name", "%home%")).build() == Statement(
        "SELECT COUNT(*) FROM projects WHERE name LIKE ?;", ("%home%",)
    )
