# SPDX-License-Identifier: MIT

from toado.errors import AmbiguousMatchError, NoMatchError
from toado.model.entity_id import EntityId
from toado.model.project import Project
from toado.model.task import Task
from toado.query.columns import SomeCols
from toado.query.order import ALL_ROWS, OrderBy
from toado.query.search import search_condition
from toado.server import Server


def create_id_pairs(
    task_ids: list[EntityId], project_ids: list[EntityId]
) -> list[tuple[EntityId, EntityId]]:
    """Pair every task with every project."""
    return [(task_id, project_id) for task_id in task_ids for project_id in project_ids]


def match_tasks(server: Server, term: str) -> list[Task]:
    tasks = server.select_tasks(
        SomeCols("id", "name"),
        search_condition(term),
        OrderBy.NAME,
        limit=ALL_ROWS,
    )
    if len(tasks) == 0:
        raise NoMatchError(f"no tasks match '{term}'")
    return tasks


def match_projects(server: Server, term: str) -> list[Project]:
    projects = server.select_projects(
        SomeCols("id", "name"),
        search_condition(term),
        OrderBy.NAME,
        limit=ALL_ROWS,
    )
    if len(projects) == 0:
        raise NoMatchError(f"no projects match '{term}'")
    return projects


def match_single_task_and_project(
    server: Server, task_term: str, project_term: str
) -> tuple[Task, Project]:
    """First task and first project, by name, matching the respective terms."""
    return match_tasks(server, task_term)[0], match_projects(server, project_term)[0]


def assign_matching(
    server: Server, task_terms: list[str], project_terms: list[str]
) -> list[tuple[EntityId, EntityId]]:
    """
    Assign the first task matching each of `task_terms` to the first project
    matching each of `project_terms`. Returns the (task id, project id) pairs.
    """
    pairs = __resolve_pairs(server, task_terms, project_terms)
    server.batch_assign_tasks(pairs)
    return pairs


def unassign_matching(
    server: Server, task_terms: list[str], project_terms: list[str]
) -> int:
    """Returns the number of assignment rows removed."""
    pairs = __resolve_pairs(server, task_terms, project_terms)
    return server.batch_unassign_tasks(pairs)


def __resolve_pairs(
    server: Server, task_terms: list[str], project_terms: list[str]
) -> list[tuple[EntityId, EntityId]]:
    task_ids: list[EntityId] = []
    for term in task_terms:
        task_id = match_tasks(server, term)[0]["id"]
        if task_id is not None and task_id not in task_ids:
            task_ids.append(task_id)

    project_ids: list[EntityId] = []
    for term in project_terms:
        project_id = match_projects(server, term)[0]["id"]
        if project_id is not None and project_id not in project_ids:
            project_ids.append(project_id)

    return create_id_pairs(task_ids, project_ids)


def match_single_task(server: Server, term: str) -> Task:
    """The only task matching `term`."""
    tasks = match_tasks(server, term)
    if len(tasks) > 1:
        raise AmbiguousMatchError(
            f"'{term}' matches {len(tasks)} tasks, use an id instead"
        )
    return tasks[0]


def match_single_project(server: Server, term: str) -> Project:
    projects = match_projects(server, term)
    if len(projects) > 1:
        raise AmbiguousMatchError(
            f"'{term}' matches {len(projects)} projects, use an id instead"
        )
    return projects[0]
