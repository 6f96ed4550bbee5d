# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import print

from toado import state as app_state
from toado.errors import MisuseError, StatementError
from toado.model.table import Table
from toado.query.columns import ALL_COLS
from toado.query.condition import Equal
from toado.query.order import ALL_ROWS, OrderBy
from toado.query.projects import UpdateProjectCols
from toado.query.search import search_condition
from toado.query.update_action import from_optional
from toado.service.match import match_single_project
from toado.terminal.custom_typer import AliasedTyperGroup
from toado.terminal.error import exit_on_error
from toado.terminal.parse import (
    DATETIME_HELP,
    parse_conditions,
    parse_datetime,
    parse_order_dir,
    parse_row_limit,
    update_action,
)
from toado.terminal.validate import validate_name, validate_project_order_by
from toado.view.views import project as project_report
from toado.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
@exit_on_error
def add(
    name: Annotated[str, typer.Argument(callback=validate_name)],
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    server = app_state.get_server()
    project_id = server.add_project(name, start, end, notes)
    __show_project(project_id)


@app.command("ls, l")
@exit_on_error
def ls(
    order_by: Annotated[
        Optional[OrderBy],
        typer.Argument(
            callback=validate_project_order_by,
            help="column to order by, defaults to name",
        ),
    ] = None,
    ascending: Annotated[Optional[bool], typer.Option("--asc/--desc")] = None,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-l", min=0, help="defaults to 10")
    ] = None,
    offset: Annotated[Optional[int], typer.Option("--offset", "-o", min=0)] = None,
    full: Annotated[
        bool, typer.Option("--full", "-a", help="list every row, ignores --offset")
    ] = False,
    where: Annotated[
        Optional[list[str]],
        typer.Option("--where", "-w", help="filter like 'name like %home%'"),
    ] = None,
    verbose: Annotated[
        Optional[bool], typer.Option("--verbose/--brief", "-v")
    ] = None,
) -> None:
    server = app_state.get_server()
    condition = parse_conditions(where)
    projects = server.select_projects(
        ALL_COLS,
        condition,
        order_by,
        parse_order_dir(ascending),
        parse_row_limit(limit, full),
        offset,
    )
    footer = None
    if not full:
        footer = (offset, server.get_table_row_count(Table.PROJECTS, condition))
    project_report.projects_view("projects", projects, __verbose(verbose), footer)


@app.command("search, s", no_args_is_help=True)
@exit_on_error
def search(
    term: Annotated[str, typer.Argument(help="id or part of a name")],
    verbose: Annotated[
        Optional[bool], typer.Option("--verbose/--brief", "-v")
    ] = None,
) -> None:
    server = app_state.get_server()
    projects = server.select_projects(
        ALL_COLS, search_condition(term), OrderBy.ID, limit=ALL_ROWS
    )
    match projects:
        case []:
            print(f"no projects match '{term}'")
        case [project]:
            server.populate_tasks(projects)
            project_report.single_project_view(project)
        case _:
            project_report.projects_view("search", projects, __verbose(verbose))


@app.command("tasks, t", no_args_is_help=True)
@exit_on_error
def tasks(
    term: Annotated[str, typer.Argument(help="project id or part of a name")],
    verbose: Annotated[
        Optional[bool], typer.Option("--verbose/--brief", "-v")
    ] = None,
) -> None:
    """List the tasks assigned to a project."""
    server = app_state.get_server()
    project = match_single_project(server, term)
    project_tasks = server.select_project_tasks(project["id"])
    task_report.tasks_view(str(project["name"]), project_tasks, __verbose(verbose))


@app.command("update, u", no_args_is_help=True)
@exit_on_error
def update(
    term: Annotated[str, typer.Argument(help="id or part of a name")],
    name: Annotated[
        Optional[str], typer.Option("--name", "-N", callback=validate_name)
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    clear_start: Annotated[bool, typer.Option("--clear-start")] = False,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    clear_end: Annotated[bool, typer.Option("--clear-end")] = False,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    clear_notes: Annotated[bool, typer.Option("--clear-notes")] = False,
) -> None:
    server = app_state.get_server()
    update_cols = UpdateProjectCols(
        name=from_optional(name),
        start_time=update_action(start, clear_start, "start"),
        end_time=update_action(end, clear_end, "end"),
        notes=update_action(notes, clear_notes, "notes"),
    )
    if not update_cols.has_updates():
        raise MisuseError("nothing to update, pass at least one option")

    project = match_single_project(server, term)
    server.update_project(Equal("id", project["id"]), update_cols)
    __show_project(project["id"])


@app.command("delete, d")
@exit_on_error
def delete(
    term: Annotated[
        Optional[str], typer.Argument(help="id or part of a name")
    ] = None,
) -> None:
    """Delete a project. Its task assignments are removed with it, the tasks are kept."""
    if term is None or term.strip() == "":
        raise MisuseError("a search term is required to delete a project")

    server = app_state.get_server()
    project = match_single_project(server, term)
    server.delete_project(Equal("id", project["id"]))
    print(f"deleted project {project['id']}: {project['name']}")


def __show_project(project_id: Optional[int]) -> None:
    server = app_state.get_server()
    if project_id is None:
        raise StatementError("project has no id")
    projects = server.select_projects(condition=Equal("id", project_id), limit=ALL_ROWS)
    if len(projects) == 0:
        raise StatementError(f"project {project_id} not found after writing it")
    server.populate_tasks(projects)
    project_report.single_project_view(projects[0])


def __verbose(verbose: Optional[bool]) -> bool:
    if verbose is None:
        return app_state.get_config()["default_verbose"]
    return verbose
