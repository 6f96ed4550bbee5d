# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import print

from toado import state as app_state
from toado.errors import MisuseError, StatementError
from toado.model.item_status import ItemStatus
from toado.model.table import Table
from toado.query.columns import ALL_COLS
from toado.query.condition import Equal
from toado.query.order import ALL_ROWS, OrderBy
from toado.query.search import search_condition
from toado.query.tasks import UpdateTaskCols
from toado.query.update_action import from_optional
from toado.service.match import match_single_task
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
from toado.terminal.validate import validate_name, validate_priority
from toado.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
@exit_on_error
def add(
    name: Annotated[str, typer.Argument(callback=validate_name)],
    priority: Annotated[
        int,
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="higher numbers are listed first",
        ),
    ] = 0,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    repeat: Annotated[
        Optional[str], typer.Option("--repeat", "-r", help="free form repeat rule")
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    server = app_state.get_server()
    task_id = server.add_task(
        name, priority, ItemStatus.INCOMPLETE, start, end, repeat, notes
    )
    __show_task(task_id)


@app.command("ls, l")
@exit_on_error
def ls(
    order_by: Annotated[
        Optional[OrderBy], typer.Argument(help="column to order by")
    ] = None,
    ascending: Annotated[
        Optional[bool],
        typer.Option("--asc/--desc", help="order direction, priority defaults to --desc"),
    ] = None,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-l", min=0, help="defaults to 10")
    ] = None,
    offset: Annotated[Optional[int], typer.Option("--offset", "-o", min=0)] = None,
    full: Annotated[
        bool, typer.Option("--full", "-a", help="list every row, ignores --offset")
    ] = False,
    where: Annotated[
        Optional[list[str]],
        typer.Option(
            "--where",
            "-w",
            help="filter like 'priority >= 3', accepts multiple filters",
        ),
    ] = None,
    verbose: Annotated[
        Optional[bool], typer.Option("--verbose/--brief", "-v")
    ] = None,
) -> None:
    server = app_state.get_server()
    condition = parse_conditions(where)
    tasks = server.select_tasks(
        ALL_COLS,
        condition,
        order_by,
        parse_order_dir(ascending),
        parse_row_limit(limit, full),
        offset,
    )
    footer = None
    if not full:
        footer = (offset, server.get_table_row_count(Table.TASKS, condition))
    task_report.tasks_view("tasks", tasks, __verbose(verbose), footer)


@app.command("search, s", no_args_is_help=True)
@exit_on_error
def search(
    term: Annotated[str, typer.Argument(help="id or part of a name")],
    verbose: Annotated[
        Optional[bool], typer.Option("--verbose/--brief", "-v")
    ] = None,
) -> None:
    server = app_state.get_server()
    tasks = server.select_tasks(
        ALL_COLS, search_condition(term), OrderBy.ID, limit=ALL_ROWS
    )
    match tasks:
        case []:
            print(f"no tasks match '{term}'")
        case [task]:
            server.populate_projects(tasks)
            task_report.single_task_view(task)
        case _:
            task_report.tasks_view("search", tasks, __verbose(verbose))


@app.command("update, u", no_args_is_help=True)
@exit_on_error
def update(
    term: Annotated[str, typer.Argument(help="id or part of a name")],
    name: Annotated[
        Optional[str], typer.Option("--name", "-N", callback=validate_name)
    ] = None,
    priority: Annotated[
        Optional[int],
        typer.Option("--priority", "-p", callback=validate_priority),
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
    repeat: Annotated[Optional[str], typer.Option("--repeat", "-r")] = None,
    clear_repeat: Annotated[bool, typer.Option("--clear-repeat")] = False,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    clear_notes: Annotated[bool, typer.Option("--clear-notes")] = False,
) -> None:
    server = app_state.get_server()
    update_cols = UpdateTaskCols(
        name=from_optional(name),
        priority=from_optional(priority),
        start_time=update_action(start, clear_start, "start"),
        end_time=update_action(end, clear_end, "end"),
        repeat=update_action(repeat, clear_repeat, "repeat"),
        notes=update_action(notes, clear_notes, "notes"),
    )
    if not update_cols.has_updates():
        raise MisuseError("nothing to update, pass at least one option")

    task = match_single_task(server, term)
    server.update_task(Equal("id", task["id"]), update_cols)
    __show_task(task["id"])


@app.command("check, c", no_args_is_help=True)
@exit_on_error
def check(
    term: Annotated[str, typer.Argument(help="id or part of a name")],
    incomplete: Annotated[
        bool, typer.Option("--incomplete", "-i", help="mark the task incomplete again")
    ] = False,
    archive: Annotated[bool, typer.Option("--archive")] = False,
) -> None:
    if incomplete and archive:
        raise typer.BadParameter("--incomplete and --archive cannot be used together")

    status = ItemStatus.COMPLETE
    if incomplete:
        status = ItemStatus.INCOMPLETE
    elif archive:
        status = ItemStatus.ARCHIVED

    server = app_state.get_server()
    task = match_single_task(server, term)
    server.update_task(Equal("id", task["id"]), UpdateTaskCols.status_only(status))
    print(f"{task['name']}: {status}")


@app.command("delete, d")
@exit_on_error
def delete(
    term: Annotated[
        Optional[str], typer.Argument(help="id or part of a name")
    ] = None,
) -> None:
    if term is None or term.strip() == "":
        raise MisuseError("a search term is required to delete a task")

    server = app_state.get_server()
    task = match_single_task(server, term)
    server.delete_task(Equal("id", task["id"]))
    print(f"deleted task {task['id']}: {task['name']}")


def __show_task(task_id: Optional[int]) -> None:
    server = app_state.get_server()
    if task_id is None:
        raise StatementError("task has no id")
    tasks = server.select_tasks(condition=Equal("id", task_id), limit=ALL_ROWS)
    if len(tasks) == 0:
        raise StatementError(f"task {task_id} not found after writing it")
    server.populate_projects(tasks)
    task_report.single_task_view(tasks[0])


def __verbose(verbose: Optional[bool]) -> bool:
    if verbose is None:
        return app_state.get_config()["default_verbose"]
    return verbose
