# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from toado.model.task import Task
from toado.time import iso_str_to_display_str
from toado.view.state import get_separate_rows
from toado.view.util import display, list_footer, status_color, status_label
from toado.view.views.header import header

COLUMNS = ["id", "name", "priority", "status"]
VERBOSE_COLUMNS = COLUMNS + ["start", "end", "repeat", "notes"]


def tasks_view(
    report_name: str,
    tasks: list[Task],
    verbose: bool = False,
    footer: Optional[tuple[Optional[int], int]] = None,
) -> None:
    """
    Print tasks as a table.

    `footer` is (offset, total rows in the table); when given, the position of
    this page within the table is printed below it.
    """
    header(report_name)

    columns = VERBOSE_COLUMNS if verbose else COLUMNS
    tasks_table = Table(box=box.SIMPLE, show_lines=get_separate_rows())
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = [
            display(task["id"]),
            display(task["name"]),
            display(task["priority"]),
            status_label(task["status"]),
        ]
        if verbose:
            row += [
                display(iso_str_to_display_str(task["start_time"])),
                display(iso_str_to_display_str(task["end_time"])),
                display(task["repeat"]),
                display(task["notes"]),
            ]
        tasks_table.add_row(*row, style=status_color(task["status"]))

    console = Console()
    console.print(tasks_table)
    if footer is not None:
        offset, total = footer
        console.print(f" {list_footer(offset, len(tasks), total)}")


def single_task_view(task: Task) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", display(task["id"]))
    task_table.add_row("name", display(task["name"]))
    task_table.add_row("priority", display(task["priority"]))
    task_table.add_row("status", status_label(task["status"]))
    if task["start_time"] is not None:
        task_table.add_row("start", display(iso_str_to_display_str(task["start_time"])))
    if task["end_time"] is not None:
        task_table.add_row("end", display(iso_str_to_display_str(task["end_time"])))
    if task["repeat"] is not None:
        task_table.add_row("repeats", task["repeat"])
    if task["projects"] is not None and len(task["projects"]) > 0:
        task_table.add_row(
            "projects", ", ".join(display(project["name"]) for project in task["projects"])
        )
    if task["notes"] is not None:
        task_table.add_row("notes", task["notes"])

    console = Console()
    console.print(task_table)
