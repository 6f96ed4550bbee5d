# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from toado.model.project import Project
from toado.time import iso_str_to_display_str
from toado.view.state import get_separate_rows
from toado.view.util import display, list_footer
from toado.view.views.header import header

COLUMNS = ["id", "name", "start", "end"]
VERBOSE_COLUMNS = COLUMNS + ["notes"]


def projects_view(
    report_name: str,
    projects: list[Project],
    verbose: bool = False,
    footer: Optional[tuple[Optional[int], int]] = None,
) -> None:
    header(report_name)

    columns = VERBOSE_COLUMNS if verbose else COLUMNS
    projects_table = Table(box=box.SIMPLE, show_lines=get_separate_rows())
    for column in columns:
        projects_table.add_column(column)

    for project in projects:
        row = [
            display(project["id"]),
            display(project["name"]),
            display(iso_str_to_display_str(project["start_time"])),
            display(iso_str_to_display_str(project["end_time"])),
        ]
        if verbose:
            row.append(display(project["notes"]))
        projects_table.add_row(*row)

    console = Console()
    console.print(projects_table)
    if footer is not None:
        offset, total = footer
        console.print(f" {list_footer(offset, len(projects), total)}")


def single_project_view(project: Project) -> None:
    header("project")

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")

    project_table.add_row("id", display(project["id"]))
    project_table.add_row("name", display(project["name"]))
    if project["start_time"] is not None:
        project_table.add_row("start", display(iso_str_to_display_str(project["start_time"])))
    if project["end_time"] is not None:
        project_table.add_row("end", display(iso_str_to_display_str(project["end_time"])))
    if project["tasks"] is not None and len(project["tasks"]) > 0:
        project_table.add_row(
            "tasks", ", ".join(display(task["name"]) for task in project["tasks"])
        )
    if project["notes"] is not None:
        project_table.add_row("notes", project["notes"])

    console = Console()
    console.print(project_table)
