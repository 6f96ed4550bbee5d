# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich import print

from toado import state as app_state
from toado.service.match import assign_matching, unassign_matching
from toado.terminal.error import exit_on_error
from toado.terminal.parse import parse_term_list

TERMS_HELP = "comma separated ids, id ranges like 3-5, or parts of names"


@exit_on_error
def assign(
    tasks: Annotated[str, typer.Argument(help=TERMS_HELP)],
    projects: Annotated[str, typer.Argument(help=TERMS_HELP)],
) -> None:
    """Assign every matched task to every matched project."""
    pairs = assign_matching(
        app_state.get_server(), parse_term_list(tasks), parse_term_list(projects)
    )
    print(f"added {len(pairs)} assignment{'s' if len(pairs) != 1 else ''}")


@exit_on_error
def unassign(
    tasks: Annotated[str, typer.Argument(help=TERMS_HELP)],
    projects: Annotated[str, typer.Argument(help=TERMS_HELP)],
) -> None:
    """Remove the assignments between the matched tasks and projects."""
    removed = unassign_matching(
        app_state.get_server(), parse_term_list(tasks), parse_term_list(projects)
    )
    print(f"removed {removed} assignment{'s' if removed != 1 else ''}")
