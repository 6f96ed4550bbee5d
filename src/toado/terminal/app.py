# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer

from toado import state as app_state
from toado.errors import ToadoError
from toado.initialize import initialize, open_server
from toado.logging_setup import setup_logging
from toado.terminal import project, task
from toado.terminal.assignment import assign, unassign
from toado.terminal.custom_typer import OrderedAliasedTyperGroup
from toado.terminal.error import print_error
from toado.view import state as view_state

logger = logging.getLogger(__name__)

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="toado - tasks and projects in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t", help="add, list and change tasks")
app.add_typer(project.app, name="project, p", help="add, list and change projects")
app.command(name="assign, as")(assign)
app.command(name="unassign, un")(unassign)


@app.callback()
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Optional[str],
        typer.Option(
            "--file",
            "-f",
            help="database file to use instead of the configured one",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """
    toado - tasks and projects in the CLI

    Global options that apply to all commands.
    """
    try:
        config = initialize()
    except (OSError, ValueError) as e:
        print_error(f"cannot load configuration: {e}")
        raise typer.Exit(1) from e

    setup_logging(log_level if log_level is not None else config["log_level"])
    logger.debug("loaded configuration %s", config)
    app_state.set_config(config)
    view_state.set_show_header(config["show_header"] and not no_header)
    view_state.set_separate_rows(config["separate_rows"])

    try:
        server = open_server(config, file)
    except ToadoError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    app_state.set_server(server)
    ctx.call_on_close(server.close)


def run() -> None:
    app()
