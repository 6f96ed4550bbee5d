# SPDX-License-Identifier: MIT

import functools
import logging
from typing import Callable, ParamSpec, TypeVar

import typer
from rich.console import Console

from toado.errors import ToadoError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def print_error(message: str) -> None:
    Console(stderr=True).print(f"[red]error:[/red] {message}", highlight=False)


def exit_on_error(command: Callable[P, R]) -> Callable[P, R]:
    """Report library errors raised by a command and exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return command(*args, **kwargs)
        except ToadoError as e:
            logger.debug("command failed", exc_info=True)
            print_error(str(e))
            raise typer.Exit(1) from e

    return wrapper
