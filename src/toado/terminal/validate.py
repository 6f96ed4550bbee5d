# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from toado.query.order import OrderBy


def validate_name(name: Optional[str]) -> Optional[str]:
    """Names may not start with a digit, so that search terms can tell ids from names."""
    if name is None:
        return None
    if name.strip() == "":
        raise typer.BadParameter("Name cannot be empty")
    if name[0].isdecimal():
        raise typer.BadParameter("Name cannot start with a digit")
    return name


def validate_priority(priority: Optional[int]) -> Optional[int]:
    if priority is None:
        return None
    if priority < 0:
        raise typer.BadParameter("Priority cannot be negative")
    return priority


def validate_project_order_by(order_by: Optional[OrderBy]) -> Optional[OrderBy]:
    if order_by is OrderBy.PRIORITY:
        raise typer.BadParameter("Projects have no priority column")
    return order_by
