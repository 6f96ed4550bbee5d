# SPDX-License-Identifier: MIT

from typing import Optional

from toado.model.item_status import ItemStatus

EMPTY_VALUE = "-"
COMPLETED_COLOR = "grey42"
ARCHIVED_COLOR = "grey23"


def display(value: Optional[object]) -> str:
    if value is None:
        return EMPTY_VALUE
    return str(value)


def status_label(status: Optional[ItemStatus]) -> str:
    if status is None:
        return EMPTY_VALUE
    return str(status).upper()


def status_color(status: Optional[ItemStatus]) -> Optional[str]:
    match status:
        case ItemStatus.COMPLETE:
            return COMPLETED_COLOR
        case ItemStatus.ARCHIVED:
            return ARCHIVED_COLOR
    return None


def list_footer(offset: Optional[int], count: int, total: int) -> str:
    """Position of a page of rows within the table, e.g. `10-20 of 42`."""
    start = offset if offset is not None else 0
    return f"{start}-{start + count} of {total}"
