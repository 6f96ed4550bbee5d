# SPDX-License-Identifier: MIT

from enum import StrEnum

DEFAULT_ROW_LIMIT = 10


class OrderBy(StrEnum):
    """Table column to order selection by"""

    ID = "id"
    NAME = "name"
    PRIORITY = "priority"
    START_TIME = "start_time"
    END_TIME = "end_time"

    def default_dir(self) -> "OrderDir":
        # Highest priority first, everything else smallest first
        if self is OrderBy.PRIORITY:
            return OrderDir.DESC
        return OrderDir.ASC


class OrderDir(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


class RowLimit:
    __slots__ = ()


class Limit(RowLimit):
    __slots__ = ("count",)
    __match_args__ = ("count",)

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("row limit cannot be negative")
        self.count = count

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Limit) and other.count == self.count

    def __hash__(self) -> int:
        return hash(("limit", self.count))

    def __repr__(self) -> str:
        return f"Limit({self.count})"


class AllRows(RowLimit):
    """No row cap. Any offset is ignored."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllRows)

    def __hash__(self) -> int:
        return hash("all")

    def __repr__(self) -> str:
        return "AllRows()"


ALL_ROWS = AllRows()
