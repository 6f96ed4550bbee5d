# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Optional

from toado.model.table import Table
from toado.query.columns import ALL_COLS, QueryCols
from toado.query.condition import Condition
from toado.query.order import (
    DEFAULT_ROW_LIMIT,
    AllRows,
    Limit,
    OrderBy,
    OrderDir,
    RowLimit,
)
from toado.query.update_action import Null, Set, Untouched, UpdateAction, is_untouched


class Statement(NamedTuple):
    sql: str
    params: tuple[Any, ...] = ()

    def __str__(self) -> str:
        return self.sql


class Query(ABC):
    table: Table

    @abstractmethod
    def build(self) -> Statement: ...

    def __str__(self) -> str:
        return self.build().sql


def _where(condition: Optional[Condition]) -> tuple[str, tuple[Any, ...]]:
    if condition is None:
        return "", ()
    fragment = condition.render()
    return f" WHERE {fragment.sql}", fragment.params


class AddQuery(Query):
    @abstractmethod
    def key_value_pairs(self) -> list[tuple[str, Any]]:
        """Columns to insert, in order, with their values. Absent values are skipped."""

    def build(self) -> Statement:
        pairs = [(col, value) for col, value in self.key_value_pairs() if value is not None]
        cols = ", ".join(col for col, _ in pairs)
        placeholders = ", ".join("?" for _ in pairs)
        return Statement(
            f"INSERT INTO {self.table}({cols}) VALUES({placeholders});",
            tuple(value for _, value in pairs),
        )


class DeleteQuery(Query):
    """Deletes every row matching the condition, or every row when it is None."""

    def __init__(self, condition: Optional[Condition]) -> None:
        self.condition = condition

    def build(self) -> Statement:
        where, params = _where(self.condition)
        return Statement(f"DELETE FROM {self.table}{where};", params)


class UpdateCols(ABC):
    @abstractmethod
    def actions(self) -> list[tuple[str, UpdateAction]]: ...

    def has_updates(self) -> bool:
        return any(not is_untouched(action) for _, action in self.actions())


class UpdateQuery(Query):
    """
    Updates every row matching the condition, or every row when it is None.

    Callers must make sure at least one column is not Untouched, otherwise the
    rendered statement has an empty SET list.
    """

    def __init__(self, update: UpdateCols, condition: Optional[Condition]) -> None:
        self.update = update
        self.condition = condition

    def set_clause(self) -> tuple[str, tuple[Any, ...]]:
        assignments: list[str] = []
        params: list[Any] = []
        for col, action in self.update.actions():
            match action:
                case Set(value):
                    assignments.append(f"{col} = ?")
                    params.append(value)
                case Null():
                    assignments.append(f"{col} = NULL")
                case Untouched():
                    continue
        return ", ".join(assignments), tuple(params)

    def build(self) -> Statement:
        assignments, set_params = self.set_clause()
        where, where_params = _where(self.condition)
        return Statement(
            f"UPDATE {self.table} SET {assignments}{where};",
            set_params + where_params,
        )


class SelectQuery(Query):
    default_order_by: OrderBy

    def __init__(
        self,
        cols: QueryCols = ALL_COLS,
        condition: Optional[Condition] = None,
        order_by: Optional[OrderBy] = None,
        order_dir: Optional[OrderDir] = None,
        limit: Optional[RowLimit] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.cols = cols
        self.condition = condition
        self.order_by = order_by
        self.order_dir = order_dir
        self.limit = limit
        self.offset = offset

    def resolve_order(self) -> tuple[OrderBy, OrderDir]:
        order_by = self.order_by if self.order_by is not None else self.default_order_by
        order_dir = self.order_dir if self.order_dir is not None else order_by.default_dir()
        return order_by, order_dir

    def resolve_pagination(self) -> tuple[Optional[int], Optional[int]]:
        """Row cap and offset to render. Both are None when selecting all rows."""
        match self.limit:
            case AllRows():
                return None, None
            case Limit(count):
                return count, self.offset
            case None:
                return DEFAULT_ROW_LIMIT, self.offset
        raise TypeError(f"unknown row limit {self.limit!r}")

    def source(self) -> str:
        return str(self.table)

    def render_cols(self) -> str:
        return self.cols.render()

    def order_column(self, order_by: OrderBy) -> str:
        return str(order_by)

    def build(self) -> Statement:
        where, params = _where(self.condition)
        order_by, order_dir = self.resolve_order()
        limit, offset = self.resolve_pagination()

        sql = f"SELECT {self.render_cols()} FROM {self.source()}{where}"
        sql += f" ORDER BY {self.order_column(order_by)} {order_dir}"
        if limit is not None:
            sql += f" LIMIT {int(limit)}"
            if offset is not None:
                sql += f" OFFSET {int(offset)}"
        return Statement(f"{sql};", params)


class CountQuery(Query):
    """Counts the rows of a table matching the condition, or all of them when it is None."""

    def __init__(self, table: Table, condition: Optional[Condition] = None) -> None:
        self.table = table
        self.condition = condition

    def build(self) -> Statement:
        where, params = _where(self.condition)
        return Statement(f"SELECT COUNT(*) FROM {self.table}{where};", params)
