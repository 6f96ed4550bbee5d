# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, NamedTuple


class Fragment(NamedTuple):
    sql: str
    params: tuple[Any, ...]


class Connective(StrEnum):
    AND = "AND"
    OR = "OR"


class Condition(ABC):
    """
    A boolean condition used to scope select, update and delete queries.

    Values are never interpolated into the rendered text; each one becomes a
    `?` placeholder and is returned alongside the text as a bound parameter.
    """

    @abstractmethod
    def render(self) -> Fragment: ...

    def and_(self, condition: "Condition") -> "Conditions":
        return Conditions(self).and_(condition)

    def or_(self, condition: "Condition") -> "Conditions":
        return Conditions(self).or_(condition)


class Comparison(Condition):
    operator: str

    def __init__(self, col: str, value: Any) -> None:
        self.col = col
        self.value = value

    def render(self) -> Fragment:
        return Fragment(f"{self.col} {self.operator} ?", (self.value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.col!r}, {self.value!r})"


class Equal(Comparison):
    operator = "="


class NotEqual(Comparison):
    operator = "!="


class GreaterThan(Comparison):
    operator = ">"


class LessThan(Comparison):
    operator = "<"


class GreaterOrEqual(Comparison):
    operator = ">="


class LessOrEqual(Comparison):
    operator = "<="


class Like(Comparison):
    operator = "LIKE"


class Between(Condition):
    def __init__(self, col: str, low: Any, high: Any) -> None:
        self.col = col
        self.low = low
        self.high = high

    def render(self) -> Fragment:
        return Fragment(f"{self.col} BETWEEN ? AND ?", (self.low, self.high))

    def __repr__(self) -> str:
        return f"Between({self.col!r}, {self.low!r}, {self.high!r})"


class In(Condition):
    def __init__(self, col: str, values: list[Any]) -> None:
        self.col = col
        self.values = list(values)

    def render(self) -> Fragment:
        placeholders = ", ".join("?" for _ in self.values)
        return Fragment(f"{self.col} IN ({placeholders})", tuple(self.values))

    def __repr__(self) -> str:
        return f"In({self.col!r}, {self.values!r})"


class Group(Condition):
    """Wraps a condition in parentheses."""

    def __init__(self, condition: Condition) -> None:
        self.condition = condition

    def render(self) -> Fragment:
        fragment = self.condition.render()
        return Fragment(f"({fragment.sql})", fragment.params)


class Conditions(Condition):
    """
    A chain of conditions joined left to right by AND/OR markers.

    No grouping is added: `a.or_(b).and_(c)` renders as `a OR b AND c`, which
    the database evaluates as `a OR (b AND c)`. Wrap operands in `Group` to
    force a different association.
    """

    def __init__(self, first: Condition) -> None:
        self.first = first
        self.rest: list[tuple[Connective, Condition]] = []

    def and_(self, condition: Condition) -> "Conditions":
        self.rest.append((Connective.AND, condition))
        return self

    def or_(self, condition: Condition) -> "Conditions":
        self.rest.append((Connective.OR, condition))
        return self

    def render(self) -> Fragment:
        first = self.first.render()
        sql = first.sql
        params = list(first.params)
        for connective, condition in self.rest:
            fragment = condition.render()
            sql += f" {connective} {fragment.sql}"
            params.extend(fragment.params)
        return Fragment(sql, tuple(params))
