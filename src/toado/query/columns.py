# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod


class QueryCols(ABC):
    """Columns to return from a select query."""

    @abstractmethod
    def render(self) -> str: ...


class AllCols(QueryCols):
    def render(self) -> str:
        return "*"

    def __repr__(self) -> str:
        return "AllCols()"


class SomeCols(QueryCols):
    def __init__(self, *cols: str) -> None:
        self.cols = list(cols)

    def render(self) -> str:
        return ", ".join(self.cols)

    def __repr__(self) -> str:
        return f"SomeCols({', '.join(repr(col) for col in self.cols)})"


ALL_COLS = AllCols()
