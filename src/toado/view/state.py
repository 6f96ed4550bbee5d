# SPDX-License-Identifier: MIT

"""Display settings shared by the views, stored in context variables."""

from contextvars import ContextVar

# Context variable for controlling header visibility
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for drawing a rule between table rows
_separate_rows_var: ContextVar[bool] = ContextVar("separate_rows", default=False)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_separate_rows(value: bool) -> None:
    _separate_rows_var.set(value)


def get_separate_rows() -> bool:
    return _separate_rows_var.get()
