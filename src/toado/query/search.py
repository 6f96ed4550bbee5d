# SPDX-License-Identifier: MIT

from toado.query.condition import Condition, Equal, Like


def search_condition(term: str) -> Condition:
    """
    Condition matching a user supplied search term.

    A term made only of decimal digits selects by id, anything else selects rows
    whose name contains the term.
    """
    term = term.strip()
    if term.isdecimal():
        return Equal("id", int(term))
    return Like("name", f"%{term}%")
