# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional


class UpdateAction:
    """What an update query does to a single column."""

    __slots__ = ()


class Set(UpdateAction):
    """Write `value` to the column."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Set) and other.value == self.value

    def __hash__(self) -> int:
        return hash(("set", self.value))

    def __repr__(self) -> str:
        return f"Set({self.value!r})"


class Null(UpdateAction):
    """Write NULL to the column."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Null)

    def __hash__(self) -> int:
        return hash("null")

    def __repr__(self) -> str:
        return "Null()"


class Untouched(UpdateAction):
    """Leave the column out of the update entirely."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Untouched)

    def __hash__(self) -> int:
        return hash("untouched")

    def __repr__(self) -> str:
        return "Untouched()"


NULL = Null()
UNTOUCHED = Untouched()


def from_optional(value: Optional[Any]) -> UpdateAction:
    if value is None:
        return UNTOUCHED
    return Set(value)


def map_action(action: UpdateAction, func: Callable[[Any], Any]) -> UpdateAction:
    match action:
        case Set(value):
            return Set(func(value))
        case _:
            return action


def is_untouched(action: UpdateAction) -> bool:
    return isinstance(action, Untouched)
