# SPDX-License-Identifier: MIT

from enum import IntEnum


class ItemStatus(IntEnum):
    """
    Completion status of a task, persisted as a small integer code.

    Unknown codes read back from the database decode to ARCHIVED.
    """

    INCOMPLETE = 0
    COMPLETE = 1
    ARCHIVED = 2

    @classmethod
    def from_code(cls, code: int) -> "ItemStatus":
        try:
            return cls(code)
        except ValueError:
            return cls.ARCHIVED

    @property
    def code(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name.lower()
