# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING, Optional, TypedDict

from toado.model.entity_id import EntityId

if TYPE_CHECKING:
    from toado.model.task import Task


class Project(TypedDict):
    id: Optional[EntityId]
    name: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    notes: Optional[str]
    tasks: Optional[list["Task"]]
