# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING, Optional, TypedDict

from toado.model.entity_id import EntityId
from toado.model.item_status import ItemStatus

if TYPE_CHECKING:
    from toado.model.project import Project


class Task(TypedDict):
    id: Optional[EntityId]
    name: Optional[str]
    priority: Optional[int]
    status: Optional[ItemStatus]
    start_time: Optional[str]
    end_time: Optional[str]
    repeat: Optional[str]
    notes: Optional[str]
    projects: Optional[list["Project"]]
