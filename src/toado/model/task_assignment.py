# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from toado.model.entity_id import EntityId


class TaskAssignment(TypedDict):
    task_id: Optional[EntityId]
    project_id: Optional[EntityId]
