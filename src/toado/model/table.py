# SPDX-License-Identifier: MIT

from enum import StrEnum


class Table(StrEnum):
    TASKS = "tasks"
    PROJECTS = "projects"
    TASK_ASSIGNMENTS = "task_assignments"
