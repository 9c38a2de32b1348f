"""
Task Use Cases

Task creation, edits, moves between columns and deletion.
"""

from .create_task_use_case import CreateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import (
    ColumnOrdering,
    DeleteTaskResponse,
    TaskCommand,
    TaskPlacementResponse,
)
from .update_task_status_use_case import UpdateTaskStatusUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "UpdateTaskStatusUseCase",
    "DeleteTaskUseCase",
    "TaskCommand",
    "TaskPlacementResponse",
    "ColumnOrdering",
    "DeleteTaskResponse",
]
