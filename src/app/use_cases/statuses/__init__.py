"""
Status Column Use Cases

Per-project kanban columns: list, create, rename, reorder, delete.
"""

from .create_status_use_case import CreateStatusUseCase
from .delete_status_use_case import DeleteStatusUseCase
from .dtos import ColumnOrder, DeleteStatusResponse, StatusColumnListResponse
from .list_statuses_use_case import ListStatusesUseCase
from .rename_status_use_case import RenameStatusUseCase
from .reorder_statuses_use_case import ReorderStatusesUseCase

__all__ = [
    "ListStatusesUseCase",
    "CreateStatusUseCase",
    "RenameStatusUseCase",
    "ReorderStatusesUseCase",
    "DeleteStatusUseCase",
    "ColumnOrder",
    "DeleteStatusResponse",
    "StatusColumnListResponse",
]
