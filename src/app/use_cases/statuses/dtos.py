"""
Status Column Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.projects.dtos import StatusColumnInfo


class ColumnOrder(BaseModel):
    """Requested position of one column"""

    id: str
    order_column: int


class StatusColumnListResponse(BaseModel):
    columns: List[StatusColumnInfo]


class DeleteStatusResponse(BaseModel):
    status: str
    migrated_tasks: int
    migrated_to: Optional[str] = None
