"""
Task Use Case DTOs (Data Transfer Objects)
"""

from datetime import date
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.projects.dtos import TaskInfo
from src.domain.entities import Task, TaskPriority, TaskStatus


class TaskCommand(BaseModel):
    """Editable task fields"""

    title: str
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.medium
    result_explanation: Optional[str] = None
    assigned_to: Optional[UUID] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None


class ColumnOrdering(BaseModel):
    """Authoritative order of one column after a placement"""

    status_id: str
    slug: str
    task_ids: List[str]


class TaskPlacementResponse(BaseModel):
    """A task plus the persisted order of every column it touched"""

    task: TaskInfo
    columns: List[ColumnOrdering]

    @classmethod
    def build(
        cls,
        task: Task,
        task_status: Optional[TaskStatus],
        affected: Dict[UUID, List[Task]],
        slugs: Dict[UUID, str],
    ) -> "TaskPlacementResponse":
        return cls(
            task=TaskInfo.from_entity(task, task_status.slug if task_status else ""),
            columns=[
                ColumnOrdering(
                    status_id=str(status_id),
                    slug=slugs.get(status_id, ""),
                    task_ids=[str(t.id) for t in tasks],
                )
                for status_id, tasks in affected.items()
            ],
        )


class DeleteTaskResponse(BaseModel):
    status: str
