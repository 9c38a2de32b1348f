"""
Project Use Case DTOs (Data Transfer Objects)

Command and Response classes for the project domain, including the
board snapshot served to the kanban view.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Project, ProjectStatus, Task, TaskStatus


# ============================================================================
# Commands
# ============================================================================


class ProjectCommand(BaseModel):
    """Validated project fields for create and update"""

    name: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.pending
    start_date: Optional[date] = None
    due_date: Optional[date] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectResponse(BaseModel):
    """Project as seen by a caller holding role"""

    id: str
    name: str
    description: Optional[str]
    status: str
    start_date: Optional[str]
    due_date: Optional[str]
    created_at: str
    role: Optional[str] = None

    @classmethod
    def from_entity(cls, project: Project, role: Optional[str] = None) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            name=project.name,
            description=project.description,
            status=project.status.value,
            start_date=project.start_date.isoformat() if project.start_date else None,
            due_date=project.due_date.isoformat() if project.due_date else None,
            created_at=project.created_at.isoformat(),
            role=role,
        )


class ProjectListResponse(BaseModel):
    projects: List[ProjectResponse]


class DeleteProjectResponse(BaseModel):
    status: str


class TaskInfo(BaseModel):
    """Task card on the board"""

    id: str
    title: str
    description: Optional[str]
    priority: str
    result_explanation: Optional[str]
    status: str
    order_column: int
    assigned_to: Optional[str]
    start_date: Optional[str]
    due_date: Optional[str]
    completed_at: Optional[str]

    @classmethod
    def from_entity(cls, task: Task, status_slug: str) -> "TaskInfo":
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            result_explanation=task.result_explanation,
            status=status_slug,
            order_column=task.order_column,
            assigned_to=str(task.assigned_to) if task.assigned_to else None,
            start_date=task.start_date.isoformat() if task.start_date else None,
            due_date=task.due_date.isoformat() if task.due_date else None,
            completed_at=task.completed_at.isoformat() if task.completed_at else None,
        )


class StatusColumnInfo(BaseModel):
    """Status column, optionally with its tasks"""

    id: str
    name: str
    slug: str
    color: str
    order_column: int
    is_default: bool
    tasks: List[TaskInfo] = []

    @classmethod
    def from_entity(
        cls, task_status: TaskStatus, tasks: Optional[List[Task]] = None
    ) -> "StatusColumnInfo":
        return cls(
            id=str(task_status.id),
            name=task_status.name,
            slug=task_status.slug,
            color=task_status.color,
            order_column=task_status.order_column,
            is_default=task_status.is_default,
            tasks=[TaskInfo.from_entity(t, task_status.slug) for t in tasks or []],
        )


class BoardMember(BaseModel):
    """Assignee option on the board"""

    user_id: str
    name: str
    email: str
    role: str


class BoardResponse(BaseModel):
    project: ProjectResponse
    columns: List[StatusColumnInfo]
    members: List[BoardMember]
