"""
Project Use Cases

Project lifecycle and the board snapshot.
"""

from .create_project_use_case import CreateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    BoardMember,
    BoardResponse,
    DeleteProjectResponse,
    ProjectCommand,
    ProjectListResponse,
    ProjectResponse,
    StatusColumnInfo,
    TaskInfo,
)
from .get_board_use_case import GetBoardUseCase
from .get_project_use_case import GetProjectUseCase, ListMyProjectsUseCase
from .update_project_use_case import UpdateProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "ListMyProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetBoardUseCase",
    "ProjectCommand",
    "ProjectResponse",
    "ProjectListResponse",
    "DeleteProjectResponse",
    "BoardResponse",
    "BoardMember",
    "StatusColumnInfo",
    "TaskInfo",
]
