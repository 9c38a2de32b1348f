import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from src.domain.entities import Project
from src.domain.principal import Principal


def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository the use cases touch"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_ids = AsyncMock(return_value=[])

    uow.projects = MagicMock()
    uow.projects.get_by_id = AsyncMock()
    uow.projects.create = AsyncMock(side_effect=_echo)
    uow.projects.update = AsyncMock(side_effect=_echo)
    uow.projects.delete = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_project = AsyncMock(return_value=None)
    uow.memberships.get_by_project_id = AsyncMock(return_value=[])
    uow.memberships.get_owners = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=_echo)
    uow.memberships.update = AsyncMock(side_effect=_echo)
    uow.memberships.delete = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_by_project_and_email = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=_echo)
    uow.invitations.update = AsyncMock(side_effect=_echo)
    uow.invitations.delete = AsyncMock()

    uow.task_statuses = MagicMock()
    uow.task_statuses.get_by_id = AsyncMock(return_value=None)
    uow.task_statuses.get_by_slug = AsyncMock(return_value=None)
    uow.task_statuses.get_by_project_id = AsyncMock(return_value=[])
    uow.task_statuses.get_max_order = AsyncMock(return_value=None)
    uow.task_statuses.create = AsyncMock(side_effect=_echo)
    uow.task_statuses.update = AsyncMock(side_effect=_echo)
    uow.task_statuses.set_order = AsyncMock(return_value=1)
    uow.task_statuses.delete = AsyncMock()

    uow.tasks = MagicMock()
    uow.tasks.get_by_id = AsyncMock(return_value=None)
    uow.tasks.get_by_status_id = AsyncMock(return_value=[])
    uow.tasks.get_assigned = AsyncMock(return_value=[])
    uow.tasks.create = AsyncMock(side_effect=_echo)
    uow.tasks.update = AsyncMock(side_effect=_echo)
    uow.tasks.delete = AsyncMock()

    return uow


@pytest.fixture
def project():
    return Project(id=uuid4(), name="Apollo")


@pytest.fixture
def principal():
    return Principal(user_id=uuid4(), email="alice@example.com")

