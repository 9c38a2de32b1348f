from uuid import uuid4

import pytest

from src.app.services.authorization import ProjectAccessGate
from src.domain.entities import Membership, ProjectRole
from src.domain.principal import Principal


@pytest.mark.asyncio
async def test_super_admin_is_owner_without_membership(mock_uow, project):
    """Test a super-admin passes as owner without a membership lookup"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    admin = Principal(user_id=uuid4(), email="root@example.com", is_super_admin=True)

    # Act
    result = await ProjectAccessGate(mock_uow).require_role(
        project.id, admin, (ProjectRole.owner,)
    )

    # Assert
    assert result.is_ok()
    assert result.value == ProjectRole.owner
    mock_uow.memberships.get_by_user_and_project.assert_not_called()


@pytest.mark.asyncio
async def test_non_member_is_forbidden(mock_uow, project, principal):
    """Test a caller without membership is forbidden"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project

    # Act
    result = await ProjectAccessGate(mock_uow).require_member(project.id, principal)

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_missing_project_is_not_found(mock_uow, principal):
    """Test an unknown project is reported before any role check"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = None

    # Act
    result = await ProjectAccessGate(mock_uow).require_member(uuid4(), principal)

    # Assert
    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_member_role_outside_allowed_set_is_forbidden(mock_uow, project, principal):
    """Test a member passes require_member but not an admin-only check"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.memberships.get_by_user_and_project.return_value = Membership(
        id=uuid4(),
        project_id=project.id,
        user_id=principal.user_id,
        role=ProjectRole.member,
    )

    # Act
    gate = ProjectAccessGate(mock_uow)
    denied = await gate.require_role(
        project.id, principal, (ProjectRole.owner, ProjectRole.admin)
    )
    allowed = await gate.require_member(project.id, principal)

    # Assert
    assert denied.is_err()
    assert denied.error.code == "FORBIDDEN"
    assert allowed.is_ok()
    assert allowed.value == ProjectRole.member
