from uuid import uuid4

import pytest

from src.app.use_cases.members import (
    AddMemberUseCase,
    ChangeRoleUseCase,
    RemoveMemberUseCase,
)
from src.domain.entities import Membership, ProjectRole, Task, User


def membership(project_id, user_id, role):
    return Membership(id=uuid4(), project_id=project_id, user_id=user_id, role=role)


def wire_memberships(mock_uow, memberships):
    by_user = {m.user_id: m for m in memberships}
    mock_uow.memberships.get_by_user_and_project.side_effect = (
        lambda user_id, project_id: by_user.get(user_id)
    )
    mock_uow.memberships.get_owners.return_value = [
        m for m in memberships if m.role == ProjectRole.owner
    ]


@pytest.mark.asyncio
async def test_add_member_creates_membership(mock_uow, project, principal):
    """Test an admin adding a known user creates the membership"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.admin)]
    )
    bob = User(id=uuid4(), email="bob@example.com", name="Bob")
    mock_uow.users.get_by_email.return_value = bob

    # Act
    result = await AddMemberUseCase(mock_uow).execute(
        principal, project.id, "bob@example.com", "member"
    )

    # Assert
    assert result.is_ok()
    assert result.value.user_id == str(bob.id)
    assert result.value.role == "member"
    mock_uow.memberships.create.assert_awaited_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_add_member_rejects_owner_role(mock_uow, project, principal):
    """Test ownership cannot be granted when adding a member"""
    # Act
    result = await AddMemberUseCase(mock_uow).execute(
        principal, project.id, "bob@example.com", "owner"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_add_member_twice_is_conflict(mock_uow, project, principal):
    """Test adding an existing member is rejected"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    bob = User(id=uuid4(), email="bob@example.com")
    wire_memberships(
        mock_uow,
        [
            membership(project.id, principal.user_id, ProjectRole.owner),
            membership(project.id, bob.id, ProjectRole.member),
        ],
    )
    mock_uow.users.get_by_email.return_value = bob

    # Act
    result = await AddMemberUseCase(mock_uow).execute(
        principal, project.id, "bob@example.com", "admin"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_plain_member_cannot_add_members(mock_uow, project, principal):
    """Test a plain member has no right to add members"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.member)]
    )

    # Act
    result = await AddMemberUseCase(mock_uow).execute(
        principal, project.id, "bob@example.com", "member"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_last_owner_cannot_be_demoted(mock_uow, project, principal):
    """Test the only owner keeps the owner role"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner)]
    )

    # Act
    result = await ChangeRoleUseCase(mock_uow).execute(
        principal, project.id, principal.user_id, "member"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "LAST_OWNER"
    mock_uow.memberships.update.assert_not_called()


@pytest.mark.asyncio
async def test_owner_can_demote_another_owner(mock_uow, project, principal):
    """Test an owner can demote a second owner"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    other_id = uuid4()
    other = membership(project.id, other_id, ProjectRole.owner)
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner), other]
    )

    # Act
    result = await ChangeRoleUseCase(mock_uow).execute(
        principal, project.id, other_id, "admin"
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == "updated"
    assert other.role == ProjectRole.admin
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_owner_to_owner_is_unchanged(mock_uow, project, principal):
    """Test setting the current role reports unchanged without a commit"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner)]
    )

    # Act
    result = await ChangeRoleUseCase(mock_uow).execute(
        principal, project.id, principal.user_id, "owner"
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == "unchanged"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_admin_cannot_grant_ownership(mock_uow, project, principal):
    """Test only owners may grant ownership"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    member_id = uuid4()
    wire_memberships(
        mock_uow,
        [
            membership(project.id, principal.user_id, ProjectRole.admin),
            membership(project.id, member_id, ProjectRole.member),
        ],
    )

    # Act
    result = await ChangeRoleUseCase(mock_uow).execute(
        principal, project.id, member_id, "owner"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_change_role_of_non_member(mock_uow, project, principal):
    """Test changing the role of a non-member is not found"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner)]
    )

    # Act
    result = await ChangeRoleUseCase(mock_uow).execute(
        principal, project.id, uuid4(), "admin"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_remove_member_reassigns_tasks_to_owner(mock_uow, project, principal):
    """Test a removed member's tasks move to a remaining owner"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    leaver_id = uuid4()
    leaver = membership(project.id, leaver_id, ProjectRole.member)
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner), leaver]
    )
    tasks = [
        Task(id=uuid4(), project_id=project.id, title=f"t{i}", assigned_to=leaver_id)
        for i in range(2)
    ]
    mock_uow.tasks.get_assigned.return_value = tasks

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(
        principal, project.id, leaver_id
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == "removed"
    assert result.value.reassigned_tasks == 2
    assert all(t.assigned_to == principal.user_id for t in tasks)
    mock_uow.memberships.delete.assert_awaited_once_with(leaver)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_last_owner_cannot_remove_themselves(mock_uow, project, principal):
    """Test the only owner cannot leave the project"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow, [membership(project.id, principal.user_id, ProjectRole.owner)]
    )

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(
        principal, project.id, principal.user_id
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "LAST_OWNER"
    mock_uow.memberships.delete.assert_not_called()


@pytest.mark.asyncio
async def test_member_can_leave(mock_uow, project, principal):
    """Test a plain member may remove themselves"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    wire_memberships(
        mock_uow,
        [
            membership(project.id, uuid4(), ProjectRole.owner),
            membership(project.id, principal.user_id, ProjectRole.member),
        ],
    )

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(
        principal, project.id, principal.user_id
    )

    # Assert
    assert result.is_ok()
    assert result.value.reassigned_tasks == 0


@pytest.mark.asyncio
async def test_member_cannot_remove_others(mock_uow, project, principal):
    """Test a plain member cannot remove other members"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    other_id = uuid4()
    wire_memberships(
        mock_uow,
        [
            membership(project.id, uuid4(), ProjectRole.owner),
            membership(project.id, principal.user_id, ProjectRole.member),
            membership(project.id, other_id, ProjectRole.member),
        ],
    )

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(principal, project.id, other_id)

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_admin_cannot_remove_owner(mock_uow, project, principal):
    """Test an admin cannot remove an owner"""
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    owner_ids = [uuid4(), uuid4()]
    wire_memberships(
        mock_uow,
        [membership(project.id, principal.user_id, ProjectRole.admin)]
        + [membership(project.id, uid, ProjectRole.owner) for uid in owner_ids],
    )

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(
        principal, project.id, owner_ids[0]
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
