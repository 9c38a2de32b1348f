import pytest
from httpx import AsyncClient
from sqlmodel import select
from uuid import UUID

from src.domain.entities import Membership, Task


@pytest.mark.asyncio
async def test_add_and_list_members(client: AsyncClient, create_user, create_project):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com", username="bob")
    project_id = await create_project(alice)

    added = await client.post(
        f"/projects/{project_id}/members",
        json={"email": "bob@example.com", "role": "admin"},
        headers=alice.headers,
    )
    assert added.status_code == 201
    assert added.json()["role"] == "admin"

    again = await client.post(
        f"/projects/{project_id}/members",
        json={"email": "bob@example.com", "role": "member"},
        headers=alice.headers,
    )
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_MEMBER"

    listing = await client.get(f"/projects/{project_id}/members", headers=bob.headers)
    assert listing.status_code == 200
    assert [(m["user_id"], m["role"]) for m in listing.json()["members"]] == [
        (alice.id, "owner"),
        (bob.id, "admin"),
    ]


@pytest.mark.asyncio
async def test_add_unknown_user(client: AsyncClient, create_user, create_project):
    alice = await create_user("alice@example.com")
    project_id = await create_project(alice)

    response = await client.post(
        f"/projects/{project_id}/members",
        json={"email": "nobody@example.com", "role": "member"},
        headers=alice.headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_last_owner_protection(
    client: AsyncClient, create_user, create_project, add_member
):
    """The sole owner can neither demote nor remove themselves until
    someone else holds ownership"""
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, bob)

    demote = await client.put(
        f"/projects/{project_id}/members/{alice.id}",
        json={"role": "member"},
        headers=alice.headers,
    )
    assert demote.status_code == 409
    assert demote.json()["error"]["code"] == "LAST_OWNER"

    leave = await client.delete(
        f"/projects/{project_id}/members/{alice.id}", headers=alice.headers
    )
    assert leave.status_code == 409
    assert leave.json()["error"]["code"] == "LAST_OWNER"

    promote = await client.put(
        f"/projects/{project_id}/members/{bob.id}",
        json={"role": "owner"},
        headers=alice.headers,
    )
    assert promote.status_code == 200
    assert promote.json()["member"]["role"] == "owner"

    demote = await client.put(
        f"/projects/{project_id}/members/{alice.id}",
        json={"role": "member"},
        headers=alice.headers,
    )
    assert demote.status_code == 200
    assert demote.json()["status"] == "updated"


@pytest.mark.asyncio
async def test_admin_cannot_touch_ownership(
    client: AsyncClient, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    carol = await create_user("carol@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, bob, role="admin")
    await add_member(project_id, alice, carol)

    grant = await client.put(
        f"/projects/{project_id}/members/{carol.id}",
        json={"role": "owner"},
        headers=bob.headers,
    )
    promote_admin = await client.put(
        f"/projects/{project_id}/members/{carol.id}",
        json={"role": "admin"},
        headers=bob.headers,
    )

    assert grant.status_code == 403
    assert promote_admin.status_code == 200


@pytest.mark.asyncio
async def test_removed_member_tasks_go_to_owner(
    client: AsyncClient, db_session, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, bob)

    created = await client.post(
        f"/projects/{project_id}/tasks",
        json={"title": "Fuel the rocket", "status": "todo", "assigned_to": bob.id},
        headers=alice.headers,
    )
    assert created.status_code == 201
    task_id = created.json()["task"]["id"]

    removed = await client.delete(
        f"/projects/{project_id}/members/{bob.id}", headers=alice.headers
    )

    assert removed.status_code == 200
    assert removed.json() == {"status": "removed", "reassigned_tasks": 1}

    result = await db_session.execute(select(Task).where(Task.id == UUID(task_id)))
    assert str(result.scalar_one().assigned_to) == alice.id

    result = await db_session.execute(
        select(Membership).where(
            Membership.project_id == UUID(project_id),
            Membership.user_id == UUID(bob.id),
        )
    )
    assert result.scalar_one_or_none() is None


@pytest.mark.asyncio
async def test_member_can_leave_but_not_kick(
    client: AsyncClient, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    carol = await create_user("carol@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, bob)
    await add_member(project_id, alice, carol)

    kick = await client.delete(
        f"/projects/{project_id}/members/{carol.id}", headers=bob.headers
    )
    leave = await client.delete(
        f"/projects/{project_id}/members/{bob.id}", headers=bob.headers
    )

    assert kick.status_code == 403
    assert leave.status_code == 200
