import pytest
from httpx import AsyncClient


async def invite(client, project_id, actor, role="member", **invitee):
    return await client.post(
        f"/projects/{project_id}/invitations",
        json={"role": role, **invitee},
        headers=actor.headers,
    )


@pytest.mark.asyncio
async def test_invite_accept_flow(client: AsyncClient, create_user, create_project):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice, "Apollo")

    invited = await invite(client, project_id, alice, role="admin", email=bob.email)
    assert invited.status_code == 201
    assert invited.json()["status"] == "pending"
    assert invited.json()["reinvited"] is False
    invite_id = invited.json()["invite_id"]

    duplicate = await invite(client, project_id, alice, email=bob.email)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_INVITATION"

    inbox = await client.get("/invitations", headers=bob.headers)
    assert inbox.status_code == 200
    [pending] = inbox.json()["invitations"]
    assert pending["id"] == invite_id
    assert pending["project_name"] == "Apollo"
    assert pending["inviter_name"] == "Alice"

    accepted = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert accepted.status_code == 200
    assert accepted.json() == {
        "status": "accepted",
        "project_id": project_id,
        "project_name": "Apollo",
        "role": "admin",
    }

    again = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert again.status_code == 200
    assert again.json()["status"] == "already_accepted"

    members = await client.get(f"/projects/{project_id}/members", headers=bob.headers)
    assert (bob.id, "admin") in [
        (m["user_id"], m["role"]) for m in members.json()["members"]
    ]

    inbox = await client.get("/invitations", headers=bob.headers)
    assert inbox.json()["invitations"] == []


@pytest.mark.asyncio
async def test_reinvite_after_rejection_reuses_invitation(
    client: AsyncClient, create_user, create_project
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)

    first = await invite(client, project_id, alice, email=bob.email)
    invite_id = first.json()["invite_id"]

    rejected = await client.post(f"/invitations/{invite_id}/reject", headers=bob.headers)
    assert rejected.status_code == 200
    assert rejected.json()["status"] == "rejected"

    too_late = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert too_late.status_code == 409
    assert too_late.json()["error"]["code"] == "INVITATION_REJECTED"

    second = await invite(client, project_id, alice, role="admin", email=bob.email)
    assert second.status_code == 201
    assert second.json()["invite_id"] == invite_id
    assert second.json()["reinvited"] is True

    accepted = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert accepted.status_code == 200
    assert accepted.json()["role"] == "admin"


@pytest.mark.asyncio
async def test_invitation_is_bound_to_addressee(
    client: AsyncClient, create_user, create_project
):
    alice = await create_user("alice@example.com")
    await create_user("bob@example.com")
    mallory = await create_user("mallory@example.com")
    project_id = await create_project(alice)

    invited = await invite(client, project_id, alice, email="bob@example.com")
    invite_id = invited.json()["invite_id"]

    stolen = await client.post(
        f"/invitations/{invite_id}/accept", headers=mallory.headers
    )

    assert stolen.status_code == 403
    assert stolen.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_invite_by_username_and_existing_member(
    client: AsyncClient, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com", username="bobby")
    carol = await create_user("carol@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, carol)

    by_username = await invite(client, project_id, alice, username="bobby")
    assert by_username.status_code == 201

    listing = await client.get(
        f"/projects/{project_id}/invitations", headers=alice.headers
    )
    [pending] = listing.json()["invitations"]
    assert pending["email"] == bob.email

    member = await invite(client, project_id, alice, email=carol.email)
    assert member.status_code == 409
    assert member.json()["error"]["code"] == "ALREADY_MEMBER"

    unknown = await invite(client, project_id, alice, username="ghost")
    assert unknown.status_code == 404


@pytest.mark.asyncio
async def test_invite_validation(
    client: AsyncClient, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    carol = await create_user("carol@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, carol)

    as_owner_role = await invite(
        client, project_id, alice, role="owner", email="bob@example.com"
    )
    no_invitee = await invite(client, project_id, alice)
    by_member = await invite(client, project_id, carol, email="bob@example.com")

    assert as_owner_role.status_code == 400
    assert as_owner_role.json()["error"]["code"] == "INVALID_ROLE"
    assert no_invitee.status_code == 422
    assert by_member.status_code == 403


@pytest.mark.asyncio
async def test_cancel_invitation(client: AsyncClient, create_user, create_project):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)

    invited = await invite(client, project_id, alice, email=bob.email)
    invite_id = invited.json()["invite_id"]

    cancelled = await client.delete(
        f"/projects/{project_id}/invitations/{invite_id}", headers=alice.headers
    )
    assert cancelled.status_code == 200

    accept = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert accept.status_code == 404


@pytest.mark.asyncio
async def test_mixed_case_invite_of_member_is_conflict(
    client: AsyncClient, create_user, create_project, add_member
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)
    await add_member(project_id, alice, bob)

    response = await invite(client, project_id, alice, email="Bob@Example.com")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"
    pending = await client.get(
        f"/projects/{project_id}/invitations", headers=alice.headers
    )
    assert pending.json()["invitations"] == []


@pytest.mark.asyncio
async def test_mixed_case_invite_reaches_addressee(
    client: AsyncClient, create_user, create_project
):
    alice = await create_user("alice@example.com")
    bob = await create_user("bob@example.com")
    project_id = await create_project(alice)

    invited = await invite(client, project_id, alice, email="Bob@Example.com")
    assert invited.status_code == 201
    invite_id = invited.json()["invite_id"]

    duplicate = await invite(client, project_id, alice, email="bob@example.com")
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_INVITATION"

    inbox = await client.get("/invitations", headers=bob.headers)
    assert [i["id"] for i in inbox.json()["invitations"]] == [invite_id]

    accepted = await client.post(f"/invitations/{invite_id}/accept", headers=bob.headers)
    assert accepted.status_code == 200
    assert accepted.json()["status"] == "accepted"
