from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.domain.entities import User


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user(db_session):
    """Insert a directory user and mint a bearer token for them.

    Returns plain values: the session is shared with the app, whose unit
    of work rolls back (and expires loaded rows) after every request.
    """

    async def _create(email, username=None, is_super_admin=False):
        user = User(
            email=email,
            username=username,
            name=email.split("@")[0].title(),
            is_super_admin=is_super_admin,
        )
        db_session.add(user)
        await db_session.commit()
        token = generate_jwt(user.id, user.email, is_super_admin=is_super_admin)
        return SimpleNamespace(
            id=str(user.id),
            email=email,
            headers={"Authorization": f"Bearer {token}"},
        )

    return _create


@pytest.fixture
def create_project(client):
    async def _create(owner, name="Apollo"):
        response = await client.post(
            "/projects", json={"name": name}, headers=owner.headers
        )
        assert response.status_code == 201
        return response.json()["id"]

    return _create


@pytest.fixture
def add_member(client):
    async def _add(project_id, actor, user, role="member"):
        response = await client.post(
            f"/projects/{project_id}/members",
            json={"email": user.email, "role": role},
            headers=actor.headers,
        )
        assert response.status_code == 201
        return response.json()

    return _add
