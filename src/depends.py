from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.domain.principal import Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> Principal:
    """
    Dependency to turn the bearer token into the request's Principal.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Principal with user_id, email and the super-admin capability

    Raises:
        HTTPException: 401 if token is invalid, expired or lacks claims
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        return Principal(
            user_id=UUID(payload["user_id"]),
            email=payload["email"],
            is_super_admin=bool(payload.get("is_super_admin", False)),
        )
    except (KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is missing identity claims",
        )
