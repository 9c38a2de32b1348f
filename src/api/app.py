from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel
from .error import ClientError, ServerError
import logging

import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_SCHEMA_ON_STARTUP:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="Project Collaboration API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import health_check, invitation, member, project, task, task_status

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(project.router, prefix=prefix, tags=["Projects"])
    app.include_router(member.router, prefix=prefix, tags=["Members"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(task_status.router, prefix=prefix, tags=["Status Columns"])
    app.include_router(task.router, prefix=prefix, tags=["Tasks"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)

    return app
