"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from forum.config import Settings
from forum.interface.api.routes import comments, health, replies, threads
from forum.interface.error import AuthenticationRequiredError
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi


async def _authentication_required_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    logfire.info("Unauthenticated request rejected", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; the start-up
    script does so in production.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Threads, comments and replies with soft deletion",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(
        AuthenticationRequiredError, _authentication_required_handler
    )

    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)

    return app_instance


# Created at import for uvicorn; Logfire must already be configured
app = create_app()
