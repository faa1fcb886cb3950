"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatehouse import __version__
from gatehouse.config import Settings
from gatehouse.interface.api.errors import register_error_handlers
from gatehouse.interface.api.routes import health, invites, profiles
from gatehouse.util.di.container import create_container, setup_di
from gatehouse.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the DI container (and with it the engine) on shutdown."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this; scripts/start_app.py
    does so in production.

    Args:
        container: DI container to use, production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Gatehouse API",
        description="Invite codes and access profiles for media-server registration",
        version=__version__,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(profiles.router)

    register_error_handlers(app_instance)

    return app_instance


# App instance for uvicorn
app = create_app()
