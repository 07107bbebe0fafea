"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from userhub.config import Settings
from userhub.interface.api.routes import accounts, auth, health
from userhub.util.di.container import create_container, setup_di
from userhub.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    handles this in production.

    Args:
        container: DI container to serve requests from. A production
            container is built when omitted.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="userhub",
        description="Account management and Google/Facebook sign-in",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.base_url, "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(accounts.router)

    # Serves avatars written by LocalAvatarStorage
    app_instance.mount(
        "/media",
        StaticFiles(directory=settings.avatars.media_root, check_dir=False),
        name="media",
    )

    return app_instance
