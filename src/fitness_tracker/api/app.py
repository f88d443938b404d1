"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fitness_tracker.api.admin import router as admin_router
from fitness_tracker.api.diary import router as diary_router
from fitness_tracker.api.foods import router as foods_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.reports import router as reports_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Fitness Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(diary_router)
    app.include_router(workouts_router)
    app.include_router(reports_router)
    app.include_router(profile_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
