"""Hospital Appointments API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as {"error": <message>}
    - CORS configured from settings (origins), methods fixed to GET/POST/PUT/DELETE
    - The store is connected and pinged in the lifespan; failure aborts startup
    - A unique username index that cannot be built (existing duplicates) is logged, not fatal
    - The patient-appointments getter is mounted only when expose_patient_schedule is set
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hospital.api.error_handlers import register_error_handlers
from hospital.api.routes import doctors, health, patients, signup
from hospital.config import Settings, get_settings
from hospital.infrastructure.database import MongoStore
from hospital.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        store = MongoStore(
            settings.db_base_url,
            database_name=settings.database_name,
            server_selection_timeout_ms=settings.db_server_selection_timeout_ms,
        )
        try:
            await store.ping()
            if settings.enforce_unique_usernames:
                await store.ensure_indexes()
        except Exception:
            logger.critical("MongoDB connection error", exc_info=True)
            await store.close()
            raise
        app.state.store = store
        logger.info("Connected to MongoDB!")
        yield
        logger.info("Hospital API shutting down")
        await store.close()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Hospital Appointments API", version="1.0.0",
        lifespan=build_lifespan(settings),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(signup.router)
    app.include_router(doctors.router)
    app.include_router(patients.router)
    if settings.expose_patient_schedule:
        app.include_router(patients.schedule_router)

    register_error_handlers(app)
    return app


app = create_app()

