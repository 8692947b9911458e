from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

from aldar.config import Settings, settings as default_settings
from aldar.core.errors import register_exception_handlers
from aldar.core.logging import setup_logging
from aldar.routers import auth, contact, health, properties, testimonials
from aldar.seed import seed_storage
from aldar.services.sessions import SessionStore, create_session_store
from aldar.services.storage import MemStorage

logger = get_logger()


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[MemStorage] = None,
    sessions: Optional[SessionStore] = None,
) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title=settings.APP_NAME)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(properties.router)
    app.include_router(contact.router)
    app.include_router(testimonials.router)
    app.include_router(testimonials.admin_router)
    app.include_router(health.router)

    # A caller-supplied store is used as is; an own store is seeded at startup, not at import
    seed_on_startup = storage is None and settings.SEED_SAMPLE_DATA
    if storage is None:
        storage = MemStorage(code_prefix=settings.PROPERTY_CODE_PREFIX)

    app.state.settings = settings
    app.state.storage = storage
    app.state.sessions = sessions or create_session_store(settings)

    @app.on_event("startup")
    async def startup_event():
        setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
        if seed_on_startup and not len(storage.users):
            await run_in_threadpool(seed_storage, storage, settings)
        logger.info("Service started", app=settings.APP_NAME, session_backend=settings.SESSION_BACKEND)

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.sessions.close()

    return app


app = create_app()
