import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from .core.config import Settings, settings as default_settings
from .core.errors import ApiError, InvalidContentError, api_error_handler, error_response, validation_error_handler
from .db.session import build_engine, init_db
from .services.reconcile import TaskReconciler, run_reconcile_scheduler
from .api import health, users, tasks

logger = logging.getLogger(__name__)


async def store_error_handler(request, exc: SQLAlchemyError):
    logger.error("store error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(InvalidContentError(str(getattr(exc, "orig", None) or exc)))


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or default_settings
    engine = engine or build_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await asyncio.to_thread(init_db, engine)
        scheduler = None
        if settings.RECONCILE_ENABLED:
            scheduler = asyncio.create_task(
                run_reconcile_scheduler(
                    TaskReconciler(engine),
                    interval_seconds=settings.RECONCILE_INTERVAL_MINUTES * 60,
                )
            )
        try:
            yield
        finally:
            if scheduler is not None:
                scheduler.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await scheduler

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(users.router, prefix=settings.API_PREFIX)
    app.include_router(tasks.router, prefix=settings.API_PREFIX)
    return app
