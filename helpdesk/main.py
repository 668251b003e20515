"""Helpdesk routing core: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from helpdesk.adapters.persistence.database import async_session_factory, engine
from helpdesk.adapters.persistence.models import SlaConfigModel
from helpdesk.config import settings
from helpdesk.domain.errors import HelpdeskError
from helpdesk.infrastructure.api.errors import helpdesk_error_handler
from helpdesk.infrastructure.api.routes_health import router as health_router
from helpdesk.infrastructure.api.routes_reports import router as reports_router
from helpdesk.infrastructure.api.routes_settings import router as settings_router
from helpdesk.infrastructure.api.routes_tickets import router as tickets_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Probe the database once and warn about an unseeded configuration."""
    try:
        async with async_session_factory() as session:
            targets = (
                await session.execute(select(func.count()).select_from(SlaConfigModel))
            ).scalar_one()
        if targets == 0:
            logger.warning("No SLA targets configured; run `python -m helpdesk.tools.seed_db`")
        else:
            logger.info("Database ready, %d SLA targets configured", targets)
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database not available on startup: %s", e)
    logger.info(
        "Change notifications: %s",
        settings.notify_channel if settings.notifications_enabled else "log only",
    )
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Helpdesk routing core",
        description="Skill-based ticket assignment, lifecycle transitions and SLA reporting",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HelpdeskError, helpdesk_error_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")
    app.include_router(reports_router, prefix="/api")
    app.include_router(settings_router, prefix="/api")

    return app


app = create_app()
