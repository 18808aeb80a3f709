"""Entry point for the Mailer service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api import mail_router
from app.core.config import get_settings, settings
from app.core.error_handlers import register_exception_handlers
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    missing = get_settings().missing()
    if missing:
        logger.error("Environment variables not set: %s", ", ".join(missing))
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(mail_router, prefix="/api/v1")

__all__ = ["app"]
