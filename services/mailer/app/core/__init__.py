"""Core utilities for the mailer service."""

from app.core.config import settings
from app.core.error_handlers import register_exception_handlers
from app.core.logging import setup_logging

__all__ = ["settings", "register_exception_handlers", "setup_logging"]
