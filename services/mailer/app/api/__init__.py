"""HTTP API of the mailer service."""

from app.api.v1 import router as mail_router

__all__ = ["mail_router"]
