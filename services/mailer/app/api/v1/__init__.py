"""Version 1 routes of the mailer API."""

from app.api.v1.mail_routes import router

__all__ = ["router"]
