"""Pydantic schemas used by the mailer service."""

from app.schemas.mail import BatchMailRequest, MailRequest

__all__ = ["MailRequest", "BatchMailRequest"]
