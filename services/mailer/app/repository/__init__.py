"""Repositories for outbound delivery."""

from app.repository.email_repository import EmailRepository

__all__ = ["EmailRepository"]
