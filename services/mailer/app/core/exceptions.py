"""Exceptions raised while resolving audiences and delivering mail."""

from __future__ import annotations

from typing import Any, Optional


class MailerError(Exception):
    """Base class for mailer failures scoped to one request or recipient."""


class CredentialEncodingError(MailerError):
    """The QR credential for a recipient could not be produced."""


class RegistryError(MailerError):
    """The participant registry could not be reached or answered badly."""


class DeliveryError(MailerError):
    """The email provider rejected or never received a message."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "response": {"body": self.body},
        }


__all__ = [
    "MailerError",
    "CredentialEncodingError",
    "RegistryError",
    "DeliveryError",
]
