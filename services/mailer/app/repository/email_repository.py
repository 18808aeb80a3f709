"""Repository responsible for sending emails through the SendGrid API."""

from __future__ import annotations

import httpx

from app.core.config import Settings, settings
from app.core.exceptions import DeliveryError
from app.models import EmailContent


class EmailRepository:
    """Handles the low level communication with the email provider."""

    def __init__(
        self,
        config: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = config or settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        api_key = self._settings.require("SENDGRID_API_KEY")
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _error_body(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            return response.text

    def send_email(self, email: EmailContent) -> None:
        url = f"{self._settings.SENDGRID_API_URL.rstrip('/')}/v3/mail/send"
        headers = self._headers()

        try:
            with httpx.Client(
                timeout=self._settings.SENDGRID_TIMEOUT,
                transport=self._transport,
            ) as client:
                response = client.post(url, json=email.as_payload(), headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DeliveryError(f"Failed to reach email provider: {exc}") from exc

        if response.is_error:
            raise DeliveryError(
                response.reason_phrase or "Failed to deliver email",
                code=response.status_code,
                body=self._error_body(response),
            )


__all__ = ["EmailRepository"]
