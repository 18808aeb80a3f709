"""High level mail orchestration for event participants."""

from __future__ import annotations

import logging
from typing import Iterable

from app.core.config import Settings, settings
from app.core.exceptions import CredentialEncodingError, DeliveryError
from app.models import (
    BatchResult,
    DispatchOutcome,
    EmailContent,
    OutcomeStatus,
    Recipient,
)
from app.repository import EmailRepository
from app.services.composer import compose_message
from app.services.credentials import build_credential

logger = logging.getLogger(__name__)


class DispatchService:
    """Build a credential email per recipient and hand it to the provider."""

    def __init__(
        self,
        *,
        repository: EmailRepository | None = None,
        config: Settings | None = None,
    ):
        self._settings = config or settings
        self._repository = repository or EmailRepository(self._settings)

    def _build_email(
        self,
        recipient: str,
        event_name: str,
        subject: str,
        raw_body: str,
        is_markdown: bool,
    ) -> EmailContent:
        credential = build_credential(recipient, event_name)
        return compose_message(
            recipient=recipient,
            subject=subject,
            raw_body=raw_body,
            is_markdown=is_markdown,
            credential=credential,
            from_email=self._settings.require("FROM_EMAIL"),
            filename=self._settings.CREDENTIAL_FILENAME,
        )

    def send_direct(
        self,
        recipient: str,
        event_name: str,
        subject: str,
        raw_body: str,
        is_markdown: bool,
    ) -> None:
        """Send one credential email, raising if it cannot be built or delivered.

        Raises :class:`CredentialEncodingError` when the QR code cannot be
        generated and :class:`DeliveryError` when the provider rejects the
        message.
        """

        email = self._build_email(recipient, event_name, subject, raw_body, is_markdown)
        self._repository.send_email(email)
        logger.info("Mail for %s sent to %s", event_name, recipient)

    def _dispatch_one(
        self,
        recipient: Recipient,
        event_name: str,
        subject: str,
        raw_body: str,
        is_markdown: bool,
    ) -> DispatchOutcome:
        try:
            email = self._build_email(
                recipient.email, event_name, subject, raw_body, is_markdown
            )
        except CredentialEncodingError as exc:
            logger.warning("Skipping %s: %s", recipient.email, exc)
            return DispatchOutcome(
                recipient=recipient.email,
                status=OutcomeStatus.ENCODING_FAILED,
                reason=str(exc),
            )

        try:
            self._repository.send_email(email)
        except DeliveryError as exc:
            logger.warning("Mail to %s not delivered: %s", recipient.email, exc)
            return DispatchOutcome(
                recipient=recipient.email,
                status=OutcomeStatus.DELIVERY_FAILED,
                reason=str(exc),
            )

        return DispatchOutcome(recipient=recipient.email, status=OutcomeStatus.SENT)

    def send_batch(
        self,
        recipients: Iterable[Recipient],
        event_name: str,
        subject: str,
        raw_body: str,
        is_markdown: bool,
    ) -> BatchResult:
        """Mail every recipient in turn; one failure never stops the others."""

        result = BatchResult(
            outcomes=tuple(
                self._dispatch_one(recipient, event_name, subject, raw_body, is_markdown)
                for recipient in recipients
            )
        )
        logger.info(
            "Batch for %s finished: %d sent, %d delivery failures, %d encoding failures",
            event_name,
            result.sent,
            result.delivery_failed,
            result.encoding_failed,
        )
        return result


__all__ = ["DispatchService"]
