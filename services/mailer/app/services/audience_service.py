"""Resolve the participants a batch mail is addressed to."""

from __future__ import annotations

import logging
from typing import Optional

from app.clients import RegistryClient
from app.core.exceptions import RegistryError
from app.models import Empty, EventContext, Recipient, Resolution, Resolved, UpstreamFailed

logger = logging.getLogger(__name__)


class AudienceService:
    """Query the registry and classify its answer."""

    def __init__(self, *, client: RegistryClient | None = None):
        self._client = client or RegistryClient()

    def resolve(self, context: EventContext, access_token: Optional[str]) -> Resolution:
        try:
            participants = self._client.fetch_participants(context, access_token)
        except RegistryError as exc:
            logger.warning(
                "Could not resolve participants of %s: %s", context.event_name, exc
            )
            return UpstreamFailed(detail=str(exc))

        if not participants:
            return Empty()

        recipients = []
        for entry in participants:
            email = entry.get("email") if isinstance(entry, dict) else None
            if not email:
                logger.warning(
                    "Skipping participant of %s without an email address", context.event_name
                )
                continue
            recipients.append(Recipient(email=email))

        if not recipients:
            return Empty()
        return Resolved(recipients=tuple(recipients))


__all__ = ["AudienceService"]
