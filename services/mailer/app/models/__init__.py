"""Domain models for the mailer service."""

from app.models.dispatch import (
    AudienceFilter,
    BatchResult,
    DispatchOutcome,
    Empty,
    EventContext,
    Gender,
    OutcomeStatus,
    Presence,
    Recipient,
    RegistryQuery,
    Resolution,
    Resolved,
    UpstreamFailed,
)
from app.models.email import EmailAttachment, EmailContent

__all__ = [
    "EmailContent",
    "EmailAttachment",
    "AudienceFilter",
    "BatchResult",
    "DispatchOutcome",
    "Empty",
    "EventContext",
    "Gender",
    "OutcomeStatus",
    "Presence",
    "Recipient",
    "RegistryQuery",
    "Resolution",
    "Resolved",
    "UpstreamFailed",
]
