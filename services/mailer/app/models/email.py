"""Email related domain models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence


@dataclass(frozen=True)
class EmailAttachment:
    """Base64 encoded attachment to be delivered with an email."""

    filename: str
    content_type: str
    content: str
    disposition: str = "attachment"

    def as_payload(self) -> Dict[str, str]:
        return {
            "content": self.content,
            "filename": self.filename,
            "type": self.content_type,
            "disposition": self.disposition,
        }


@dataclass(frozen=True)
class EmailContent:
    """Represents an email ready to be delivered to a single recipient."""

    to: str
    from_email: str
    subject: str
    html_body: str
    attachments: Sequence[EmailAttachment] = field(default_factory=tuple)

    def as_payload(self) -> Dict[str, Any]:
        """Return the message in the shape accepted by the SendGrid v3 API."""
        return {
            "personalizations": [{"to": [{"email": self.to}]}],
            "from": {"email": self.from_email},
            "subject": self.subject,
            "content": [{"type": "text/html", "value": self.html_body}],
            "attachments": [attachment.as_payload() for attachment in self.attachments],
        }


__all__ = ["EmailContent", "EmailAttachment"]
