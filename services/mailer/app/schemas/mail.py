"""Schemas for incoming mail requests."""

import html
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import AudienceFilter, EventContext, Gender, Presence


class MailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_name: str = Field(..., alias="eventName", min_length=1)
    mail_subject: str = Field(..., alias="mailSubject", min_length=1)
    mail_body: str = Field(..., alias="mailBody", min_length=1)
    is_markdown: bool = Field(..., alias="isMarkdown", strict=True)

    @field_validator("mail_body")
    @classmethod
    def sanitize_body(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Mail body must not be empty")
        return html.escape(cleaned)


class BatchMailRequest(MailRequest):
    send_to: Presence = Field(..., alias="sendTo")
    gender: Gender
    day: int = Field(..., strict=True)
    specific: Optional[bool] = Field(None, strict=True)

    def event_context(self) -> EventContext:
        return EventContext(
            event_name=self.event_name,
            day=self.day,
            audience=AudienceFilter(
                presence=self.send_to,
                gender=self.gender,
                specific=self.specific,
            ),
        )


__all__ = ["MailRequest", "BatchMailRequest"]
