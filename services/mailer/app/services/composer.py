"""Assemble outbound messages carrying a participant credential."""

from __future__ import annotations

import markdown

from app.models import EmailAttachment, EmailContent

CREDENTIAL_CONTENT_TYPE = "image/png"


def render_body(raw_body: str, is_markdown: bool) -> str:
    if is_markdown:
        return markdown.markdown(raw_body)
    return raw_body


def compose_message(
    *,
    recipient: str,
    subject: str,
    raw_body: str,
    is_markdown: bool,
    credential: str,
    from_email: str,
    filename: str = "qrcode.png",
) -> EmailContent:
    """Build the email for *recipient* with its QR credential as the only attachment."""
    attachment = EmailAttachment(
        filename=filename,
        content_type=CREDENTIAL_CONTENT_TYPE,
        content=credential,
        disposition="attachment",
    )
    return EmailContent(
        to=recipient,
        from_email=from_email,
        subject=subject,
        html_body=render_body(raw_body, is_markdown),
        attachments=(attachment,),
    )


__all__ = ["render_body", "compose_message"]
