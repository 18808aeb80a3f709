"""Per-recipient attendance credentials rendered as QR codes."""

from __future__ import annotations

import base64
import hashlib
import re
from io import BytesIO

import qrcode
from qrcode import constants
from qrcode.exceptions import DataOverflowError

from app.core.exceptions import CredentialEncodingError

DATA_URI_HEADER = re.compile(r"^data:image/(png|jpg);base64,")


def derive_token(email: str, event_name: str) -> str:
    """Return the stable identifier printed in a participant's QR code.

    The token is the MD5 hex digest of the address followed by the event
    name. It only identifies attendance and is not a secret.
    """
    return hashlib.md5(f"{email}{event_name}".encode("utf-8")).hexdigest()


def encode_credential(token: str) -> str:
    """Render *token* as a PNG QR code and return it as a data URI."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )

    try:
        qr.add_data(token)
        qr.make(fit=True)
        image = qr.make_image(fill_color="black", back_color="white")
        buffer = BytesIO()
        image.save(buffer, format="PNG")
    except (DataOverflowError, ValueError, OSError) as exc:
        raise CredentialEncodingError(f"Could not encode QR code: {exc}") from exc

    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def strip_data_uri(data_uri: str) -> str:
    """Drop the ``data:image/...;base64,`` prefix, leaving the base64 payload."""
    return DATA_URI_HEADER.sub("", data_uri, count=1)


def build_credential(email: str, event_name: str) -> str:
    """Return the base64 PNG credential for one participant of *event_name*."""
    return strip_data_uri(encode_credential(derive_token(email, event_name)))


__all__ = [
    "derive_token",
    "encode_credential",
    "strip_data_uri",
    "build_credential",
]
