"""Configuration for the mailer service."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


class Settings:
    PROJECT_NAME: str = os.getenv("MAILER_PROJECT_NAME", "Mailer Service")

    SENDGRID_API_KEY: str = os.getenv("SENDGRID_API_KEY", "")
    SENDGRID_API_URL: str = os.getenv("SENDGRID_API_URL", "https://api.sendgrid.com")
    SENDGRID_TIMEOUT: float = float(os.getenv("SENDGRID_TIMEOUT", "10"))
    FROM_EMAIL: str = os.getenv("FROM_EMAIL", "")

    # Participant registry queried to resolve the audience of a batch.
    BASE_URL: str = os.getenv("BASE_URL", "")
    REGISTRY_TIMEOUT: float = float(os.getenv("REGISTRY_TIMEOUT", "1"))
    # When true a failed registry call is answered like an empty audience.
    REGISTRY_ERRORS_AS_EMPTY: bool = _to_bool(
        os.getenv("REGISTRY_ERRORS_AS_EMPTY", "true"), default=True
    )

    CREDENTIAL_FILENAME: str = os.getenv("CREDENTIAL_FILENAME", "qrcode.png")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    REQUIRED: tuple[str, ...] = ("SENDGRID_API_KEY", "BASE_URL", "FROM_EMAIL")

    def missing(self) -> list[str]:
        """Return the names of required settings that are not configured."""
        return [name for name in self.REQUIRED if not getattr(self, name)]

    def require(self, name: str) -> str:
        value: Optional[str] = getattr(self, name, None)
        if not value:
            raise RuntimeError(f"{name} must be configured")
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
