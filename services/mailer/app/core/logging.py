"""Logging setup for the mailer service."""

from __future__ import annotations

import logging
import logging.config
import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


class EmailRedactingFilter(logging.Filter):
    """Mask recipient addresses before records reach a handler."""

    @staticmethod
    def _redact(value: object) -> object:
        if not isinstance(value, str):
            return value
        return EMAIL_PATTERN.sub("[REDACTED]", value)

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._redact(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._redact(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._redact(value) for key, value in record.args.items()}

        return True


def setup_logging(level: str | None = None) -> None:
    from app.core.config import get_settings

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_emails": {
                    "()": "app.core.logging.EmailRedactingFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact_emails"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": (level or get_settings().LOG_LEVEL).upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )


__all__ = ["setup_logging", "EmailRedactingFilter"]
