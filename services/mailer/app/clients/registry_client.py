"""HTTP client for the participant registry."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from app.core.config import Settings, settings
from app.core.exceptions import RegistryError
from app.models import EventContext, RegistryQuery

logger = logging.getLogger(__name__)


def build_query(context: EventContext) -> Tuple[str, Dict[str, Any]]:
    """Return the registry path and payload selecting the audience of *context*."""

    audience = context.audience
    kind = audience.query_kind
    payload: Dict[str, Any] = {"event": context.event_name}
    if kind is RegistryQuery.RESTRICTED:
        payload["day"] = context.day
    query: Dict[str, Any] = {"key": "gender", "value": audience.gender_code}
    if audience.specific is not None:
        query["specific"] = audience.specific
    payload["query"] = query
    return f"simple-projection/{kind.value}", payload


class RegistryClient:
    """Small wrapper around the registry projection endpoints."""

    def __init__(
        self,
        *,
        config: Settings | None = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = config or settings
        configured_base = base_url or self._settings.BASE_URL
        self._base_url = configured_base.rstrip("/") if configured_base else ""
        self._timeout = timeout or self._settings.REGISTRY_TIMEOUT
        self._transport = transport

    def fetch_participants(
        self, context: EventContext, access_token: Optional[str]
    ) -> Optional[List[Dict[str, Any]]]:
        """Return the raw participant entries, or ``None`` when the registry has none."""

        if not self._base_url:
            raise RegistryError("BASE_URL must be configured to resolve participants")

        path, payload = build_query(context)
        url = f"{self._base_url}/{path}"
        headers = {"Authorization": access_token} if access_token else {}

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise RegistryError(
                f"Registry returned HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.RequestError as exc:
            raise RegistryError(f"Failed to reach registry: {exc}") from exc
        except ValueError as exc:
            raise RegistryError("Registry returned a malformed response") from exc

        if not isinstance(data, dict):
            return None
        participants = data.get("rs")
        if not isinstance(participants, list):
            return None
        logger.debug("Registry %s returned %d participants", path, len(participants))
        return participants


__all__ = ["RegistryClient", "build_query"]
