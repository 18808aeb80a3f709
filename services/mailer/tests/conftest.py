import json
import os

os.environ.setdefault("SENDGRID_API_KEY", "SG.test-key")
os.environ.setdefault("BASE_URL", "http://registry.test/api")
os.environ.setdefault("FROM_EMAIL", "events@example.org")

from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.clients import RegistryClient
from app.core.config import Settings
from app.dependencies import get_audience_service, get_config, get_dispatch_service
from app.main import app
from app.repository import EmailRepository
from app.services import AudienceService, DispatchService


def make_settings(**overrides) -> Settings:
    config = Settings()
    config.SENDGRID_API_KEY = "SG.test-key"
    config.SENDGRID_API_URL = "https://sendgrid.test"
    config.BASE_URL = "http://registry.test/api"
    config.FROM_EMAIL = "events@example.org"
    config.REGISTRY_ERRORS_AS_EMPTY = True
    for key, value in overrides.items():
        setattr(config, key, value)
    return config


def registry_transport(participants, captured=None, status_code=200):
    """Mock registry answering every projection with *participants*."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        if participants is None:
            return httpx.Response(status_code, json={})
        return httpx.Response(status_code, json={"rs": participants})

    return httpx.MockTransport(handler)


def request_json(request: httpx.Request):
    return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock(spec=EmailRepository)


@pytest.fixture
def api(repository):
    """Build a TestClient whose registry answers with the given participants."""

    def factory(participants=None, *, config_overrides=None, transport=None):
        active_config = make_settings(**(config_overrides or {}))
        registry = RegistryClient(
            config=active_config,
            transport=transport or registry_transport(participants),
        )
        app.dependency_overrides[get_config] = lambda: active_config
        app.dependency_overrides[get_audience_service] = lambda: AudienceService(client=registry)
        app.dependency_overrides[get_dispatch_service] = lambda: DispatchService(
            repository=repository, config=active_config
        )
        return TestClient(app)

    yield factory

    app.dependency_overrides.clear()
