"""Shared dependencies for the mailer service."""

from fastapi import Depends

from app.clients import RegistryClient
from app.core.config import Settings, get_settings
from app.repository import EmailRepository
from app.services import AudienceService, DispatchService


def get_config() -> Settings:
    return get_settings()


def get_audience_service(config: Settings = Depends(get_config)) -> AudienceService:
    return AudienceService(client=RegistryClient(config=config))


def get_dispatch_service(config: Settings = Depends(get_config)) -> DispatchService:
    return DispatchService(repository=EmailRepository(config), config=config)


__all__ = ["get_config", "get_audience_service", "get_dispatch_service"]
