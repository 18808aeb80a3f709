"""Clients for services the mailer depends on."""

from app.clients.registry_client import RegistryClient, build_query

__all__ = ["RegistryClient", "build_query"]
