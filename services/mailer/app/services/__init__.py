"""Services orchestrating audience resolution and mail delivery."""

from app.services.audience_service import AudienceService
from app.services.dispatch_service import DispatchService

__all__ = ["AudienceService", "DispatchService"]
