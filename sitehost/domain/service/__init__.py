"""Domain services."""

from .base import Service
from .provisioning_service import (
    ProvisioningRequest,
    ProvisioningResult,
    ProvisioningService,
)
from .site_service import SiteService
from .site_storage import SiteStorage
from .tag_service import TagService

__all__ = [
    "ProvisioningRequest",
    "ProvisioningResult",
    "ProvisioningService",
    "Service",
    "SiteService",
    "SiteStorage",
    "TagService",
]
