"""Domain layer DI providers."""

from dishka import Scope, provide

from sitehost.domain.repository import SiteRepository, TagRepository
from sitehost.domain.service import (
    ProvisioningService,
    SiteService,
    SiteStorage,
    TagService,
)
from sitehost.util.di.base import ProviderBase
from sitehost.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_site_service(
        self, site_repository: SiteRepository, password_hasher: PasswordHasher
    ) -> SiteService:
        """Provide site domain service."""
        return SiteService(
            site_repository=site_repository, password_hasher=password_hasher
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_provisioning_service(
        self, site_service: SiteService, site_storage: SiteStorage
    ) -> ProvisioningService:
        """Provide signup provisioning domain service."""
        return ProvisioningService(site_service=site_service, site_storage=site_storage)
