"""Application layer DI providers."""

from dishka import Scope, provide

from sitehost.application.usecase.auth import SignInUseCase
from sitehost.application.usecase.site import (
    GetSiteUseCase,
    ListSitesUseCase,
    SignupUseCase,
)
from sitehost.application.usecase.tag import ListTagsUseCase
from sitehost.domain.service import ProvisioningService, SiteService, TagService
from sitehost.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Site use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, provisioning_service: ProvisioningService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(provisioning_service=provisioning_service)

    @provide(scope=Scope.REQUEST)
    def get_get_site_use_case(self, site_service: SiteService) -> GetSiteUseCase:
        """Provide get site use case."""
        return GetSiteUseCase(site_service=site_service)

    @provide(scope=Scope.REQUEST)
    def get_list_sites_use_case(self, site_service: SiteService) -> ListSitesUseCase:
        """Provide list sites use case."""
        return ListSitesUseCase(site_service=site_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(self, site_service: SiteService) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(site_service=site_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
