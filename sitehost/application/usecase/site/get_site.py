"""Get site use case."""

import logfire
from pydantic import BaseModel

from sitehost.domain.error import NotFoundError
from sitehost.domain.service import SiteService
from sitehost.domain.value import Username

from .common import SiteItem


class GetSiteRequest(BaseModel):
    """Get site request."""

    username: str


class GetSiteUseCase:
    """Use case for looking up a single site."""

    def __init__(self, site_service: SiteService) -> None:
        self.site_service = site_service

    async def execute(self, request: GetSiteRequest) -> SiteItem:
        """Execute get site flow.

        Raises:
            NotFoundError: If the username is malformed or unknown
        """
        with logfire.span("get_site.execute", username=request.username):
            try:
                username = Username(request.username)
            except ValueError as e:
                raise NotFoundError("Site", request.username) from e

            site = await self.site_service.get_by_username(username)
            return SiteItem.from_site(site)
