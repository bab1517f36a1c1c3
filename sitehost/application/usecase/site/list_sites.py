"""List sites use case."""

import logfire
from pydantic import BaseModel, Field

from sitehost.domain.service import SiteService
from sitehost.domain.value import TagName

from .common import SiteItem


class ListSitesRequest(BaseModel):
    """List sites request."""

    tag: str | None = None  # Filter by tag name
    limit: int = Field(default=30, ge=1)
    offset: int = Field(default=0, ge=0)


class ListSitesResponse(BaseModel):
    """List sites response."""

    sites: list[SiteItem]
    total: int
    limit: int
    offset: int


class ListSitesUseCase:
    """Use case for the recent-sites feed."""

    def __init__(self, site_service: SiteService) -> None:
        """Initialize list sites use case.

        Args:
            site_service: Site domain service
        """
        self.site_service = site_service

    async def execute(self, request: ListSitesRequest) -> ListSitesResponse:
        """Execute list sites flow.

        A tag that can't be a valid tag name matches no sites.

        Args:
            request: List sites request with filter and pagination

        Returns:
            Page of sites, newest first, with the total match count
        """
        with logfire.span(
            "list_sites.execute",
            tag=request.tag,
            limit=request.limit,
            offset=request.offset,
        ):
            tag = None
            if request.tag:
                try:
                    tag = TagName(request.tag.strip().lower())
                except ValueError:
                    logfire.warn("Feed filtered by invalid tag", tag=request.tag)
                    return ListSitesResponse(
                        sites=[], total=0, limit=request.limit, offset=request.offset
                    )

            sites, total = await self.site_service.list_recent(
                tag=tag, limit=request.limit, offset=request.offset
            )

            return ListSitesResponse(
                sites=[SiteItem.from_site(site) for site in sites],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
