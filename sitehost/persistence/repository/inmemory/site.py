"""In-memory implementation of Site repository for testing."""

from copy import deepcopy
from typing import Optional

from sitehost.domain.error import UsernameTakenError
from sitehost.domain.model import Site
from sitehost.domain.repository import SiteRepository
from sitehost.domain.value import SiteId, TagName, Username

from .tag import InMemoryTagRepository


class InMemorySiteRepository(SiteRepository):
    """In-memory implementation of SiteRepository for testing.

    The username check and the insert in ``create`` happen without yielding
    to the event loop, so concurrent signups see a consistent index.
    """

    def __init__(self, tag_repository: Optional[InMemoryTagRepository] = None) -> None:
        """Initialize empty repository.

        Args:
            tag_repository: Registry that new tag names are recorded in
        """
        self._sites: dict[SiteId, Site] = {}
        self._username_index: dict[str, SiteId] = {}
        self._tag_repository = tag_repository

    async def exists(self, username: Username) -> bool:
        """Check whether a site with this username exists."""
        return username.root in self._username_index

    async def find_by_username(self, username: Username) -> Optional[Site]:
        """Find a site by username."""
        site_id = self._username_index.get(username.root)
        if site_id:
            return deepcopy(self._sites[site_id])
        return None

    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        """Find a site by ID."""
        site = self._sites.get(site_id)
        return deepcopy(site) if site else None

    async def create(self, site: Site) -> Site:
        """Insert a new site."""
        if site.username.root in self._username_index:
            raise UsernameTakenError(site.username.root)

        if self._tag_repository is not None:
            for name in site.tag_names:
                self._tag_repository.register(name)

        self._sites[site.id] = deepcopy(site)
        self._username_index[site.username.root] = site.id
        return deepcopy(site)

    async def delete(self, site_id: SiteId) -> None:
        """Delete a site."""
        site = self._sites.pop(site_id, None)
        if site:
            self._username_index.pop(site.username.root, None)

    def _matching(self, tag: Optional[TagName]) -> list[Site]:
        sites = list(self._sites.values())
        if tag:
            sites = [s for s in sites if tag in s.tag_names]
        return sites

    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Site]:
        """Find sites, newest first."""
        sites = self._matching(tag)
        sites.sort(key=lambda s: s.created_at, reverse=True)
        return [deepcopy(s) for s in sites[offset : offset + limit]]

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count sites matching the tag filter."""
        return len(self._matching(tag))
