"""Site repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sitehost.domain.model.site import Site
from sitehost.domain.value import SiteId, TagName, Username


class SiteRepository(ABC):
    """Repository for Site aggregate.

    Defines the contract for site persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def exists(self, username: Username) -> bool:
        """Check whether a site with this username exists.

        Args:
            username: Canonical username

        Returns:
            True if taken, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Site]:
        """Find a site by username.

        Args:
            username: Canonical username

        Returns:
            The site with its tag names if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        """Find a site by ID.

        Args:
            site_id: Site identifier

        Returns:
            The site if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, site: Site) -> Site:
        """Insert a new site together with its tags.

        The uniqueness check and the insert are one atomic operation: of two
        concurrent creates for the same username exactly one succeeds.
        Tag names missing from the tag registry are added to it.

        Args:
            site: The site to create

        Returns:
            The created site

        Raises:
            UsernameTakenError: If the username is already in use
            PersistenceError: If the store fails for any other reason
        """
        pass

    @abstractmethod
    async def delete(self, site_id: SiteId) -> None:
        """Delete a site and its tag links.

        Tags themselves stay in the registry.

        Args:
            site_id: Site identifier
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Site]:
        """Find sites, newest first.

        Args:
            tag: Only sites carrying this tag
            limit: Maximum number of sites
            offset: Number of sites to skip

        Returns:
            List of sites
        """
        pass

    @abstractmethod
    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count sites, optionally only those carrying a tag.

        Args:
            tag: Only sites carrying this tag

        Returns:
            Number of matching sites
        """
        pass
