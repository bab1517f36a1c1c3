"""Site domain service."""

import asyncio
from typing import Optional

import logfire

from sitehost.domain.error import NotFoundError
from sitehost.domain.model import Site
from sitehost.domain.repository import SiteRepository
from sitehost.domain.value import SiteId, TagName, Username
from sitehost.util.password import PasswordHasher

from .base import Service


class SiteService(Service):
    """Domain service for site lookups, credentials and the feed."""

    def __init__(
        self, site_repository: SiteRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize site service.

        Args:
            site_repository: Site repository
            password_hasher: bcrypt hasher for site passwords
        """
        self.site_repository = site_repository
        self.password_hasher = password_hasher

    async def exists(self, username: Username) -> bool:
        """Check whether a username is taken.

        Args:
            username: Canonical username

        Returns:
            True if a site already uses the username
        """
        with logfire.span("site_service.exists", username=username.root):
            exists = await self.site_repository.exists(username)
            logfire.info("Username existence check", username=username.root, exists=exists)
            return exists

    async def hash_password(self, password: str) -> str:
        """Hash a password off the event loop.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash
        """
        return await asyncio.to_thread(self.password_hasher.hash, password)

    async def create(self, site: Site) -> Site:
        """Persist a new site with its tags.

        Args:
            site: Site to create

        Returns:
            Created site

        Raises:
            UsernameTakenError: If the username is already in use
            PersistenceError: If the store fails
        """
        with logfire.span(
            "site_service.create",
            site_id=str(site.id),
            username=site.username.root,
            tags=[t.root for t in site.tag_names],
        ):
            created = await self.site_repository.create(site)
            logfire.info(
                "Site created", site_id=str(created.id), username=created.username.root
            )
            return created

    async def delete(self, site_id: SiteId) -> None:
        """Delete a site record.

        Args:
            site_id: Site ID
        """
        with logfire.span("site_service.delete", site_id=str(site_id)):
            await self.site_repository.delete(site_id)
            logfire.info("Site deleted", site_id=str(site_id))

    async def get_by_username(self, username: Username) -> Site:
        """Get site by username.

        Args:
            username: Canonical username

        Returns:
            Site entity

        Raises:
            NotFoundError: If no site has this username
        """
        with logfire.span("site_service.get_by_username", username=username.root):
            site = await self.site_repository.find_by_username(username)
            if not site:
                logfire.warn("Site not found", username=username.root)
                raise NotFoundError("Site", username.root)
            return site

    async def authenticate(self, username: str, password: str) -> Optional[Site]:
        """Check sign-in credentials.

        An unknown or malformed username and a wrong password look the same
        to the caller.

        Args:
            username: Username as typed
            password: Plaintext password

        Returns:
            The site if the credentials match, None otherwise
        """
        with logfire.span("site_service.authenticate", username=username):
            try:
                canonical = Username(username)
            except ValueError:
                logfire.warn("Sign-in with malformed username", username=username)
                return None

            site = await self.site_repository.find_by_username(canonical)
            if not site:
                logfire.warn("Sign-in for unknown site", username=canonical.root)
                return None

            matches = await asyncio.to_thread(
                self.password_hasher.verify, password, site.password_hash
            )
            if not matches:
                logfire.warn("Sign-in with wrong password", username=canonical.root)
                return None

            logfire.info("Sign-in succeeded", username=canonical.root)
            return site

    async def list_recent(
        self, tag: Optional[TagName] = None, limit: int = 30, offset: int = 0
    ) -> tuple[list[Site], int]:
        """List sites for the feed, newest first.

        Args:
            tag: Only sites carrying this tag
            limit: Maximum number of sites
            offset: Number of sites to skip

        Returns:
            Tuple of (sites, total matching count)
        """
        with logfire.span(
            "site_service.list_recent",
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            sites = await self.site_repository.find_recent(
                tag=tag, limit=limit, offset=offset
            )
            total = await self.site_repository.count(tag=tag)
            logfire.info("Sites listed", count=len(sites), total=total)
            return sites, total
