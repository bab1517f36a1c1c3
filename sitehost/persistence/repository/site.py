"""PostgreSQL implementation of Site repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sitehost.domain.error import PersistenceError, UsernameTakenError
from sitehost.domain.model import Site
from sitehost.domain.repository import SiteRepository
from sitehost.domain.value import SiteId, TagName, Username
from sitehost.persistence.mappers import row_to_site, site_to_dict
from sitehost.persistence.tables import site_tags_table, sites_table, tags_table

USERNAME_CONSTRAINT = "uq_sites_username"


class PostgresSiteRepository(SiteRepository):
    """PostgreSQL implementation of SiteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_sites(
        self, site_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tag names for multiple sites in a single query.

        Args:
            site_ids: List of site IDs

        Returns:
            Dict mapping site_id -> tag names in position order
        """
        if not site_ids:
            return {}

        stmt = (
            select(site_tags_table.c.site_id, tags_table.c.name)
            .select_from(site_tags_table)
            .join(tags_table, site_tags_table.c.tag_id == tags_table.c.id)
            .where(site_tags_table.c.site_id.in_(site_ids))
            .order_by(site_tags_table.c.site_id, site_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        site_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            site_tag_map[row.site_id].append(row.name)

        return site_tag_map

    async def _rows_to_sites(self, rows) -> list[Site]:
        site_tag_map = await self._fetch_tags_for_sites([row.id for row in rows])
        return [
            row_to_site(row._asdict(), tag_names=site_tag_map.get(row.id, []))
            for row in rows
        ]

    async def exists(self, username: Username) -> bool:
        """Check whether a site with this username exists."""
        stmt = (
            select(func.count())
            .select_from(sites_table)
            .where(sites_table.c.username == username.root)
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_by_username(self, username: Username) -> Optional[Site]:
        """Find a site by username."""
        stmt = select(sites_table).where(sites_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        sites = await self._rows_to_sites([row])
        return sites[0]

    async def find_by_id(self, site_id: SiteId) -> Optional[Site]:
        """Find a site by ID."""
        stmt = select(sites_table).where(sites_table.c.id == site_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        sites = await self._rows_to_sites([row])
        return sites[0]

    async def create(self, site: Site) -> Site:
        """Insert a site, its missing registry tags and its tag links.

        Everything runs inside a savepoint so a conflict leaves the
        surrounding session usable.
        """
        with logfire.span(
            "site_repository.create",
            site_id=str(site.id),
            username=site.username.root,
            tags=[t.root for t in site.tag_names],
        ):
            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        insert(sites_table).values(**site_to_dict(site))
                    )
                    await self._link_tags(site)
            except IntegrityError as e:
                if USERNAME_CONSTRAINT in str(e.orig):
                    logfire.warn("Username conflict", username=site.username.root)
                    raise UsernameTakenError(site.username.root) from e
                raise PersistenceError(f"Integrity error creating site: {e}") from e
            except SQLAlchemyError as e:
                raise PersistenceError(f"Database error creating site: {e}") from e

            logfire.info("Site inserted", site_id=str(site.id))
            return site

    async def _link_tags(self, site: Site) -> None:
        if not site.tag_names:
            return

        names = [tag.root for tag in site.tag_names]

        # Register new names; existing ones are left alone
        register_stmt = (
            pg_insert(tags_table)
            .values([{"id": uuid4(), "name": name} for name in names])
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await self.session.execute(register_stmt)

        lookup = select(tags_table.c.id, tags_table.c.name).where(
            tags_table.c.name.in_(names)
        )
        result = await self.session.execute(lookup)
        tag_id_map = {row.name: row.id for row in result.fetchall()}

        await self.session.execute(
            insert(site_tags_table),
            [
                {
                    "id": uuid4(),
                    "site_id": site.id,
                    "tag_id": tag_id_map[name],
                    "position": position,
                }
                for position, name in enumerate(names)
            ],
        )

    async def delete(self, site_id: SiteId) -> None:
        """Delete a site (tag links cascade)."""
        try:
            stmt = delete(sites_table).where(sites_table.c.id == site_id)
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Database error deleting site: {e}") from e

    def _filter_by_tag(self, stmt, tag: Optional[TagName]):
        if not tag:
            return stmt
        return (
            stmt.join(site_tags_table, sites_table.c.id == site_tags_table.c.site_id)
            .join(tags_table, site_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.name == tag.root)
        )

    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Site]:
        """Find sites, newest first."""
        with logfire.span(
            "site_repository.find_recent",
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter_by_tag(select(sites_table), tag)
            stmt = (
                stmt.order_by(desc(sites_table.c.created_at)).limit(limit).offset(offset)
            )

            result = await self.session.execute(stmt)
            rows = result.fetchall()
            if not rows:
                logfire.info("No sites found")
                return []

            return await self._rows_to_sites(rows)

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count sites matching the tag filter."""
        stmt = self._filter_by_tag(select(func.count()).select_from(sites_table), tag)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
