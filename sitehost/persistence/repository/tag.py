"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sitehost.domain.model.tag import Tag
from sitehost.domain.repository.tag import TagRepository
from sitehost.persistence.mappers import row_to_tag
from sitehost.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags."""
        stmt = select(tags_table).limit(limit)

        if order_by == "created_at":
            stmt = stmt.order_by(tags_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(tags_table.c.name)

        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
