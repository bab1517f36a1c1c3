"""Tag repository interface."""

from abc import ABC, abstractmethod

from sitehost.domain.model.tag import Tag


class TagRepository(ABC):
    """Repository interface for the shared tag registry.

    Tags are written as a side effect of ``SiteRepository.create``; this
    interface only reads them.
    """

    @abstractmethod
    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags.

        Args:
            limit: Maximum number of tags to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        pass
