"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from uuid import uuid4

from sitehost.domain.model.tag import Tag
from sitehost.domain.repository.tag import TagRepository
from sitehost.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}

    def register(self, name: TagName) -> Tag:
        """Return the registry entry for a name, creating it on first use."""
        tag_id = self._name_index.get(name.root)
        if tag_id:
            return deepcopy(self._tags[tag_id])

        tag = Tag(id=TagId(uuid4()), name=name)
        self._tags[tag.id] = tag
        self._name_index[name.root] = tag.id
        return deepcopy(tag)

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Find all tags."""
        tags = list(self._tags.values())

        if order_by == "created_at":
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: t.name.root)

        return [deepcopy(tag) for tag in tags[:limit]]
