"""Unit tests for the in-memory site and tag repositories."""

from uuid import uuid4

import pytest

from sitehost.domain.error import UsernameTakenError
from sitehost.domain.model import Site
from sitehost.domain.value import SiteId, TagName, Username
from sitehost.persistence.repository.inmemory import (
    InMemorySiteRepository,
    InMemoryTagRepository,
)


def _site(username: str, tags: list[str] | None = None) -> Site:
    return Site(
        id=SiteId(uuid4()),
        username=Username(username),
        password_hash="$2b$04$hash",
        tag_names=[TagName(t) for t in tags or []],
    )


class TestInMemorySiteRepository:
    """Tests for InMemorySiteRepository."""

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_username(self):
        repo = InMemorySiteRepository()
        await repo.create(_site("alice"))

        with pytest.raises(UsernameTakenError) as exc_info:
            await repo.create(_site("alice"))

        assert exc_info.value.username == "alice"
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_returns_copies(self):
        """Callers can't mutate stored state through returned objects."""
        repo = InMemorySiteRepository()
        site = await repo.create(_site("alice", ["art"]))

        found = await repo.find_by_id(site.id)
        assert found is not None
        found.tag_names.append(TagName("music"))

        again = await repo.find_by_id(site.id)
        assert again is not None
        assert again.tag_names == [TagName("art")]

    @pytest.mark.asyncio
    async def test_registers_tags(self):
        tags = InMemoryTagRepository()
        repo = InMemorySiteRepository(tag_repository=tags)

        await repo.create(_site("alice", ["art", "music"]))
        await repo.create(_site("bob", ["art"]))

        assert [t.name.root for t in await tags.find_all()] == ["art", "music"]

    @pytest.mark.asyncio
    async def test_delete_frees_username(self):
        repo = InMemorySiteRepository()
        site = await repo.create(_site("alice"))

        await repo.delete(site.id)

        assert not await repo.exists(Username("alice"))
        await repo.create(_site("alice"))


class TestInMemoryTagRepository:
    """Tests for InMemoryTagRepository."""

    def test_register_is_idempotent(self):
        tags = InMemoryTagRepository()

        first = tags.register(TagName("art"))
        second = tags.register(TagName("art"))

        assert first.id == second.id
