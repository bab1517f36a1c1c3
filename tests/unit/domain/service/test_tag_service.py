"""Unit tests for TagService."""

from uuid import uuid4

import pytest

from sitehost.domain.model import Site
from sitehost.domain.repository import SiteRepository
from sitehost.domain.service import TagService
from sitehost.domain.value import SiteId, TagName, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _add_site(repo: SiteRepository, username: str, tags: list[str]) -> None:
    await repo.create(
        Site(
            id=SiteId(uuid4()),
            username=Username(username),
            password_hash="x",
            tag_names=[TagName(t) for t in tags],
        )
    )


class TestTagService:
    """Tests for TagService."""

    @pytest.mark.asyncio
    async def test_registry_collects_tags_from_sites(self, unit_env):
        """Each distinct tag used by any site is registered once."""
        repo = await unit_env.get(SiteRepository)
        service = await unit_env.get(TagService)
        await _add_site(repo, "alice", ["music", "art"])
        await _add_site(repo, "bob", ["art", "zines"])

        tags = await service.get_all_tags()

        assert [t.name.root for t in tags] == ["art", "music", "zines"]

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        """limit caps the number of tags returned."""
        repo = await unit_env.get(SiteRepository)
        service = await unit_env.get(TagService)
        await _add_site(repo, "alice", ["a", "b", "c"])

        tags = await service.get_all_tags(limit=2)

        assert len(tags) == 2
