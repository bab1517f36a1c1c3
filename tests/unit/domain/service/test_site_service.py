"""Unit tests for SiteService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from sitehost.domain.error import NotFoundError
from sitehost.domain.model import Site
from sitehost.domain.repository import SiteRepository
from sitehost.domain.service import SiteService
from sitehost.domain.value import SiteId, TagName, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _create_site(
    service: SiteService,
    username: str,
    password: str = "hunter22",
    tags: tuple[str, ...] = (),
    created_at: datetime | None = None,
) -> Site:
    site = Site(
        id=SiteId(uuid4()),
        username=Username(username),
        password_hash=await service.hash_password(password),
        tag_names=[TagName(t) for t in tags],
        created_at=created_at or datetime.now(),
    )
    return await service.create(site)


class TestPasswords:
    """Tests for password hashing and sign-in."""

    @pytest.mark.asyncio
    async def test_hash_is_not_plaintext(self, unit_env):
        """The stored hash never equals the password."""
        service = await unit_env.get(SiteService)

        password_hash = await service.hash_password("hunter22")

        assert password_hash != "hunter22"
        assert password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        """Matching credentials return the site."""
        service = await unit_env.get(SiteService)
        site = await _create_site(service, "alice", password="hunter22")

        result = await service.authenticate("alice", "hunter22")

        assert result is not None
        assert result.id == site.id

    @pytest.mark.asyncio
    async def test_authenticate_ignores_username_case(self, unit_env):
        """Sign-in uses the canonical username."""
        service = await unit_env.get(SiteService)
        await _create_site(service, "alice", password="hunter22")

        assert await service.authenticate("ALICE", "hunter22") is not None

    @pytest.mark.asyncio
    async def test_authenticate_with_wrong_password(self, unit_env):
        """A wrong password returns None."""
        service = await unit_env.get(SiteService)
        await _create_site(service, "alice", password="hunter22")

        assert await service.authenticate("alice", "hunter23") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["nobody", "not valid!", ""])
    async def test_authenticate_unknown_or_malformed_user(self, unit_env, username):
        """Unknown and malformed usernames return None rather than raising."""
        service = await unit_env.get(SiteService)

        assert await service.authenticate(username, "hunter22") is None


class TestLookups:
    """Tests for existence checks and lookups."""

    @pytest.mark.asyncio
    async def test_exists(self, unit_env):
        """exists reflects created sites."""
        service = await unit_env.get(SiteService)
        await _create_site(service, "alice")

        assert await service.exists(Username("alice")) is True
        assert await service.exists(Username("bob")) is False

    @pytest.mark.asyncio
    async def test_get_by_username_not_found(self, unit_env):
        """A missing site raises NotFoundError."""
        service = await unit_env.get(SiteService)

        with pytest.raises(NotFoundError, match="Site not found: ghost"):
            await service.get_by_username(Username("ghost"))

    @pytest.mark.asyncio
    async def test_delete_removes_site(self, unit_env):
        """Deleted sites can no longer be found."""
        service = await unit_env.get(SiteService)
        repo = await unit_env.get(SiteRepository)
        site = await _create_site(service, "alice")

        await service.delete(site.id)

        assert await repo.find_by_id(site.id) is None
        assert await service.exists(Username("alice")) is False


class TestListRecent:
    """Tests for the recent-sites feed."""

    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, unit_env):
        """Sites come back newest first and total counts all matches."""
        service = await unit_env.get(SiteService)
        now = datetime.now()
        for i, name in enumerate(["first", "second", "third"]):
            await _create_site(service, name, created_at=now + timedelta(seconds=i))

        sites, total = await service.list_recent(limit=2)

        assert [s.username.root for s in sites] == ["third", "second"]
        assert total == 3

    @pytest.mark.asyncio
    async def test_offset(self, unit_env):
        """Offset skips the newest sites."""
        service = await unit_env.get(SiteService)
        now = datetime.now()
        for i, name in enumerate(["first", "second", "third"]):
            await _create_site(service, name, created_at=now + timedelta(seconds=i))

        sites, _ = await service.list_recent(limit=10, offset=2)

        assert [s.username.root for s in sites] == ["first"]

    @pytest.mark.asyncio
    async def test_filter_by_tag(self, unit_env):
        """Only sites carrying the tag are listed and counted."""
        service = await unit_env.get(SiteService)
        await _create_site(service, "artsy", tags=("art", "zines"))
        await _create_site(service, "musical", tags=("music",))

        sites, total = await service.list_recent(tag=TagName("art"))

        assert [s.username.root for s in sites] == ["artsy"]
        assert total == 1
