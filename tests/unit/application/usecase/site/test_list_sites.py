"""Unit tests for ListSitesUseCase and GetSiteUseCase."""

import pytest

from sitehost.application.usecase.site import (
    GetSiteRequest,
    GetSiteUseCase,
    ListSitesRequest,
    ListSitesUseCase,
    SignupRequest,
    SignupUseCase,
)
from sitehost.domain.error import NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _signup(env, username: str, tags: str = "") -> None:
    use_case = await env.get(SignupUseCase)
    response = await use_case.execute(
        SignupRequest(username=username, password="hunter22", tags=tags)
    )
    assert response.ok


class TestListSitesUseCase:
    """Tests for ListSitesUseCase."""

    @pytest.mark.asyncio
    async def test_new_site_appears_in_feed(self, unit_env):
        await _signup(unit_env, "alice", "art")
        use_case = await unit_env.get(ListSitesUseCase)

        response = await use_case.execute(ListSitesRequest())

        assert [s.username for s in response.sites] == ["alice"]
        assert response.total == 1
        assert response.limit == 30
        assert response.offset == 0

    @pytest.mark.asyncio
    async def test_site_appears_under_each_of_its_tags(self, unit_env):
        await _signup(unit_env, "alice", "art, zines")
        await _signup(unit_env, "bob", "music")
        use_case = await unit_env.get(ListSitesUseCase)

        for tag in ["art", "zines"]:
            response = await use_case.execute(ListSitesRequest(tag=tag))
            assert [s.username for s in response.sites] == ["alice"]

    @pytest.mark.asyncio
    async def test_tag_filter_is_case_insensitive(self, unit_env):
        await _signup(unit_env, "alice", "art")
        use_case = await unit_env.get(ListSitesUseCase)

        response = await use_case.execute(ListSitesRequest(tag="ART"))

        assert response.total == 1

    @pytest.mark.asyncio
    async def test_invalid_tag_matches_nothing(self, unit_env):
        await _signup(unit_env, "alice", "art")
        use_case = await unit_env.get(ListSitesUseCase)

        response = await use_case.execute(ListSitesRequest(tag="not a tag!"))

        assert response.sites == []
        assert response.total == 0


class TestGetSiteUseCase:
    """Tests for GetSiteUseCase."""

    @pytest.mark.asyncio
    async def test_found(self, unit_env):
        await _signup(unit_env, "alice", "art")
        use_case = await unit_env.get(GetSiteUseCase)

        site = await use_case.execute(GetSiteRequest(username="ALICE"))

        assert site.username == "alice"
        assert site.tag_names == ["art"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["ghost", "not valid!"])
    async def test_not_found(self, unit_env, username):
        use_case = await unit_env.get(GetSiteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetSiteRequest(username=username))
