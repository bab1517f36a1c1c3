"""Unit tests for ListTagsUseCase."""

import pytest
from pydantic import ValidationError

from sitehost.application.usecase.site import SignupRequest, SignupUseCase
from sitehost.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_tags_used_by_sites(self, unit_env):
        signup = await unit_env.get(SignupUseCase)
        await signup.execute(
            SignupRequest(username="alice", password="hunter22", tags="Zines, art")
        )
        use_case = await unit_env.get(ListTagsUseCase)

        response = await use_case.execute(ListTagsRequest())

        assert [t.name for t in response.tags] == ["art", "zines"]

    @pytest.mark.asyncio
    async def test_empty_registry(self, unit_env):
        use_case = await unit_env.get(ListTagsUseCase)

        response = await use_case.execute(ListTagsRequest())

        assert response.tags == []

    def test_rejects_unknown_order(self):
        with pytest.raises(ValidationError):
            ListTagsRequest(order_by="popularity")
