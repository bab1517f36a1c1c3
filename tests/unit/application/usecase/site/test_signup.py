"""Unit tests for SignupUseCase."""

import pytest

from sitehost.adapter.filesystem import MockSiteStorage
from sitehost.application.usecase.site import SignupRequest, SignupUseCase
from sitehost.domain.value import (
    ErrorCategory,
    ProvisioningStage,
    SignupErrorKind,
    SignupField,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignupUseCase:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_success_returns_site_descriptor(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)

        response = await use_case.execute(
            SignupRequest(username="Alice", password="hunter22", tags="Art, zines")
        )

        assert response.ok
        assert response.stage == ProvisioningStage.COMPLETE
        assert response.error is None
        assert response.site is not None
        assert response.site.username == "alice"
        assert response.site.tag_names == ["art", "zines"]

    @pytest.mark.asyncio
    async def test_response_never_contains_password(self, unit_env):
        """Neither the plaintext nor the hash leaks into the response."""
        use_case = await unit_env.get(SignupUseCase)

        response = await use_case.execute(
            SignupRequest(username="alice", password="hunter22")
        )

        dumped = response.model_dump_json()
        assert "hunter22" not in dumped
        assert "password" not in dumped

    @pytest.mark.asyncio
    async def test_validation_error_is_flattened(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)

        response = await use_case.execute(SignupRequest(username="alice", password=""))

        assert not response.ok
        assert response.site is None
        assert response.error is not None
        assert response.error.field == SignupField.PASSWORD
        assert response.error.kind == SignupErrorKind.PASSWORD_TOO_SHORT
        assert response.error.category == ErrorCategory.VALIDATION
        assert response.error.message == "Password must be at least 5 characters."

    @pytest.mark.asyncio
    async def test_infrastructure_error(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)
        storage = await unit_env.get(MockSiteStorage)
        storage.fail = True

        response = await use_case.execute(
            SignupRequest(username="alice", password="hunter22")
        )

        assert response.error is not None
        assert response.error.category == ErrorCategory.INFRASTRUCTURE
        assert response.error.field is None
