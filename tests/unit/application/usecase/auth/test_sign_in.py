"""Unit tests for SignInUseCase."""

import pytest

from sitehost.application.usecase.auth import SignInRequest, SignInUseCase
from sitehost.application.usecase.site import SignupRequest, SignupUseCase
from sitehost.domain.error import InvalidCredentialsError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignInUseCase:
    """Tests for SignInUseCase."""

    async def _signup(self, env) -> None:
        use_case = await env.get(SignupUseCase)
        response = await use_case.execute(
            SignupRequest(username="alice", password="hunter22")
        )
        assert response.ok

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        await self._signup(unit_env)
        use_case = await unit_env.get(SignInUseCase)

        response = await use_case.execute(
            SignInRequest(username="alice", password="hunter22")
        )

        assert response.username == "alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "password"),
        [("alice", "wrong-password"), ("nobody", "hunter22"), ("", "")],
    )
    async def test_bad_credentials_look_the_same(self, unit_env, username, password):
        """Wrong password and unknown user give the same error."""
        await self._signup(unit_env)
        use_case = await unit_env.get(SignInUseCase)

        with pytest.raises(InvalidCredentialsError, match="^Invalid login$"):
            await use_case.execute(SignInRequest(username=username, password=password))
