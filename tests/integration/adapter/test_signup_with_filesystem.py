"""Integration tests for signup against real filesystem storage.

Persistence stays in memory; site files are written under a temporary
STORAGE__ROOT.
"""

import pytest

from sitehost.domain.repository import SiteRepository
from sitehost.domain.service import (
    ProvisioningRequest,
    ProvisioningService,
    SiteStorage,
)
from sitehost.domain.value import SignupErrorKind, Username
from tests.harness import create_env_fixture

storage_env = create_env_fixture(unmock={"storage"})


@pytest.fixture(autouse=True)
def storage_root(tmp_path, monkeypatch):
    """Point site storage at a temporary directory."""
    root = tmp_path / "sites"
    monkeypatch.setenv("STORAGE__ROOT", str(root))
    monkeypatch.setenv("STORAGE__RETRY_DELAY_SECONDS", "0")
    return root


class TestSignupWithFilesystem:
    """Signup writes real site directories."""

    @pytest.mark.asyncio
    async def test_signup_creates_index(self, storage_env, storage_root):
        service = await storage_env.get(ProvisioningService)

        result = await service.submit(
            ProvisioningRequest(username="Alice", password="hunter22", tags="art")
        )

        assert result.ok
        assert (storage_root / "alice" / "index.html").is_file()

        storage = await storage_env.get(SiteStorage)
        assert await storage.index_exists("alice")

    @pytest.mark.asyncio
    async def test_unwritable_root_compensates(self, storage_env, storage_root):
        """When the site directory can't be created the record is removed."""
        # A file where the storage root should be makes every attempt fail
        storage_root.write_text("not a directory", encoding="utf-8")
        service = await storage_env.get(ProvisioningService)
        repo = await storage_env.get(SiteRepository)

        result = await service.submit(
            ProvisioningRequest(username="alice", password="hunter22")
        )

        assert not result.ok
        assert result.error is not None
        assert result.error.kind == SignupErrorKind.PROVISION_FAILED
        assert not await repo.exists(Username("alice"))
