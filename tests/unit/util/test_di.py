"""Unit tests for provider selection."""

import pytest

from sitehost.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
    get_provider,
)
from sitehost.util.di.base import ProviderBase
from sitehost.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, MockStorageProvider, build_test_container


class LonelyProvider(ProviderBase):
    """Mockable component with only a production implementation."""

    __mock_component__ = "storage"


class ProdLonelyProvider(LonelyProvider):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    @pytest.mark.parametrize(
        ("base", "prod", "mock"),
        [
            (PersistenceProvider, ProdPersistenceProvider, MockPersistenceProvider),
            (StorageProvider, ProdStorageProvider, MockStorageProvider),
        ],
    )
    def test_selects_by_mock_flag(self, base, prod, mock):
        assert get_provider(base, use_mock=False) is prod
        assert get_provider(base, use_mock=True) is mock

    def test_missing_implementation(self):
        with pytest.raises(DependencyInjectionError, match="No mock implementation for storage"):
            get_provider(LonelyProvider, use_mock=True)


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"bluesky"})  # type: ignore[arg-type]
