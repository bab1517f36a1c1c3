"""Site storage infrastructure providers."""

from dishka import Scope, provide

from sitehost.adapter.filesystem import LocalSiteStorage
from sitehost.config import StorageSettings
from sitehost.domain.service import SiteStorage
from sitehost.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Site storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_site_storage(self, storage_settings: StorageSettings) -> SiteStorage:
        """Provide filesystem site storage rooted at ``storage.root``."""
        return LocalSiteStorage(storage_settings)
