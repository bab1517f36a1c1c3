"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from sitehost.config import AuthSettings, Settings, StorageSettings
from sitehost.util.di.base import ProviderBase
from sitehost.util.password import PasswordHasher


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide site storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return PasswordHasher(auth_settings)
