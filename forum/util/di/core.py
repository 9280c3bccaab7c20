"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import AuthSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider, loaded once from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
