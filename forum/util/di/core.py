"""Core DI providers (non-mockable)."""

from dishka import Scope, provide
import logfire

from forum.config import AuthSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for every other provider, read once per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Load settings from the environment and .env file."""
        settings = Settings()
        logfire.debug("Settings loaded", environment=settings.environment)
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token and password hashing settings."""
        return settings.auth
