"""Configuration providers."""

from dishka import Scope, provide

from tracker.config import AuthSettings, CommentSettings, Settings
from tracker.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes Settings and the nested sections services depend on.

    Settings are read once per container from the environment and .env.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        """JWT verification settings for JWTService."""
        return settings.auth

    @provide
    def comments(self, settings: Settings) -> CommentSettings:
        """Thread depth, paging and content limits."""
        return settings.comments
