"""Participant directory infrastructure providers."""

from dishka import Scope, provide

from huddle.adapter.directory import StaticDirectory
from huddle.config import Settings
from huddle.domain.service import Directory
from huddle.util.di.base import ProviderBase


class DirectoryProvider(ProviderBase):
    """Directory component base."""

    __mock_component__ = "directory"


class ProdDirectoryProvider(DirectoryProvider):
    """Production directory provider using configured display names."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_directory(self, settings: Settings) -> Directory:
        """Provide static directory."""
        return StaticDirectory(settings.directory)
