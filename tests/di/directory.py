"""Mock directory providers for testing."""

from dishka import Scope, provide

from huddle.adapter.directory import MockDirectory
from huddle.domain.service import Directory
from huddle.util.di.infrastructure.directory import DirectoryProvider


class MockDirectoryProvider(DirectoryProvider):
    """Mock directory provider with a fixed set of known people."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_directory(self) -> Directory:
        """Provide mock directory."""
        return MockDirectory()
