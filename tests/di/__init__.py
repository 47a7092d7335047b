"""Mock providers for testing."""

from .directory import MockDirectoryProvider
from .container import build_test_container

__all__ = [
    "MockDirectoryProvider",
    "build_test_container",
]
