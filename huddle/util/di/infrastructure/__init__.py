"""Infrastructure providers."""

# Import bases
from .catalog import CatalogProvider
from .directory import DirectoryProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .directory import ProdDirectoryProvider  # noqa: F401

__all__ = [
    "CatalogProvider",
    "DirectoryProvider",
    "PersistenceProvider",
    "ProdDirectoryProvider",
]
