"""Collaborator adapters: resource catalog and participant directory."""

from .catalog import StaticResourceCatalog
from .directory import MockDirectory, StaticDirectory

__all__ = ["StaticResourceCatalog", "StaticDirectory", "MockDirectory"]
