"""Utility layer errors."""


class UtilError(Exception):
    """Base error for wiring and infrastructure helpers."""


class DependencyInjectionError(UtilError):
    """The container cannot be assembled as requested."""
