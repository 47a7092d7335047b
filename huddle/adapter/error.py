"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class CatalogConfigurationError(AdapterError):
    """Configured resources or slots are invalid."""

    pass
