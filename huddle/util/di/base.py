"""Provider base class and mockable component names."""

from typing import ClassVar, Literal

from dishka import Provider

from huddle.util.error import DependencyInjectionError

Component = Literal["directory"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick an implementation.

    A provider class that has subclasses is a mockable component: the
    subclasses are its production and mock implementations, told apart by
    ``__is_mock__``. A provider class without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Provider class to instantiate for this component.

        Args:
            mock: Pick the mock implementation instead of production

        Raises:
            DependencyInjectionError: If no such implementation is registered
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise DependencyInjectionError(
            f"No {kind} implementation registered for {cls.__mock_component__}"
        )
