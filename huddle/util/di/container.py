"""Container assembly."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from huddle.util.di import PROVIDERS, Component, mockable_components
from huddle.util.error import DependencyInjectionError


def build_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Assemble a container from every registered provider.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Container able to serve FastAPI requests

    Raises:
        DependencyInjectionError: If a component is unknown or has no
            implementation of the requested kind
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Production container. Settings come from the environment."""
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's DishkaRoute dependencies from the container."""
    setup_dishka(container, app)
