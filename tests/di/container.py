"""Test container: mock components unless explicitly unmocked."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from tracker.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Assemble a container for tests.

    Concrete providers (config, services, use cases) are the production
    ones. Mockable components use their mock unless named in ``unmock``.

    Args:
        unmock: Components that should use the production implementation

    Returns:
        Container ready to open a request scope

    Raises:
        ValueError: If ``unmock`` names a component nobody provides

    Examples:
        build_test_container()                          # in-memory repos
        build_test_container(unmock={"persistence"})    # real PostgreSQL
    """
    unmock = unmock or set()
    known = {base.__mock_component__ for base in PROVIDERS if base.is_mockable()}
    if unknown := unmock - known:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.is_mockable() and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
