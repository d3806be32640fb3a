"""Production container assembly and FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from tracker.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Assemble the container from the production side of every provider.

    Nothing is resolved here; the engine and settings are built lazily on
    first use.
    """
    providers = [get_provider(entry)() for entry in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Route ``FromDishka`` parameters of ``app`` through ``container``."""
    setup_dishka(container, app)
