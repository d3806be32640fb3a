"""HTTP entry point for the comment service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.config import Settings
from tracker.interface.api.routes import comments, health, votes
from tracker.util.di.container import create_container, setup_di
from tracker.util.observability import instrument_fastapi

ROUTERS = (health.router, comments.router, votes.router)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with CORS, request tracing and the DI container attached.

    Logfire is expected to be configured already (scripts/start_app.py
    does it before uvicorn imports this module).
    """
    settings = settings or Settings()

    api = FastAPI(
        title="Tracker Comments API",
        description="Threaded comments and votes for torrent pages",
        version="0.1.0",
        debug=settings.debug,
    )
    instrument_fastapi(api)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # auth_token travels as a cookie
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(api, create_container())

    for router in ROUTERS:
        api.include_router(router)

    return api


app = create_app()
