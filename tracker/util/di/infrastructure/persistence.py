"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tracker.config import Settings
from tracker.domain.repository import (
    CommentRepository,
    TorrentRepository,
    UserRepository,
    VoteRepository,
)
from tracker.persistence.database import create_engine, create_session_factory
from tracker.persistence.repository import (
    PostgresCommentRepository,
    PostgresTorrentRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from tracker.util.di.base import ProviderBase
from tracker.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for comments, votes, torrents and users."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by one AsyncSession per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by the whole app, disposed with the container."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: commit on success, roll back on error.

        A vote toggle reads then writes, so both must share this session.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def comments(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def votes(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def torrents(self, session: AsyncSession) -> TorrentRepository:
        return PostgresTorrentRepository(session)

    @provide(scope=Scope.REQUEST)
    def users(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
