"""Domain layer DI providers."""

from dishka import Scope, provide

from tracker.config import AuthSettings, CommentSettings
from tracker.domain.repository import (
    CommentRepository,
    TorrentRepository,
    UserRepository,
    VoteRepository,
)
from tracker.domain.service import (
    CommentService,
    CommentTreeService,
    JWTService,
    TorrentService,
    UserService,
    VoteService,
)
from tracker.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_torrent_service(
        self, torrent_repository: TorrentRepository
    ) -> TorrentService:
        """Provide torrent domain service."""
        return TorrentService(torrent_repository=torrent_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        torrent_service: TorrentService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            torrent_service=torrent_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_service=comment_service,
        )

    @provide
    def get_comment_tree_service(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        torrent_service: TorrentService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> CommentTreeService:
        """Provide comment tree domain service."""
        return CommentTreeService(
            comment_service=comment_service,
            vote_service=vote_service,
            torrent_service=torrent_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )
