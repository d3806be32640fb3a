"""Application layer DI providers."""

from dishka import Scope, provide

from tracker.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentTreeUseCase,
)
from tracker.application.usecase.vote import CastVoteUseCase
from tracker.domain.service import CommentService, CommentTreeService, VoteService
from tracker.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, comment_tree_service: CommentTreeService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_tree_service=comment_tree_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service, comment_service=comment_service
        )
