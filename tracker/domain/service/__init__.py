"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentNode,
    CommentPage,
    build_comment_tree,
    count_nodes,
    flatten_comment_tree,
    iter_nodes,
)
from .comment_tree_service import CommentTreeService
from .jwt_service import JWTService
from .torrent_service import TorrentService
from .user_service import UserService
from .vote_service import VoteService, aggregate_votes, transition_vote

__all__ = [
    "CommentNode",
    "CommentPage",
    "CommentService",
    "CommentTreeService",
    "JWTService",
    "Service",
    "TorrentService",
    "UserService",
    "VoteService",
    "aggregate_votes",
    "build_comment_tree",
    "count_nodes",
    "flatten_comment_tree",
    "iter_nodes",
    "transition_vote",
]
