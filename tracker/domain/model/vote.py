"""Vote entity.

Votes are up/down reactions of one user on one comment.
"""

from datetime import datetime

from pydantic import Field

from tracker.domain.model.common import DomainModel
from tracker.domain.value import CommentId, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per comment (enforced by database unique constraint)
    - Casting the same direction again retracts the vote
    - Casting the opposite direction replaces it
    """

    id: VoteId
    comment_id: CommentId
    voter_id: UserId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
