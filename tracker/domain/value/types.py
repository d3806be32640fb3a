"""Domain value objects for the comment system.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, computed_field

from tracker.domain.value.common import ValueObject


class VoteDirection(str, Enum):
    """Direction a voter requests when casting a vote."""

    UP = "up"
    DOWN = "down"


class VoteState(str, Enum):
    """A voter's standing on one comment.

    NONE means the voter has no vote recorded (or retracted it).
    """

    NONE = "none"
    UP = "up"
    DOWN = "down"

    @classmethod
    def from_direction(cls, direction: VoteDirection | None) -> "VoteState":
        """Map a stored vote direction (or its absence) to a state."""
        if direction is None:
            return cls.NONE
        return cls(direction.value)

    def to_direction(self) -> VoteDirection | None:
        """Map a state back to the direction that should be stored."""
        if self is VoteState.NONE:
            return None
        return VoteDirection(self.value)


class UserRole(str, Enum):
    """Tracker user roles."""

    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"
    GUEST = "guest"


class Badge(str, Enum):
    """Role badge shown next to a comment author.

    Closed set: every role maps onto exactly one badge.
    """

    ADMIN = "admin"
    MODERATOR = "moderator"
    MEMBER = "member"

    @classmethod
    def for_role(cls, role: UserRole | None) -> "Badge":
        """Resolve the badge for an author's role."""
        return _ROLE_BADGES.get(role, cls.MEMBER)


_ROLE_BADGES: dict[UserRole, Badge] = {
    UserRole.ADMIN: Badge.ADMIN,
    UserRole.MODERATOR: Badge.MODERATOR,
}


class CommentOrder(str, Enum):
    """Ordering of root comments on a page."""

    ASC = "asc"  # Oldest first
    DESC = "desc"  # Newest first


class DepthOverflowPolicy(str, Enum):
    """What to do with replies nested deeper than the maximum depth."""

    FLATTEN = "flatten"  # Attach at the deepest allowed level
    REJECT = "reject"  # Refuse the reply at submission time


class VoteAggregate(ValueObject):
    """Vote totals for one comment plus the requesting viewer's own vote."""

    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    viewer_vote: VoteState = VoteState.NONE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvote_count - self.downvote_count
