"""User entity (read-only view used by the comment system)."""

from pydantic import Field

from tracker.domain.model.common import DomainModel
from tracker.domain.value import UserId, UserRole


class User(DomainModel):
    """Tracker user as seen by the comment system."""

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.USER
