"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from tracker.domain.model.user import User
from tracker.domain.value import UserId


class UserRepository(ABC):
    """Read-only lookup of tracker users."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass
