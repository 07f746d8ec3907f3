"""
User repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import Optional

from organizations.domain.user import User


class UserRepository(ABC):
    """Abstract repository for User entities."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user entity and return it with its id assigned."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by ID, or None if not found."""
