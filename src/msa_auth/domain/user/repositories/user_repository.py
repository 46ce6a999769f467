"""User repository interface.

This is the port the auth core requires from its persistence
collaborator. Implementations must enforce username and email uniqueness
at their own storage layer: ``add`` raises ``UserAlreadyExistsError`` when
a concurrent registration won the race past the existence pre-checks.
"""

from abc import ABC, abstractmethod
from typing import Optional

from msa_auth.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user and assign its id.

        Raises
        ------
        UserAlreadyExistsError
            If the username or email is already stored
        """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their exact (case-sensitive) username."""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given username."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given (normalized) email."""
