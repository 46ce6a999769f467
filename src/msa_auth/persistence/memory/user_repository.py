"""In-memory implementation of UserRepository."""

import asyncio
import logging
from itertools import count
from typing import Optional

from msa_auth.domain.user import User, UserAlreadyExistsError, UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dict-backed user store.

    Uniqueness of usernames (case-sensitive) and emails (normalized) is
    enforced inside ``add`` under a lock, so concurrent registrations
    cannot both succeed.
    """

    def __init__(self) -> None:
        self._users_by_id: dict[int, User] = {}
        self._ids = count(1)
        self._lock = asyncio.Lock()

    async def add(self, user: User) -> None:
        async with self._lock:
            if self._find_by_username(user.username) is not None:
                raise UserAlreadyExistsError(
                    UserAlreadyExistsError.USERNAME,
                    user.username,
                )
            if self._find_by_email(user.email) is not None:
                raise UserAlreadyExistsError(
                    UserAlreadyExistsError.EMAIL,
                    user.email,
                )

            user.assign_id(next(self._ids))
            self._users_by_id[user.id] = user
            logger.debug("Stored user %s", user.id)

    async def find_by_username(self, username: str) -> Optional[User]:
        return self._find_by_username(username.strip())

    async def exists_by_username(self, username: str) -> bool:
        return self._find_by_username(username.strip()) is not None

    async def exists_by_email(self, email: str) -> bool:
        return self._find_by_email(email.strip().lower()) is not None

    def __len__(self) -> int:
        return len(self._users_by_id)

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._users_by_id.values():
            if user.username == username:
                return user
        return None

    def _find_by_email(self, email: str) -> Optional[User]:
        for user in self._users_by_id.values():
            if user.email == email:
                return user
        return None
