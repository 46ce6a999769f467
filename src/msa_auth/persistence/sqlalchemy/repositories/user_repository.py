"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from msa_auth.domain.user import User, UserAlreadyExistsError, UserRepository
from msa_auth.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Changes are flushed, not committed; the caller owns the transaction.
    ``add`` inserts inside a savepoint, so a uniqueness violation undoes
    only that insert before ``UserAlreadyExistsError`` is raised.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> None:
        model = self._map_to_model(user)

        try:
            async with self._session.begin_nested():
                self._session.add(model)
                await self._session.flush()
        except IntegrityError as e:
            field = _violated_field(e)
            if field is None:
                raise
            raise UserAlreadyExistsError(field) from e

        user.assign_id(model.id)
        logger.info("Created user: %s (username: %s)", model.id, model.username)

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username.strip())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_username(self, username: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.username == username.strip())
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def exists_by_email(self, email: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.email == email.strip().lower())
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            password_salt=model.password_salt,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            password_salt=user.password_salt,
        )


def _violated_field(error: IntegrityError) -> str | None:
    # SQLite names the column ("UNIQUE constraint failed: users.email"),
    # PostgreSQL names the constraint ("... unique constraint "uq_users_email"").
    text = str(error.orig).lower()
    if "uq_users_email" in text or "users.email" in text:
        return UserAlreadyExistsError.EMAIL
    if "uq_users_username" in text or "users.username" in text:
        return UserAlreadyExistsError.USERNAME
    return None
