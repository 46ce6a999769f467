"""SQLAlchemy model for the User aggregate."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from msa_auth.domain.user import MAX_EMAIL_LENGTH, MAX_USERNAME_LENGTH
from msa_auth.persistence.sqlalchemy.base import AuthBase


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class UserModel(AuthBase):
    """
    SQLAlchemy model for persisting User aggregates.

    The unique constraints are the authoritative guard against duplicate
    usernames and emails; emails are stored already lower-cased.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(MAX_USERNAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(MAX_EMAIL_LENGTH), nullable=False)

    # base64 encoded
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    password_salt: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utc_now,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username})>"
