"""User aggregate for credential authentication."""

from msa_auth.domain.user.exceptions import (
    InvalidUserError,
    UserIdAlreadyAssignedError,
)

MAX_USERNAME_LENGTH = 64
MAX_EMAIL_LENGTH = 320


class User:
    """
    User aggregate root.

    Holds the identity and stored credential of a registered user. The id
    is assigned by the store on insert and never changes afterwards; the
    remaining fields are fixed at construction.
    """

    def __init__(
        self,
        username: str,
        email: str,
        password_hash: str,
        password_salt: str,
        id: int | None = None,
    ):
        username = (username or "").strip()
        email = (email or "").strip().lower()

        if not username:
            msg = "Username cannot be empty"
            raise InvalidUserError(msg)
        if len(username) > MAX_USERNAME_LENGTH:
            msg = f"Username cannot exceed {MAX_USERNAME_LENGTH} characters"
            raise InvalidUserError(msg)
        if not email:
            msg = "Email cannot be empty"
            raise InvalidUserError(msg)
        if len(email) > MAX_EMAIL_LENGTH:
            msg = f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"
            raise InvalidUserError(msg)
        if not password_hash or not password_hash.strip():
            msg = "Password hash cannot be empty"
            raise InvalidUserError(msg)
        if not password_salt or not password_salt.strip():
            msg = "Password salt cannot be empty"
            raise InvalidUserError(msg)

        self._id = id
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._password_salt = password_salt

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def password_salt(self) -> str:
        return self._password_salt

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, user_id: int) -> None:
        """Record the identity given by the store on insert."""
        if self._id is not None:
            raise UserIdAlreadyAssignedError(self._id)
        self._id = user_id

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password_hash: str,
        password_salt: str,
    ) -> "User":
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            password_salt=password_salt,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        username: str,
        email: str,
        password_hash: str,
        password_salt: str,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            password_salt=password_salt,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
