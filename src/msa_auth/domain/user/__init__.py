"""User domain: the aggregate, its invariants and the repository port."""

from msa_auth.domain.user.aggregates import (
    MAX_EMAIL_LENGTH,
    MAX_USERNAME_LENGTH,
    User,
)
from msa_auth.domain.user.exceptions import (
    InvalidUserError,
    UserAlreadyExistsError,
    UserIdAlreadyAssignedError,
)
from msa_auth.domain.user.repositories import UserRepository

__all__ = [
    "MAX_EMAIL_LENGTH",
    "MAX_USERNAME_LENGTH",
    "InvalidUserError",
    "User",
    "UserAlreadyExistsError",
    "UserIdAlreadyAssignedError",
    "UserRepository",
]
