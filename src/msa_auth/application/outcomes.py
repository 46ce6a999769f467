"""Typed results of the authentication use-cases.

An ``AuthOutcome`` is either an ``AuthSuccess`` or an ``AuthFailure``,
never both. Infrastructure failures are not outcomes; they propagate as
exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(Enum):
    """Expected failure categories, in order of HTTP severity mapping."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNAUTHORIZED: 401,
}


@dataclass(frozen=True)
class AuthSuccess:
    """A signed access token for an authenticated user."""

    token: str
    user_id: int
    username: str

    is_success = True
    status_code = 200

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "userId": self.user_id,
            "username": self.username,
        }

    def __repr__(self) -> str:
        return f"AuthSuccess(user_id={self.user_id}, username={self.username!r})"


@dataclass(frozen=True)
class AuthFailure:
    """An expected, user-facing failure."""

    error_kind: ErrorKind
    message: str

    is_success = False

    @property
    def status_code(self) -> int:
        return self.error_kind.http_status

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


AuthOutcome = Union[AuthSuccess, AuthFailure]
