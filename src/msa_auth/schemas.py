"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT access token payload.

    Attributes
    ----------
    user_id
        The identifier of the user (``sub`` claim)
    username
        The user's display name (``name`` claim)
    token_id
        Unique identifier of this token (``jti`` claim)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    user_id: int
    username: str
    token_id: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
