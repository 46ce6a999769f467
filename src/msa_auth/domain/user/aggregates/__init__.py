from msa_auth.domain.user.aggregates.user import (
    MAX_EMAIL_LENGTH,
    MAX_USERNAME_LENGTH,
    User,
)

__all__ = ["MAX_EMAIL_LENGTH", "MAX_USERNAME_LENGTH", "User"]
