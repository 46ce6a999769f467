"""Shape and strength rules for registration and login input.

Checks run in a fixed order and the first failing rule wins; the
messages are shown to end users verbatim.
"""

import re
from dataclasses import dataclass

from msa_auth.domain.user import MAX_EMAIL_LENGTH, MAX_USERNAME_LENGTH

USERNAME_REQUIRED = "Username is required."
USERNAME_TOO_SHORT = "Username must be at least 3 characters long."
USERNAME_TOO_LONG = "Username must not exceed 64 characters."
USERNAME_INVALID_CHARACTERS = (
    "Username can only contain letters, numbers, and underscores."
)
EMAIL_REQUIRED = "Email is required."
EMAIL_TOO_LONG = "Email must not exceed 320 characters."
EMAIL_INVALID = "Please enter a valid email address."
PASSWORD_REQUIRED = "Password is required."
PASSWORD_TOO_SHORT = "Password must be at least 8 characters long."
PASSWORD_TOO_LONG = "Password must not exceed 512 characters."
PASSWORD_TOO_WEAK = (
    "Password must contain at least one uppercase letter, "
    "one lowercase letter, and one number."
)


@dataclass(frozen=True)
class ValidationFailure:
    """The first rule an input violated."""

    message: str


class CredentialValidator:
    """Stateless validator for registration and login commands.

    Examples
    --------
    >>> validator = CredentialValidator()
    >>> validator.validate_registration("ab", "user@example.com", "Password123")
    ValidationFailure(message='Username must be at least 3 characters long.')
    >>> validator.validate_login("alice", "secret") is None
    True
    """

    MIN_USERNAME_LENGTH = 3
    MAX_USERNAME_LENGTH = MAX_USERNAME_LENGTH
    MAX_EMAIL_LENGTH = MAX_EMAIL_LENGTH
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_LENGTH = 512

    def __init__(self) -> None:
        self._username_pattern = re.compile(r"^[A-Za-z0-9_]+$")
        # local@label(.label)+, no whitespace, no empty labels
        self._email_pattern = re.compile(r"^[^\s@]+@[^\s@.]+(?:\.[^\s@.]+)+$")

    def validate_registration(
        self,
        username: str,
        email: str,
        password: str,
    ) -> ValidationFailure | None:
        """Validate a registration request.

        Parameters
        ----------
        username
            Raw username as submitted
        email
            Raw email address as submitted
        password
            Raw password as submitted

        Returns
        -------
        The first failure found, or None if the input is acceptable
        """
        message = (
            self._check_username(username)
            or self._check_email(email)
            or self._check_password(password)
        )
        return ValidationFailure(message) if message else None

    def validate_login(
        self,
        username: str,
        password: str,
    ) -> ValidationFailure | None:
        """Validate a login request. Only presence is checked."""
        if not (username or "").strip():
            return ValidationFailure(USERNAME_REQUIRED)
        if not (password or "").strip():
            return ValidationFailure(PASSWORD_REQUIRED)
        return None

    def _check_username(self, username: str) -> str | None:
        username = (username or "").strip()
        if not username:
            return USERNAME_REQUIRED
        if len(username) < self.MIN_USERNAME_LENGTH:
            return USERNAME_TOO_SHORT
        if len(username) > self.MAX_USERNAME_LENGTH:
            return USERNAME_TOO_LONG
        if not self._username_pattern.match(username):
            return USERNAME_INVALID_CHARACTERS
        return None

    def _check_email(self, email: str) -> str | None:
        email = (email or "").strip()
        if not email:
            return EMAIL_REQUIRED
        if len(email) > self.MAX_EMAIL_LENGTH:
            return EMAIL_TOO_LONG
        if ".." in email:
            return EMAIL_INVALID
        if not self._email_pattern.match(email):
            return EMAIL_INVALID
        return None

    def _check_password(self, password: str) -> str | None:
        password = password or ""
        if not password.strip():
            return PASSWORD_REQUIRED
        if len(password) < self.MIN_PASSWORD_LENGTH:
            return PASSWORD_TOO_SHORT
        if len(password) > self.MAX_PASSWORD_LENGTH:
            return PASSWORD_TOO_LONG
        if not _has_required_character_classes(password):
            return PASSWORD_TOO_WEAK
        return None


def _has_required_character_classes(password: str) -> bool:
    has_upper = has_lower = has_digit = False
    for char in password:
        if char.isupper():
            has_upper = True
        elif char.islower():
            has_lower = True
        elif char.isdecimal():
            has_digit = True
    return has_upper and has_lower and has_digit
