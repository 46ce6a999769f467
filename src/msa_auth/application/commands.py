"""Input commands for the authentication use-cases.

Fields are kept exactly as submitted; trimming and normalization happen
inside the service after validation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterCommand:
    """Payload required to create a new user account."""

    username: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"RegisterCommand(username={self.username!r}, email={self.email!r})"


@dataclass(frozen=True)
class LoginCommand:
    """Credentials submitted by an existing user."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginCommand(username={self.username!r})"
