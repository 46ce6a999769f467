"""Authentication exceptions.

These cover infrastructure and programmer errors only. Expected outcomes
of registration and login (bad input, duplicate identity, wrong
credentials) are returned as ``AuthFailure`` values by the application
layer and never raised.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class TokenConfigurationError(AuthError, ValueError):
    """Raised when the token issuer is constructed with unusable settings."""

    def __init__(self, message: str = "Invalid JWT configuration"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class CredentialDecodeError(AuthError):
    """Raised when a stored password hash or salt cannot be decoded."""

    def __init__(self, message: str = "Stored credential is not validly encoded"):
        super().__init__(message)
