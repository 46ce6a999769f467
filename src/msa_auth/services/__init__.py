"""Authentication services.

Provides credential validation, password hashing and JWT token management.
"""

from msa_auth.services.credential_validator import (
    CredentialValidator,
    ValidationFailure,
)
from msa_auth.services.jwt_service import JWTService, decode_signing_key
from msa_auth.services.password_service import PasswordHashingService

__all__ = [
    "CredentialValidator",
    "JWTService",
    "PasswordHashingService",
    "ValidationFailure",
    "decode_signing_key",
]
