"""MSA Auth - Credential authentication core.

Turns registration and login input into either a signed access token or
a typed failure. It handles:
- Credential validation (shape and strength rules)
- Password hashing (bcrypt-pbkdf, salted)
- JWT access token creation and verification
- Registration and login orchestration over a pluggable user store

Architecture:
    msa_auth/
    ├── services/           # Pure logic (validation, hashing, JWT)
    ├── domain/user/        # User aggregate and repository port
    ├── application/        # Commands, outcomes, AuthenticationService
    ├── persistence/        # Store implementations (memory, sqlalchemy)
    ├── dependencies.py     # Wiring from msa_config settings
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from msa_auth import AuthenticationService, RegisterCommand
    from msa_auth.dependencies import build_authentication_service
    from msa_auth.persistence.memory import InMemoryUserRepository

    service = build_authentication_service(InMemoryUserRepository())
    outcome = await service.register(
        RegisterCommand("alice", "alice@example.com", "Password123"),
    )
"""

from msa_auth.application import (
    AuthenticationService,
    AuthFailure,
    AuthOutcome,
    AuthSuccess,
    ErrorKind,
    LoginCommand,
    RegisterCommand,
)
from msa_auth.domain.user import (
    InvalidUserError,
    User,
    UserAlreadyExistsError,
    UserRepository,
)
from msa_auth.exceptions import (
    AuthError,
    CredentialDecodeError,
    InvalidTokenError,
    TokenConfigurationError,
)
from msa_auth.schemas import TokenPayload
from msa_auth.services import (
    CredentialValidator,
    JWTService,
    PasswordHashingService,
    ValidationFailure,
)

__all__ = [
    # Application
    "AuthenticationService",
    "AuthFailure",
    "AuthOutcome",
    "AuthSuccess",
    "ErrorKind",
    "LoginCommand",
    "RegisterCommand",
    # Domain
    "InvalidUserError",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    # Services
    "CredentialValidator",
    "JWTService",
    "PasswordHashingService",
    "ValidationFailure",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "CredentialDecodeError",
    "InvalidTokenError",
    "TokenConfigurationError",
]
