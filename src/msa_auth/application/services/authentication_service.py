"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from msa_auth.application.commands import LoginCommand, RegisterCommand
from msa_auth.application.outcomes import (
    AuthFailure,
    AuthOutcome,
    AuthSuccess,
    ErrorKind,
)
from msa_auth.domain.user import User, UserAlreadyExistsError
from msa_auth.services import (
    CredentialValidator,
    JWTService,
    PasswordHashingService,
)

if TYPE_CHECKING:
    from msa_auth.domain.user import UserRepository
    from msa_auth.schemas import TokenPayload

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "This username is already taken. Please choose a different one."
EMAIL_TAKEN = (
    "This email is already registered. Please use a different email address."
)
INVALID_CREDENTIALS = (
    "Invalid username or password. Please check your credentials and try again."
)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the credential validator, password hashing, the user
    repository and JWT issuing to provide:
    - User registration
    - Login with username and password

    Expected failures come back as ``AuthFailure`` values. Errors raised by
    the repository or the token issuer propagate to the caller untouched.
    Password hashing runs in a worker thread so the event loop stays free.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        validator: CredentialValidator | None = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._validator = validator or CredentialValidator()

    async def register(self, command: RegisterCommand) -> AuthOutcome:
        failure = self._validator.validate_registration(
            command.username,
            command.email,
            command.password,
        )
        if failure is not None:
            return _reject(ErrorKind.VALIDATION, failure.message)

        username = command.username.strip()
        email = command.email.strip().lower()

        if await self._user_repo.exists_by_username(username):
            return _reject(ErrorKind.CONFLICT, USERNAME_TAKEN)
        if await self._user_repo.exists_by_email(email):
            return _reject(ErrorKind.CONFLICT, EMAIL_TAKEN)

        password_hash, password_salt = await asyncio.to_thread(
            self._password_service.hash,
            command.password,
        )
        user = User.create(username, email, password_hash, password_salt)

        try:
            await self._user_repo.add(user)
        except UserAlreadyExistsError as e:
            logger.warning("Registration lost a uniqueness race on %s", e.field)
            if e.field == UserAlreadyExistsError.EMAIL:
                return _reject(ErrorKind.CONFLICT, EMAIL_TAKEN)
            return _reject(ErrorKind.CONFLICT, USERNAME_TAKEN)

        outcome = self._issue(user)
        logger.info("User registered: %s (id: %s)", user.username, user.id)
        return outcome

    async def login(self, command: LoginCommand) -> AuthOutcome:
        failure = self._validator.validate_login(command.username, command.password)
        if failure is not None:
            return _reject(ErrorKind.VALIDATION, failure.message)

        user = await self._user_repo.find_by_username(command.username.strip())
        if user is None:
            return _reject(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        valid = await asyncio.to_thread(
            self._password_service.verify,
            command.password,
            user.password_hash,
            user.password_salt,
        )
        if not valid:
            return _reject(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        outcome = self._issue(user)
        logger.info("User logged in: %s", user.username)
        return outcome

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    def _issue(self, user: User) -> AuthSuccess:
        token = self._jwt_service.create_access_token(
            user_id=user.id,
            username=user.username,
        )
        return AuthSuccess(token=token, user_id=user.id, username=user.username)


def _reject(kind: ErrorKind, message: str) -> AuthFailure:
    logger.debug("Authentication request rejected: %s", kind.value)
    return AuthFailure(error_kind=kind, message=message)
