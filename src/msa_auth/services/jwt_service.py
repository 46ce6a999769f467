"""JWT token service.

Provides signed access token creation and verification.
"""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

import jwt

from msa_auth.exceptions import InvalidTokenError, TokenConfigurationError
from msa_auth.schemas import TokenPayload

if TYPE_CHECKING:
    from msa_config import Settings

logger = logging.getLogger(__name__)

BASE64_KEY_PREFIX = "base64:"


def decode_signing_key(key: str | bytes) -> bytes:
    """Turn configured key material into the raw HMAC key.

    Bytes are used as-is. Text prefixed with ``base64:`` is base64-decoded;
    any other text is used as its UTF-8 bytes.
    """
    if isinstance(key, bytes):
        return key
    if key.startswith(BASE64_KEY_PREFIX):
        try:
            return base64.b64decode(key[len(BASE64_KEY_PREFIX) :], validate=True)
        except (binascii.Error, ValueError) as e:
            msg = f"JWT key is not valid base64: {e}"
            raise TokenConfigurationError(msg) from e
    return key.encode("utf-8")


class JWTService:
    """Service for JWT access token creation and verification.

    All configuration is validated when the service is constructed, so a
    misconfigured deployment fails at startup rather than on the first
    login.

    Examples
    --------
    >>> service = JWTService(
    ...     secret_key="base64:" + "YWFh" * 11,
    ...     issuer="mysvelteapp",
    ...     audience="mysvelteapp",
    ... )
    >>> token = service.create_access_token(42, "alice")
    >>> service.verify_token(token).username
    'alice'
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    MIN_ACCESS_EXPIRE_HOURS = 1
    MAX_ACCESS_EXPIRE_HOURS = 168
    MIN_KEY_BYTES = 32
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str | bytes,
        issuer: str,
        audience: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Signing key, as raw bytes/text or ``base64:``-prefixed text.
            Must decode to at least 32 bytes.
        issuer
            Value of the ``iss`` claim
        audience
            Value of the ``aud`` claim
        access_token_expire_hours
            Access token lifetime, 1 to 168 hours (default 24)

        Raises
        ------
        TokenConfigurationError
            If any of the settings is unusable
        """
        if isinstance(secret_key, str) and not secret_key.strip():
            msg = "JWT secret key cannot be empty"
            raise TokenConfigurationError(msg)

        signing_key = decode_signing_key(secret_key)
        if len(signing_key) < self.MIN_KEY_BYTES:
            msg = f"JWT secret key must be at least {self.MIN_KEY_BYTES} bytes after decoding"
            raise TokenConfigurationError(msg)
        if not issuer or not issuer.strip():
            msg = "JWT issuer cannot be empty"
            raise TokenConfigurationError(msg)
        if not audience or not audience.strip():
            msg = "JWT audience cannot be empty"
            raise TokenConfigurationError(msg)
        if not (
            self.MIN_ACCESS_EXPIRE_HOURS
            <= access_token_expire_hours
            <= self.MAX_ACCESS_EXPIRE_HOURS
        ):
            msg = (
                "JWT access token lifetime must be between "
                f"{self.MIN_ACCESS_EXPIRE_HOURS} and {self.MAX_ACCESS_EXPIRE_HOURS} hours"
            )
            raise TokenConfigurationError(msg)

        self._signing_key = signing_key
        self._issuer = issuer
        self._audience = audience
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTService:
        return cls(
            secret_key=settings.jwt_key.get_secret_value(),
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            access_token_expire_hours=settings.jwt_access_token_lifetime_hours,
        )

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(self, user_id: int, username: str) -> str:
        """Create a signed access token for a user.

        Parameters
        ----------
        user_id
            The user's store-assigned identifier
        username
            The user's display name

        Returns
        -------
        The encoded JWT token string
        """
        if user_id is None:
            msg = "Cannot issue a token for a user without an id"
            raise ValueError(msg)

        now = datetime.now(tz=timezone.utc)
        subject = str(user_id)

        payload = {
            "sub": subject,
            "nameid": subject,
            "name": username,
            "jti": str(uuid4()),
            "iat": now,
            "exp": now + self._access_expire,
            "iss": self._issuer,
            "aud": self._audience,
        }

        return jwt.encode(payload, self._signing_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._signing_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "jti"]},
            )

            return TokenPayload(
                user_id=int(payload["sub"]),
                username=payload["name"],
                token_id=payload["jti"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
