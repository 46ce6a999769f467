"""Password hashing service using bcrypt-pbkdf.

The stored format is two base64 strings: a random salt and the key
derived from the password and that salt. Derivation parameters
(``rounds``, ``KEY_SIZE``) are part of that format; hashes made with
different parameters do not verify.
"""

import base64
import binascii
import hmac
import secrets

import bcrypt

from msa_auth.exceptions import CredentialDecodeError


class PasswordHashingService:
    """Service for salted password hashing and verification.

    Uses ``bcrypt.kdf`` (bcrypt-pbkdf) as a slow key derivation function
    with a fresh random salt per password.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> password_hash, salt = service.hash("Password123")
    >>> service.verify("Password123", password_hash, salt)
    True
    >>> service.verify("wrong_password", password_hash, salt)
    False
    """

    SALT_SIZE = 32  # bytes
    KEY_SIZE = 64  # bytes
    DEFAULT_ROUNDS = 50

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            bcrypt-pbkdf rounds. Higher values are slower and stronger.
            Existing hashes only verify with the rounds they were made with.
        """
        if rounds < 1:
            msg = "rounds must be at least 1"
            raise ValueError(msg)
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> tuple[str, str]:
        """Hash a plaintext password with a new random salt.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        Tuple of (hash, salt), both base64-encoded

        Raises
        ------
        ValueError
            If password is empty (no key can be derived from it)
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        salt = secrets.token_bytes(self.SALT_SIZE)
        derived = self._derive(password, salt)
        return _encode(derived), _encode(salt)

    def verify(self, password: str, password_hash: str, password_salt: str) -> bool:
        """Verify a password against a stored hash and salt.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The stored base64 hash
        password_salt
            The stored base64 salt

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        CredentialDecodeError
            If the stored hash or salt is missing or not valid base64
        """
        stored_hash = _decode(password_hash, "hash")
        salt = _decode(password_salt, "salt")

        if not password:
            return False

        computed = self._derive(password, salt)
        return hmac.compare_digest(computed, stored_hash)

    def _derive(self, password: str, salt: bytes) -> bytes:
        return bcrypt.kdf(
            password=password.encode("utf-8"),
            salt=salt,
            desired_key_bytes=self.KEY_SIZE,
            rounds=self._rounds,
            ignore_few_rounds=True,
        )


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _decode(value: str, name: str) -> bytes:
    if not value:
        msg = f"Stored password {name} is empty"
        raise CredentialDecodeError(msg)
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        msg = f"Stored password {name} is not valid base64"
        raise CredentialDecodeError(msg) from e
    if not decoded:
        msg = f"Stored password {name} is empty"
        raise CredentialDecodeError(msg)
    return decoded
