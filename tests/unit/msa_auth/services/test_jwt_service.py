"""Unit tests for JWTService."""

import base64
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from msa_auth.exceptions import InvalidTokenError, TokenConfigurationError
from msa_auth.services import JWTService, decode_signing_key

RAW_KEY = "a" * 32
BASE64_KEY = "base64:" + base64.b64encode(b"a" * 32).decode()
ISSUER = "mysvelteapp"
AUDIENCE = "mysvelteapp-clients"


def _service(**overrides) -> JWTService:
    kwargs = {
        "secret_key": BASE64_KEY,
        "issuer": ISSUER,
        "audience": AUDIENCE,
        "access_token_expire_hours": 24,
    }
    kwargs.update(overrides)
    return JWTService(**kwargs)


def _claims(token: str) -> dict:
    return jwt.decode(token, options={"verify_signature": False})


class TestSigningKeyDecoding:
    """Tests for key material handling."""

    def test_raw_and_base64_keys_decode_to_same_bytes(self):
        """Test that both key formats produce the same effective key."""
        assert decode_signing_key(RAW_KEY) == decode_signing_key(BASE64_KEY)

    def test_bytes_key_used_as_is(self):
        """Test that raw bytes are not re-encoded."""
        assert decode_signing_key(b"\x00\x01") == b"\x00\x01"

    def test_invalid_base64_raises(self):
        """Test that a malformed base64 key is a configuration error."""
        with pytest.raises(TokenConfigurationError, match="not valid base64"):
            decode_signing_key("base64:***")

    def test_tokens_interchangeable_between_key_formats(self):
        """Test that a token signed with the raw key verifies with the base64 key."""
        token = _service(secret_key=RAW_KEY).create_access_token(1, "alice")

        payload = _service(secret_key=BASE64_KEY).verify_token(token)

        assert payload.username == "alice"

    def test_bytes_key_accepted(self):
        """Test that a bytes key of sufficient length is accepted."""
        token = _service(secret_key=b"k" * 32).create_access_token(1, "alice")
        assert isinstance(token, str)


class TestJWTServiceInit:
    """Tests for eager configuration validation."""

    def test_init_with_valid_settings(self):
        """Test that service initializes with valid settings."""
        service = _service()
        assert service.access_token_lifetime == timedelta(hours=24)

    @pytest.mark.parametrize("key", ["", "   "])
    def test_empty_key_raises(self, key):
        """Test that an empty key raises TokenConfigurationError."""
        with pytest.raises(TokenConfigurationError, match="cannot be empty"):
            _service(secret_key=key)

    @pytest.mark.parametrize(
        "key",
        [
            "a" * 31,
            "base64:" + base64.b64encode(b"a" * 31).decode(),
            b"a" * 31,
        ],
    )
    def test_short_key_raises(self, key):
        """Test that keys under 32 effective bytes fail at construction."""
        with pytest.raises(TokenConfigurationError, match="at least 32 bytes"):
            _service(secret_key=key)

    def test_configuration_error_is_value_error(self):
        """Test that configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            _service(secret_key="short")

    @pytest.mark.parametrize("issuer", ["", "  "])
    def test_blank_issuer_raises(self, issuer):
        """Test that a blank issuer is rejected."""
        with pytest.raises(TokenConfigurationError, match="issuer"):
            _service(issuer=issuer)

    @pytest.mark.parametrize("audience", ["", "  "])
    def test_blank_audience_raises(self, audience):
        """Test that a blank audience is rejected."""
        with pytest.raises(TokenConfigurationError, match="audience"):
            _service(audience=audience)

    @pytest.mark.parametrize("hours", [0, -1, 169])
    def test_lifetime_out_of_range_raises(self, hours):
        """Test that lifetimes outside 1..168 hours are rejected."""
        with pytest.raises(TokenConfigurationError, match="between 1 and 168"):
            _service(access_token_expire_hours=hours)

    @pytest.mark.parametrize("hours", [1, 168])
    def test_lifetime_boundaries_accepted(self, hours):
        """Test that the lifetime bounds are inclusive."""
        assert _service(access_token_expire_hours=hours).access_token_lifetime == (
            timedelta(hours=hours)
        )

    def test_from_settings(self, settings):
        """Test that the service can be built from application settings."""
        service = JWTService.from_settings(settings)

        token = service.create_access_token(3, "carol")

        assert service.verify_token(token).user_id == 3


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = _service(access_token_expire_hours=2)

    def test_create_access_token(self):
        """Test that access token is created successfully."""
        token = self.service.create_access_token(user_id=42, username="alice")

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_token_claims(self):
        """Test that identity, issuer and audience claims are present."""
        token = self.service.create_access_token(user_id=42, username="alice")

        claims = _claims(token)

        assert claims["sub"] == "42"
        assert claims["nameid"] == "42"
        assert claims["name"] == "alice"
        assert claims["iss"] == ISSUER
        assert claims["aud"] == AUDIENCE
        assert claims["jti"]

    def test_token_header_uses_hs256(self):
        """Test that tokens are signed with HMAC-SHA256."""
        token = self.service.create_access_token(user_id=42, username="alice")

        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_expiry_is_issue_time_plus_lifetime(self):
        """Test that exp equals iat plus the configured lifetime."""
        before = datetime.now(tz=timezone.utc)
        token = self.service.create_access_token(user_id=42, username="alice")

        claims = _claims(token)

        assert claims["exp"] - claims["iat"] == 2 * 3600
        issued_at = datetime.fromtimestamp(claims["iat"], tz=timezone.utc)
        assert abs(issued_at - before) < timedelta(seconds=5)

    def test_token_ids_are_unique(self):
        """Test that two tokens for the same user never share a jti."""
        first = self.service.create_access_token(user_id=42, username="alice")
        second = self.service.create_access_token(user_id=42, username="alice")

        assert _claims(first)["jti"] != _claims(second)["jti"]
        assert first != second

    def test_missing_user_id_raises(self):
        """Test that a user without an id cannot get a token."""
        with pytest.raises(ValueError, match="without an id"):
            self.service.create_access_token(user_id=None, username="alice")

    def test_verify_valid_access_token(self):
        """Test that valid access token is verified correctly."""
        token = self.service.create_access_token(user_id=42, username="alice")

        payload = self.service.verify_token(token)

        assert payload.user_id == 42
        assert payload.username == "alice"
        assert payload.expires_at - payload.issued_at == timedelta(hours=2)
        assert not payload.is_expired()

    def test_verify_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": "42",
                "name": "alice",
                "jti": "x",
                "iat": now - timedelta(hours=3),
                "exp": now - timedelta(hours=1),
                "iss": ISSUER,
                "aud": AUDIENCE,
            },
            decode_signing_key(BASE64_KEY),
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        """Test that invalid token raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        """Test that tampered token raises InvalidTokenError."""
        token = self.service.create_access_token(user_id=42, username="alice")

        # Tamper with the token
        tampered = token[:-5] + ("xxxxx" if not token.endswith("xxxxx") else "yyyyy")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_wrong_secret_raises(self):
        """Test that token from different secret raises InvalidTokenError."""
        other_service = _service(secret_key="b" * 32)
        token = other_service.create_access_token(user_id=42, username="alice")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_wrong_audience_raises(self):
        """Test that a token for another audience is rejected."""
        token = _service(audience="someone-else").create_access_token(42, "alice")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_wrong_issuer_raises(self):
        """Test that a token from another issuer is rejected."""
        token = _service(issuer="someone-else").create_access_token(42, "alice")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_token_without_jti_raises(self):
        """Test that tokens missing required claims are rejected."""
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": "42",
                "name": "alice",
                "iat": now,
                "exp": now + timedelta(hours=1),
                "iss": ISSUER,
                "aud": AUDIENCE,
            },
            decode_signing_key(BASE64_KEY),
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
