"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, pure services)
    │   ├── msa_auth/
    │   └── msa_config/
    └── integration/       # Real components wired together, SQLite via aiosqlite
        └── persistence/
"""

import pytest

from msa_auth.services import JWTService, PasswordHashingService
from msa_config import Settings, clear_settings_cache

# 32 bytes of "a", raw and base64 encoded
TEST_RAW_KEY = "a" * 32
TEST_BASE64_KEY = "base64:YWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWFhYWE="
TEST_ISSUER = "mysvelteapp"
TEST_AUDIENCE = "mysvelteapp"


@pytest.fixture(autouse=True)
def _clear_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_key=TEST_BASE64_KEY,
        jwt_issuer=TEST_ISSUER,
        jwt_audience=TEST_AUDIENCE,
        jwt_access_token_lifetime_hours=24,
        password_hash_rounds=1,
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(
        secret_key=TEST_BASE64_KEY,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
    )


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=1)  # Low rounds for fast tests
