"""Composition root for the auth core.

Builds the services from settings and provides the database plumbing
for the SQLAlchemy user store. The presentation layer (HTTP, CLI) calls
these instead of wiring components itself.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from msa_auth.application import AuthenticationService
from msa_auth.domain.user import UserRepository
from msa_auth.persistence.sqlalchemy import AuthBase, enable_sqlite_savepoints
from msa_auth.services import (
    CredentialValidator,
    JWTService,
    PasswordHashingService,
)
from msa_config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@lru_cache(maxsize=1)
def configure_logging(log_level_name: str | None = None) -> None:
    """Configure application logging.

    Sets up console logging with timestamps and module names, applies the
    configured level to msa_auth and keeps noisy database loggers at
    WARNING.
    """
    if log_level_name is None:
        log_level_name = get_settings().log_level
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("msa_auth").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """Get the (cached) async engine for a database URL."""
    logger.debug("Creating database engine")
    engine = create_async_engine(database_url, echo=False, pool_pre_ping=True)
    enable_sqlite_savepoints(engine)
    return engine


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the (cached) session factory for a database URL."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: Settings | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    settings = settings or get_settings()
    session_maker = get_session_maker(settings.database_url)

    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine) -> None:
    """Create the auth tables if they do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)
    logger.info("Auth tables created successfully")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: Settings | None = None) -> JWTService:
    """Get JWT service configured from settings.

    Raises
    ------
    TokenConfigurationError
        If the configured key, issuer, audience or lifetime is unusable
    """
    return JWTService.from_settings(settings or get_settings())


def get_password_service(settings: Settings | None = None) -> PasswordHashingService:
    """Get password hashing service."""
    settings = settings or get_settings()
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def build_authentication_service(
    user_repository: UserRepository,
    settings: Settings | None = None,
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    Token configuration is validated here, so calling this at startup
    surfaces a bad signing key before any request is served.
    """
    settings = settings or get_settings()

    return AuthenticationService(
        user_repository=user_repository,
        password_service=get_password_service(settings),
        jwt_service=get_jwt_service(settings),
        validator=CredentialValidator(),
    )
