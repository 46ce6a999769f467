"""SQLAlchemy implementation for msa_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation
- enable_sqlite_savepoints: SQLite transaction setup for savepoints
"""

from msa_auth.persistence.sqlalchemy.base import AuthBase
from msa_auth.persistence.sqlalchemy.models import UserModel
from msa_auth.persistence.sqlalchemy.repositories import UserRepositorySQLAlchemy
from msa_auth.persistence.sqlalchemy.sqlite import enable_sqlite_savepoints

__all__ = [
    "AuthBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "enable_sqlite_savepoints",
]
