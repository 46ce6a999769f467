"""SQLAlchemy declarative base for msa_auth models.

The consuming application should include ``AuthBase.metadata`` in its
migration configuration, or call ``create_tables`` for local setups.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for msa_auth models."""
