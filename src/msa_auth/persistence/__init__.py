"""UserRepository implementations by technology.

- memory/      In-process store for development and tests
- sqlalchemy/  Async SQLAlchemy store with unique constraints
"""
