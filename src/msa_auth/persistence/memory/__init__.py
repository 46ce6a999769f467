from msa_auth.persistence.memory.user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
