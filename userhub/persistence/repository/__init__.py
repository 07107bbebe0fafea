"""PostgreSQL repository implementations."""

from userhub.persistence.repository.account import PostgresAccountRepository

__all__ = ["PostgresAccountRepository"]
