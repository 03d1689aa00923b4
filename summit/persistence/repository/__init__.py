"""PostgreSQL repository implementations."""

from summit.persistence.repository.delegate import PostgresDelegateRepository
from summit.persistence.repository.event import PostgresEventRepository

__all__ = [
    "PostgresDelegateRepository",
    "PostgresEventRepository",
]
