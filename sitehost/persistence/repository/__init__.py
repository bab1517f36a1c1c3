"""PostgreSQL repository implementations."""

from sitehost.persistence.repository.site import PostgresSiteRepository
from sitehost.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresSiteRepository",
    "PostgresTagRepository",
]
