"""In-memory repository implementations for testing."""

from .site import InMemorySiteRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemorySiteRepository",
    "InMemoryTagRepository",
]
