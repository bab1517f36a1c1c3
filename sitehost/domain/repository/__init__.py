"""Repository interfaces for sitehost domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from sitehost.domain.repository.site import SiteRepository
from sitehost.domain.repository.tag import TagRepository

__all__ = [
    "SiteRepository",
    "TagRepository",
]
