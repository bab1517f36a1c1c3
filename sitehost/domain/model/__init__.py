"""Domain model entities for sitehost."""

from sitehost.domain.model.site import Site
from sitehost.domain.model.tag import Tag

__all__ = [
    "Site",
    "Tag",
]
