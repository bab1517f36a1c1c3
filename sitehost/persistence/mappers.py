"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from sitehost.domain.model import Site, Tag
from sitehost.domain.value import SiteId, TagId, TagName, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_site(row: Dict[str, Any], tag_names: Iterable[str] = ()) -> Site:
    """Convert database row to Site domain model.

    Args:
        row: Database row as dict
        tag_names: Tag names of the site, already in position order

    Returns:
        Site domain model
    """
    return Site(
        id=SiteId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        tag_names=[TagName(name) for name in tag_names],
        created_at=row["created_at"],
    )


def site_to_dict(site: Site) -> Dict[str, Any]:
    """Convert Site domain model to database dict.

    Tag names are stored in the junction table, not on the site row.

    Args:
        site: Site domain model

    Returns:
        Dict suitable for database insertion
    """
    return site.model_dump(exclude={"tag_names"})


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )

