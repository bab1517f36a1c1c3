"""Shared response models for site use cases."""

from datetime import datetime

from pydantic import BaseModel

from sitehost.domain.model import Site


class SiteItem(BaseModel):
    """Public view of a site. Never carries the password hash."""

    site_id: str
    username: str
    tag_names: list[str]
    created_at: datetime

    @classmethod
    def from_site(cls, site: Site) -> "SiteItem":
        return cls(
            site_id=str(site.id),
            username=site.username.root,
            tag_names=[tag.root for tag in site.tag_names],
            created_at=site.created_at,
        )
