"""Site aggregate root.

A site is a tenant of the platform: an account (username + password hash)
and a hosted website whose files live under the username's namespace.
"""

from datetime import datetime

from pydantic import Field

from sitehost.domain.model.common import DomainModel
from sitehost.domain.value import MAX_SITE_TAGS, SiteId, TagName, Username


class Site(DomainModel):
    """Site aggregate root.

    Business rules:
    - Username is unique across all sites
    - Password is only ever stored as a bcrypt hash
    - At most MAX_SITE_TAGS distinct tags, kept in the order they were given
    """

    id: SiteId
    username: Username
    password_hash: str = Field(repr=False)
    tag_names: list[TagName] = Field(default_factory=list, max_length=MAX_SITE_TAGS)
    created_at: datetime = Field(default_factory=datetime.now)
