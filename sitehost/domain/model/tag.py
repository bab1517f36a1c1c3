"""Tag entity for categorizing sites."""

from datetime import datetime

from pydantic import Field

from sitehost.domain.model.common import DomainModel
from sitehost.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for categorizing sites.

    Tags live in a shared registry keyed by name: the first site to use a
    name creates the tag, later sites reference it.
    """

    id: TagId
    name: TagName  # Unique, lowercase, one word
    created_at: datetime = Field(default_factory=datetime.now)
