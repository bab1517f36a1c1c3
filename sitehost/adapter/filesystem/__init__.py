"""Site file storage on the local filesystem."""

from .storage import LocalSiteStorage, MockSiteStorage

__all__ = ["LocalSiteStorage", "MockSiteStorage"]
