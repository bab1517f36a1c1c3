"""Strongly typed identifiers for sitehost domain entities."""

from typing import NewType
from uuid import UUID

SiteId = NewType("SiteId", UUID)
TagId = NewType("TagId", UUID)
