"""Domain value objects for sitehost.

Value objects are immutable and defined by their values, not identity.
They encapsulate the format rules of usernames and tag names; the
user-facing checks that report *which* rule failed live in
``sitehost.domain.validation``.
"""

import re

from pydantic import field_validator

from sitehost.domain.value.common import RootValueObject

# Hostname label: alphanumeric and hyphens, no hyphen at either end
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
USERNAME_LENGTH_MAX = 32

PASSWORD_LENGTH_MIN = 5

TAG_NAME_LENGTH_MAX = 25
TAG_NAME_WORDS_MAX = 1
MAX_SITE_TAGS = 5

# Canonical (stored) tag names: lowercase, single word
TAG_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


class Username(RootValueObject[str]):
    """Site owner name, also the site's storage namespace and hostname label.

    Always canonical lowercase. Examples: 'alice', 'cool-site-99'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format and normalize case."""
        if len(v) > USERNAME_LENGTH_MAX or not USERNAME_PATTERN.fullmatch(v):
            raise ValueError(
                f"Username must be 1-{USERNAME_LENGTH_MAX} characters, "
                "alphanumeric with hyphens, no leading/trailing hyphen"
            )
        return v.lower()


class TagName(RootValueObject[str]):
    """Tag name for categorizing sites.

    Lowercase, letters, digits and hyphens, one word, 1-25 characters.
    Examples: 'anime', 'sci-fi', 'music'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if len(v) > TAG_NAME_LENGTH_MAX or not TAG_NAME_PATTERN.fullmatch(v):
            raise ValueError(
                f"Tag name must be 1-{TAG_NAME_LENGTH_MAX} characters, "
                "lowercase, alphanumeric with hyphens"
            )
        return v
