"""Domain value objects for sitehost."""

from sitehost.domain.value.identifiers import SiteId, TagId
from sitehost.domain.value.signup import (
    ErrorCategory,
    ProvisioningStage,
    SignupError,
    SignupErrorKind,
    SignupField,
)
from sitehost.domain.value.types import (
    MAX_SITE_TAGS,
    PASSWORD_LENGTH_MIN,
    TAG_NAME_LENGTH_MAX,
    TAG_NAME_WORDS_MAX,
    USERNAME_LENGTH_MAX,
    TagName,
    Username,
)

__all__ = [
    # Identifiers
    "SiteId",
    "TagId",
    # Types
    "Username",
    "TagName",
    # Limits
    "USERNAME_LENGTH_MAX",
    "PASSWORD_LENGTH_MIN",
    "TAG_NAME_LENGTH_MAX",
    "TAG_NAME_WORDS_MAX",
    "MAX_SITE_TAGS",
    # Signup outcomes
    "ErrorCategory",
    "ProvisioningStage",
    "SignupError",
    "SignupErrorKind",
    "SignupField",
]
