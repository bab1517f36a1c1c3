"""Signup outcome value objects.

Expected signup failures (bad input, taken username) are values, not
exceptions: the provisioning pipeline hands them back to the caller, which
renders ``message`` next to ``field``.
"""

from enum import Enum

from sitehost.domain.value.common import ValueObject


class SignupField(str, Enum):
    """Form field a signup error refers to."""

    USERNAME = "username"
    PASSWORD = "password"
    TAGS = "tags"


class ErrorCategory(str, Enum):
    """How the caller should treat a signup error."""

    VALIDATION = "validation"  # Fix the input and resubmit
    CONFLICT = "conflict"  # Pick another username
    INFRASTRUCTURE = "infrastructure"  # Our fault, may retry later


class SignupErrorKind(str, Enum):
    """Every way a signup can fail."""

    USERNAME_INVALID_FORMAT = "username_invalid_format"
    USERNAME_TOO_LONG = "username_too_long"
    PASSWORD_TOO_SHORT = "password_too_short"
    TAG_INVALID_CHARS = "tag_invalid_chars"
    TAG_TOO_MANY_SPACES = "tag_too_many_spaces"
    TAG_TOO_MANY_WORDS = "tag_too_many_words"
    TAG_TOO_LONG = "tag_too_long"
    TAG_COUNT_EXCEEDED = "tag_count_exceeded"
    USERNAME_TAKEN = "username_taken"
    PERSISTENCE_FAILED = "persistence_failed"
    PROVISION_FAILED = "provision_failed"

    @property
    def category(self) -> ErrorCategory:
        """Category this kind belongs to."""
        if self is SignupErrorKind.USERNAME_TAKEN:
            return ErrorCategory.CONFLICT
        if self in (
            SignupErrorKind.PERSISTENCE_FAILED,
            SignupErrorKind.PROVISION_FAILED,
        ):
            return ErrorCategory.INFRASTRUCTURE
        return ErrorCategory.VALIDATION


class ProvisioningStage(str, Enum):
    """Stages of the signup pipeline, in order."""

    RECEIVED = "received"
    VALIDATED = "validated"
    AUTHORIZED = "authorized"  # Username known to be free
    PERSISTED = "persisted"
    PROVISIONED = "provisioned"
    COMPLETE = "complete"


class SignupError(ValueObject):
    """A single, renderable signup failure."""

    kind: SignupErrorKind
    message: str
    field: SignupField | None = None  # None for infrastructure failures

    @property
    def category(self) -> ErrorCategory:
        """Category of the underlying kind."""
        return self.kind.category
