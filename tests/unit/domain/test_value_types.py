"""Unit tests for username and tag name value objects."""

import pytest
from pydantic import ValidationError

from sitehost.domain.value import ErrorCategory, SignupErrorKind, TagName, Username


class TestUsername:
    """Tests for Username."""

    def test_is_lowercased(self):
        """Usernames are stored in canonical lowercase."""
        assert Username("CoolSite").root == "coolsite"

    def test_equal_after_canonicalization(self):
        """Names differing only in case are the same username."""
        assert Username("Alice") == Username("alice")

    @pytest.mark.parametrize("value", ["", "-a", "a-", "a" * 33, "a b"])
    def test_rejects_invalid(self, value):
        """Malformed names cannot be constructed."""
        with pytest.raises(ValidationError):
            Username(value)


class TestTagName:
    """Tests for TagName."""

    def test_accepts_canonical(self):
        """Lowercase single words are valid tag names."""
        assert str(TagName("sci-fi")) == "sci-fi"

    @pytest.mark.parametrize("value", ["", "Anime", "two words", "a" * 26])
    def test_rejects_non_canonical(self, value):
        """Uppercase, spaces and over-long names are not canonical."""
        with pytest.raises(ValidationError):
            TagName(value)


class TestSignupErrorKind:
    """Tests for error categories."""

    def test_username_taken_is_conflict(self):
        assert SignupErrorKind.USERNAME_TAKEN.category == ErrorCategory.CONFLICT

    @pytest.mark.parametrize(
        "kind", [SignupErrorKind.PERSISTENCE_FAILED, SignupErrorKind.PROVISION_FAILED]
    )
    def test_infrastructure_kinds(self, kind):
        assert kind.category == ErrorCategory.INFRASTRUCTURE

    @pytest.mark.parametrize(
        "kind",
        [
            SignupErrorKind.USERNAME_INVALID_FORMAT,
            SignupErrorKind.USERNAME_TOO_LONG,
            SignupErrorKind.PASSWORD_TOO_SHORT,
            SignupErrorKind.TAG_INVALID_CHARS,
            SignupErrorKind.TAG_TOO_MANY_SPACES,
            SignupErrorKind.TAG_TOO_MANY_WORDS,
            SignupErrorKind.TAG_TOO_LONG,
            SignupErrorKind.TAG_COUNT_EXCEEDED,
        ],
    )
    def test_validation_kinds(self, kind):
        assert kind.category == ErrorCategory.VALIDATION
