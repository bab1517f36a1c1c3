"""Signup input rules.

Pure functions, no I/O. Each check returns ``None`` when the input is
acceptable, or a ``SignupError`` naming exactly one broken rule so the
caller can show a targeted message.
"""

import re

from sitehost.domain.value import (
    MAX_SITE_TAGS,
    PASSWORD_LENGTH_MIN,
    TAG_NAME_LENGTH_MAX,
    TAG_NAME_WORDS_MAX,
    USERNAME_LENGTH_MAX,
    SignupError,
    SignupErrorKind,
    SignupField,
    TagName,
)
from sitehost.domain.value.types import USERNAME_PATTERN

# Raw tag input may still contain single spaces; the word check catches those
_TAG_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9 -]")
_TAG_SPACE_RUN = re.compile(r" {2,}")


def validate_username(username: str) -> SignupError | None:
    """Check a proposed username.

    Format is checked before length, so an over-long name that is also
    malformed reports the format problem.

    Args:
        username: Raw username from the signup form

    Returns:
        None if valid, otherwise the username error
    """
    if not USERNAME_PATTERN.fullmatch(username):
        return SignupError(
            field=SignupField.USERNAME,
            kind=SignupErrorKind.USERNAME_INVALID_FORMAT,
            message="A valid user/site name is required.",
        )
    if len(username) > USERNAME_LENGTH_MAX:
        return SignupError(
            field=SignupField.USERNAME,
            kind=SignupErrorKind.USERNAME_TOO_LONG,
            message=f"User/site name cannot exceed {USERNAME_LENGTH_MAX} characters.",
        )
    return None


def validate_password(password: str) -> SignupError | None:
    """Check a proposed password.

    An empty password is just a too-short one.

    Args:
        password: Raw password from the signup form

    Returns:
        None if valid, otherwise the password error
    """
    if len(password) < PASSWORD_LENGTH_MIN:
        return SignupError(
            field=SignupField.PASSWORD,
            kind=SignupErrorKind.PASSWORD_TOO_SHORT,
            message=f"Password must be at least {PASSWORD_LENGTH_MIN} characters.",
        )
    return None


def validate_tag(tag: str) -> SignupError | None:
    """Check a single trimmed tag candidate.

    Rules run in a fixed order and the first failure is reported:
    charset, space runs, word count, length.

    Args:
        tag: Tag candidate with surrounding whitespace removed

    Returns:
        None if valid, otherwise the tag error
    """
    if _TAG_DISALLOWED_CHARS.search(tag):
        return _tag_error(
            SignupErrorKind.TAG_INVALID_CHARS,
            f'Tag "{tag}" can only contain letters (A-Z), numbers (0-9) and hyphens.',
        )
    if _TAG_SPACE_RUN.search(tag):
        return _tag_error(
            SignupErrorKind.TAG_TOO_MANY_SPACES,
            f'Tag "{tag}" cannot have spaces.',
        )
    if len(tag.split(" ")) > TAG_NAME_WORDS_MAX:
        plural = "" if TAG_NAME_WORDS_MAX == 1 else "s"
        return _tag_error(
            SignupErrorKind.TAG_TOO_MANY_WORDS,
            f'Tag "{tag}" cannot be more than {TAG_NAME_WORDS_MAX} word{plural}.',
        )
    if len(tag) > TAG_NAME_LENGTH_MAX:
        return _tag_error(
            SignupErrorKind.TAG_TOO_LONG,
            f'Tag "{tag}" cannot be longer than {TAG_NAME_LENGTH_MAX} characters.',
        )
    return None


def normalize_tags(raw_tags: str) -> list[TagName] | SignupError:
    """Parse comma separated tag input into canonical tag names.

    Candidates are trimmed and empty ones skipped. Valid names are
    lowercased and deduplicated, keeping the order of first occurrence.
    A malformed tag is reported even when the list is also too long.

    Args:
        raw_tags: Free text from the tags field, e.g. "anime, Music, anime"

    Returns:
        Ordered tag names, or the first tag error
    """
    names: dict[str, TagName] = {}

    for candidate in raw_tags.split(","):
        candidate = candidate.strip()
        if not candidate:
            continue

        error = validate_tag(candidate)
        if error:
            return error

        canonical = candidate.lower()
        if canonical not in names:
            names[canonical] = TagName(canonical)

    if len(names) > MAX_SITE_TAGS:
        return _tag_error(
            SignupErrorKind.TAG_COUNT_EXCEEDED,
            f"Cannot have more than {MAX_SITE_TAGS} tags for your site.",
        )

    return list(names.values())


def _tag_error(kind: SignupErrorKind, message: str) -> SignupError:
    return SignupError(field=SignupField.TAGS, kind=kind, message=message)
