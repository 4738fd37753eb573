"""Format rules for custom short-link aliases."""

import re

__all__ = ["AliasFormatError", "validate_alias_format"]

_ALIAS_CHARS = re.compile(r"[a-zA-Z0-9-]+")

MIN_ALIAS_LENGTH = 3
MAX_ALIAS_LENGTH = 20


class AliasFormatError(ValueError):
    """Raised when a custom alias does not have an acceptable format."""


def validate_alias_format(alias):
    """Check the shape of a custom alias, raising AliasFormatError if it is wrong."""
    length = len(alias.encode("utf-8"))
    if length < MIN_ALIAS_LENGTH or length > MAX_ALIAS_LENGTH:
        raise AliasFormatError("alias must be between 3 and 20 characters")

    if not _ALIAS_CHARS.fullmatch(alias):
        raise AliasFormatError("alias can only contain letters, numbers, and hyphens")

    if alias.startswith("-") or alias.endswith("-"):
        raise AliasFormatError("alias cannot start or end with a hyphen")

    return None