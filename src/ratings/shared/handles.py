"""Validation shared by usernames and item locators."""

import re

from protean.exceptions import ValidationError

# Letters, digits and underscores only; no whitespace, no punctuation
_HANDLE_PATTERN = re.compile(r"\w+")


def validate_handle(field: str, value: str | None, message: str) -> None:
    """Raise ``ValidationError`` on ``field`` unless ``value`` is a non-blank handle."""
    if value is None:
        return

    if not value.strip():
        raise ValidationError({field: ["Some fields are empty!"]})

    if not _HANDLE_PATTERN.fullmatch(value):
        raise ValidationError({field: [message]})
