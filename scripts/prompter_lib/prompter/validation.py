"""
Validation functions for prompt input.

Validators return None when the input is accepted, or the message to show
the user when it is rejected.
"""

from typing import Callable, Optional, Sequence

Validator = Callable[[str], Optional[str]]

TEXT_REQUIRED = "please provide a text"
INVALID_URL = "please enter a valid url"
INVALID_CHOICE = "please choose one of the listed options"

URL_PREFIXES = ("http://", "https://")


def validate_text(value: str) -> Optional[str]:
    """Reject empty or whitespace-only text."""
    if not value.strip():
        return TEXT_REQUIRED
    return None


def text_validator(default_value: str = "") -> Validator:
    """Build a text validator that accepts blank input when a default exists."""
    if default_value.strip():
        return lambda value: None
    return validate_text


def validate_url(value: str) -> Optional[str]:
    """Accept an empty value or an http(s) URL."""
    if value and not value.lower().startswith(URL_PREFIXES):
        return INVALID_URL
    return None


def resolve_choice(value: str, items: Sequence[str], default: str = "") -> Optional[int]:
    """
    Map a select answer to an item index.

    Args:
        value: Raw answer, an item name or a 1-based number
        items: Available options
        default: Item name picked when the answer is blank

    Returns:
        Index into items, or None if the answer matches nothing
    """
    items = list(items)
    choice = value.strip()
    if not choice:
        if default and default in items:
            return items.index(default)
        return None
    # Names win over positions, so numeric items match themselves.
    if choice in items:
        return items.index(choice)
    if choice.isdigit():
        index = int(choice) - 1
        if 0 <= index < len(items):
            return index
    return None


def choice_validator(items: Sequence[str], default: str = "") -> Validator:
    """Build a validator for select answers."""
    def validate(value: str) -> Optional[str]:
        if resolve_choice(value, items, default) is None:
            return INVALID_CHOICE
        return None
    return validate
