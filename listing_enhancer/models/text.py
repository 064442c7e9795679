"""Text helpers shared by the listing models and services."""

from typing import Any


def clean_text(value: Any) -> str:
    """Return value as trimmed text, or "" when it has no usable text.

    Numbers are rendered as text. Booleans, containers and None are empty.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""
