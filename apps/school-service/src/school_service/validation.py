from __future__ import annotations

import math
from typing import Any


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_valid_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def validate_input(name: Any, address: Any, latitude: Any, longitude: Any) -> str | None:
    """Return the message for the first invalid field, or ``None``.

    Fields are checked in order: name, address, latitude, longitude.
    """
    if not _is_non_empty_text(name):
        return "Name must be a non-empty string."
    if not _is_non_empty_text(address):
        return "Address must be a non-empty string."
    if not _is_valid_number(latitude):
        return "Latitude must be a valid number."
    if not _is_valid_number(longitude):
        return "Longitude must be a valid number."
    return None
