"""Helpers that turn raw form strings into payload values."""

import math
import re
from datetime import date
from urllib.parse import urlparse

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def optional(value: str) -> str | None:
    """Trimmed value, or None when nothing is left."""
    value = value.strip()
    return value or None


def optional_int(value: str) -> int | None:
    """Whole number, or None when the input does not parse as one.

    Year, volume and issue number are integers upstream, so a fractional
    value such as "2024.5" is omitted like any other non-numeric input.
    Whole-valued decimals ("12.0") are accepted.
    """
    number = optional_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def optional_float(value: str) -> float | None:
    """Finite number, or None when the input does not parse as one."""
    try:
        number = float(value.strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def optional_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value.strip()))


def is_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
