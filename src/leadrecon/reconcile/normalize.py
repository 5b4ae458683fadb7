"""
Normalize: identity keys for email and phone values.
"""
from __future__ import annotations

import re
from typing import Any

_NON_DIGIT = re.compile(r"[^0-9]")


def normalize_email(value: Any) -> str:
    """Trim and lowercase an email value. No syntax validation."""
    if not value:
        return ""
    return str(value).strip().lower()


def normalize_phone(value: Any) -> str:
    """
    Keep only the decimal digits of a phone value.

    Country codes are not reconciled: "+1 555 123 4567" and "555 123 4567"
    produce different keys.
    """
    if not value:
        return ""
    return _NON_DIGIT.sub("", str(value))
