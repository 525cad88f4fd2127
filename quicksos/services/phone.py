"""Phone number normalization and emergency-number denylist."""

from __future__ import annotations

import re

from quicksos.core.sos_policies import BLOCKED_NUMBERS

_NON_DIGIT = re.compile(r"\D")


def normalize_phone(text: str | None) -> str:
    """Strip every non-digit character.

    Examples:
        >>> normalize_phone("(555) 123-4567")
        '5551234567'
        >>> normalize_phone(None)
        ''
    """
    return _NON_DIGIT.sub("", text or "")


def is_blocked_number(text: str | None) -> bool:
    """True when the canonical digits are an official emergency number."""
    return normalize_phone(text) in BLOCKED_NUMBERS
