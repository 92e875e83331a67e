"""Kennitala cleanup and formatting helpers.

Два режима очистки:
- careful: trim + at most one separator (space, dash or en-dash) before the
  last four digits, and only if the value is otherwise kennitala-shaped;
- aggressive: strip leading/trailing non-digit gunk and every space/dash.

Neither cleaner checks the digit count; that is left to the caller.

Примеры (doctest):
>>> clean_careful(" 123456 - 7890 ")
'1234567890'
>>> clean_careful("12 3456-7890")
'12 3456-7890'
>>> clean_aggressive("kt. 12 34 56–78 90.")
'1234567890'
>>> format_kennitala("1234567890")
'123456-7890'
>>> format_kennitala("abc")
'abc'
"""
from __future__ import annotations

import re

CAREFUL_RE = re.compile(r"([0-9]{6})\s?[-–]?\s?([0-9]{4})")
_EDGE_GUNK_RE = re.compile(r"^[^0-9]+|[^0-9]+$")
_SEPARATORS_RE = re.compile(r"[\s\-–]")
_SHAPE_RE = re.compile(r"[0-9]{10}")


def clean_careful(value: str) -> str:
    """Trim and drop a single separator before the last four digits."""
    trimmed = value.strip()
    m = CAREFUL_RE.fullmatch(trimmed)
    if not m:
        return trimmed
    return m.group(1) + m.group(2)


def clean_aggressive(value: str) -> str:
    """Strip any leading/trailing non-digits, then all spaces and dashes."""
    return _SEPARATORS_RE.sub("", _EDGE_GUNK_RE.sub("", value))


def is_shaped(value: str) -> bool:
    """Exactly ten ASCII digits."""
    return bool(_SHAPE_RE.fullmatch(value))


def clean_if_shaped(value: str) -> str | None:
    cleaned = clean_careful(value)
    return cleaned if is_shaped(cleaned) else None


def format_kennitala(value: str, separator: str = "-") -> str:
    """Вставить разделитель перед последними четырьмя цифрами.

    Returns the input untouched if it isn't roughly kennitala-shaped.
    """
    cleaned = clean_if_shaped(value)
    if not cleaned:
        return value
    return cleaned[:6] + separator + cleaned[6:]
