"""
Parse-or-default helpers for numeric CSV cells.
A failed conversion yields the default plus a warning for the caller to log.
"""
import re
from typing import Optional

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_UINT32_MAX = 2**32 - 1


def parse_int_or_default(text: str, default: int = 0) -> tuple[int, Optional[str]]:
    """Parse a non-negative 32-bit integer, e.g. a release year."""
    if not _UNSIGNED_RE.fullmatch(text):
        return default, f"Failed to parse integer from '{text}'"
    value = int(text)
    if value > _UINT32_MAX:
        return default, f"Integer '{text}' is out of range"
    return value, None


def parse_float_or_default(text: str, default: float = 0.0) -> tuple[float, Optional[str]]:
    """
    Parse a float such as a song length in minutes.
    Padded text and "_" digit separators are rejected.
    """
    if text != text.strip() or "_" in text:
        return default, f"Failed to parse float from '{text}'"
    try:
        return float(text), None
    except ValueError:
        return default, f"Failed to parse float from '{text}'"
