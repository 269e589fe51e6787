"""Formatting: Instant values to text, and zone offset resolution.

Public API:
    format_instant - Returns tuple[str | None, tuple[StrictDateError, ...]]
    format_zone - Renders a minute offset in a zone style
    offset_minutes_for - Resolves minutes, tzinfo or zone names to an offset

Python 3.13+. Babel is optional (named zones only).
"""

from .formatter import format_instant, format_zone
from .zones import offset_minutes_for

__all__ = [
    "format_instant",
    "format_zone",
    "offset_minutes_for",
]
