"""Calendar normalization: field values to instants and instants to fields.

Public API:
    normalize - Returns tuple[Instant | None, tuple[CalendarRangeError, ...]]
    decompose - Returns tuple[CalendarFields | None, tuple[CalendarRangeError, ...]]
    to_utc - Returns tuple[Instant | None, tuple[CalendarRangeError, ...]]
    CalendarFields - Wall-clock components of an instant

Python 3.13+. Zero external dependencies.
"""

from .normalizer import CalendarFields, decompose, format_offset, normalize, to_utc

__all__ = [
    "CalendarFields",
    "decompose",
    "format_offset",
    "normalize",
    "to_utc",
]
