"""Enumerations for strictdate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FieldKind(StrEnum):
    """Kind of a pattern field.

    StrEnum provides automatic string conversion: str(FieldKind.YEAR_OF_ERA) == "year"
    """

    YEAR_OF_ERA = "year"
    """Gregorian calendar year: y, yyyy"""

    MONTH_OF_YEAR = "month"
    """Numeric month 1-12: M, MM"""

    DAY_OF_MONTH = "day"
    """Day of month: d, dd"""

    HOUR_24 = "hour"
    """Hour of day 0-23: H, HH"""

    MINUTE = "minute"
    """Minute of hour: m, mm"""

    SECOND = "second"
    """Second of minute, no leap seconds: s, ss"""

    SUBSECOND_FRACTION = "fraction"
    """Fractional second, 1-9 digits: S ... SSSSSSSSS"""

    LITERAL_QUOTE = "quote"
    """Quote delimiter for literal text: 'T'. Never compiled into a field."""

    ZONE_OFFSET = "zone"
    """UTC offset: Z ... ZZZZZ, X ... XXXXX"""


class ZoneStyle(StrEnum):
    """Textual shape of a zone offset field.

    StrEnum provides automatic string conversion: str(ZoneStyle.BASIC) == "basic"
    """

    BASIC = "basic"
    """+HHMM (Z, ZZ, ZZZ)"""

    LOCALIZED_GMT = "gmt"
    """GMT or GMT+HH:MM (ZZZZ)"""

    ISO_HOURS = "iso_hours"
    """Z, +HH or +HHMM (X)"""

    ISO_BASIC = "iso_basic"
    """Z or +HHMM (XX, XXXX)"""

    ISO_EXTENDED = "iso_extended"
    """Z or +HH:MM (ZZZZZ, XXX, XXXXX)"""


class ParseErrorKind(StrEnum):
    """Reason a parse walk failed.

    StrEnum provides automatic string conversion:
    str(ParseErrorKind.LITERAL_MISMATCH) == "literal_mismatch"
    """

    LITERAL_MISMATCH = "literal_mismatch"
    """Input character differs from the pattern literal."""

    FIELD_UNDERFLOW = "field_underflow"
    """Field could not consume its required digits."""

    TRAILING_INPUT = "trailing_input"
    """Input continues after the last pattern token."""

    INVALID_INPUT = "invalid_input"
    """Input is not a string."""


__all__ = [
    "FieldKind",
    "ParseErrorKind",
    "ZoneStyle",
]
