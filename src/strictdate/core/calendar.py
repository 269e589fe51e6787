"""Proleptic Gregorian calendar arithmetic.

Leap-year rule, month lengths, and conversion between (year, month, day)
and days since the Unix epoch (1970-01-01). Every function works on plain
integers; nothing here knows about patterns or instants.

The ordinal algorithm counts days from 0001-01-01 (ordinal 1), matching
datetime.date.toordinal(), and breaks ordinals down by 400/100/4/1-year
cycles on the way back.

Python 3.13+. Zero external dependencies.
"""

from strictdate.constants import MAX_YEAR, MIN_YEAR

__all__ = [
    "DAYS_IN_MONTH",
    "EPOCH_ORDINAL",
    "MAX_EPOCH_DAY",
    "MIN_EPOCH_DAY",
    "days_in_month",
    "epoch_day_to_ymd",
    "is_leap_year",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "ymd_to_ordinal",
]

# Days in each month of a common year; index 0 unused so months are 1-indexed.
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cumulative days before each month in a common year.
_DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_IN_400_YEARS = 146_097
_DAYS_IN_100_YEARS = 36_524
_DAYS_IN_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2020)
        True
        >>> is_leap_year(2021)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        msg = f"month must be 1-12, got {month}"
        raise ValueError(msg)
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a calendar date to its ordinal (0001-01-01 is ordinal 1).

    The caller is responsible for passing a valid date.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    days_before_month = _DAYS_BEFORE_MONTH[month] + (1 if month > 2 and is_leap_year(year) else 0)
    return days_before_year + days_before_month + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal (>= 1) back to (year, month, day)."""
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle: the divmods overshoot into a 5th year
    # (or 4th century).
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    day_of_year = n + 1
    for month in range(1, 13):
        length = days_in_month(year, month)
        if day_of_year <= length:
            return (year, month, day_of_year)
        day_of_year -= length

    msg = f"ordinal {ordinal} did not resolve to a month"
    raise ValueError(msg)


# Ordinal of 1970-01-01.
EPOCH_ORDINAL: int = ymd_to_ordinal(1970, 1, 1)

MIN_EPOCH_DAY: int = ymd_to_ordinal(MIN_YEAR, 1, 1) - EPOCH_ORDINAL
MAX_EPOCH_DAY: int = ymd_to_ordinal(MAX_YEAR, 12, 31) - EPOCH_ORDINAL


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 (negative before it).

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2000, 3, 1)
        11017
    """
    return ymd_to_ordinal(year, month, day) - EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Inverse of ymd_to_epoch_day().

    Raises:
        ValueError: If the day lies outside MIN_YEAR..MAX_YEAR.
    """
    if not MIN_EPOCH_DAY <= epoch_day <= MAX_EPOCH_DAY:
        msg = f"epoch day {epoch_day} is outside years {MIN_YEAR}..{MAX_YEAR}"
        raise ValueError(msg)
    return ordinal_to_ymd(epoch_day + EPOCH_ORDINAL)
