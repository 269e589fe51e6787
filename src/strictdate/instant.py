"""Canonical instant: nanoseconds since 1970-01-01T00:00:00, no zone.

The instant is the single durable value exchanged with callers. It holds
one integer, so there is no precision below the nanosecond to lose and no
millisecond-only representation anywhere in the pipeline. Zone offsets are
applied only when formatting.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from strictdate.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from strictdate.core.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    days_in_month,
    epoch_day_to_ymd,
    ymd_to_epoch_day,
)

__all__ = ["MAX_NANOS", "MIN_NANOS", "Instant"]

MIN_NANOS: int = MIN_EPOCH_DAY * NANOS_PER_DAY
MAX_NANOS: int = (MAX_EPOCH_DAY + 1) * NANOS_PER_DAY - 1


def _check_component(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if not low <= value <= high:
        msg = f"{name} must be in {low}..{high}, got {value}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """A point on the proleptic Gregorian time line at nanosecond resolution.

    Construction validates the range, so every Instant denotes a real
    date-time between 0001-01-01 and 9999-12-31.

    Attributes:
        nanos: Signed nanoseconds since 1970-01-01T00:00:00

    Example:
        >>> Instant.of(2019, 12, 30, 15, 26, 22, 238_790_000).isoformat()
        '2019-12-30T15:26:22.238790000'
        >>> Instant(0) == Instant.of(1970, 1, 1)
        True
    """

    nanos: int

    def __post_init__(self) -> None:
        """Validate Instant invariants.

        Raises:
            TypeError: If nanos is not an int (bool is rejected).
            ValueError: If nanos lies outside years 0001..9999.
        """
        if isinstance(self.nanos, bool) or not isinstance(self.nanos, int):
            msg = f"Instant.nanos must be an int, got {type(self.nanos).__name__}"
            raise TypeError(msg)
        if not MIN_NANOS <= self.nanos <= MAX_NANOS:
            msg = (
                f"Instant.nanos {self.nanos} is outside years "
                f"{MIN_YEAR:04d}..{MAX_YEAR:04d}"
            )
            raise ValueError(msg)

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> Instant:
        """Build an instant from calendar components.

        Unlike normalize(), this is a constructor: invalid components raise
        instead of being reported as values. Nothing is carried over, so
        ``Instant.of(2021, 2, 29)`` fails rather than becoming March 1.

        Raises:
            TypeError: If a component is not an int.
            ValueError: If a component is out of range.
        """
        _check_component("year", year, MIN_YEAR, MAX_YEAR)
        _check_component("month", month, 1, 12)
        _check_component("day", day, 1, days_in_month(year, month))
        _check_component("hour", hour, 0, 23)
        _check_component("minute", minute, 0, 59)
        _check_component("second", second, 0, 59)
        _check_component("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)
        return cls(
            ymd_to_epoch_day(year, month, day) * NANOS_PER_DAY
            + hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        """Convert a datetime without loss.

        Aware datetimes are converted to UTC first. Naive datetimes are taken
        as wall-clock UTC, the same way parse() treats input without a zone.
        """
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return cls.of(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICROSECOND,
        )

    def to_datetime(self, *, truncate: bool = False) -> datetime:
        """Convert to an aware UTC datetime.

        datetime stops at microseconds. Rather than dropping the last three
        digits silently, this raises unless ``truncate=True`` is passed.

        Raises:
            ValueError: If the instant has sub-microsecond digits and
                truncate is False.
        """
        sub_micro = self.nanosecond % NANOS_PER_MICROSECOND
        if sub_micro and not truncate:
            msg = (
                f"Instant has {sub_micro} ns below microsecond resolution; "
                "pass truncate=True to drop them"
            )
            raise ValueError(msg)
        year, month, day = epoch_day_to_ymd(self.epoch_day)
        rest = self.nanos_of_day
        hour, rest = divmod(rest, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, rest = divmod(rest, NANOS_PER_SECOND)
        return datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            rest // NANOS_PER_MICROSECOND,
            tzinfo=UTC,
        )

    @property
    def epoch_day(self) -> int:
        """Whole days since 1970-01-01 (floored, negative before it)."""
        return self.nanos // NANOS_PER_DAY

    @property
    def nanos_of_day(self) -> int:
        """Nanoseconds since midnight, always in [0, NANOS_PER_DAY)."""
        return self.nanos % NANOS_PER_DAY

    @property
    def nanosecond(self) -> int:
        """Nanoseconds within the current second."""
        return self.nanos % NANOS_PER_SECOND

    def isoformat(self) -> str:
        """Render as ISO 8601 with all nine fractional digits, no zone."""
        year, month, day = epoch_day_to_ymd(self.epoch_day)
        rest = self.nanos_of_day
        hour, rest = divmod(rest, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, rest = divmod(rest, NANOS_PER_SECOND)
        return f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}.{rest:09d}"

    def __str__(self) -> str:
        return self.isoformat()
