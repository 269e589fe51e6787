"""Calendar normalizer: parsed fields to a validated Instant, and back.

- normalize() returns tuple[Instant | None, tuple[CalendarRangeError, ...]]
- decompose() returns tuple[CalendarFields | None, tuple[CalendarRangeError, ...]]
- Every violation is collected, not just the first
- No carry: a field out of range is an error, never a later day or hour

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from strictdate.constants import (
    MAX_FRACTION_DIGITS,
    MAX_OFFSET_HOURS,
    MAX_OFFSET_MINUTES,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from strictdate.core.calendar import days_in_month, epoch_day_to_ymd, ymd_to_epoch_day
from strictdate.diagnostics import CalendarRangeError, ErrorTemplate
from strictdate.enums import FieldKind
from strictdate.instant import MAX_NANOS, MIN_NANOS, Instant

if TYPE_CHECKING:
    from strictdate.parsing.fields import ParsedField, ParsedFields

__all__ = ["CalendarFields", "decompose", "format_offset", "normalize", "to_utc"]

logger = logging.getLogger(__name__)

# Fixed ranges, checked independently of each other
_RANGES: dict[FieldKind, tuple[int, int]] = {
    FieldKind.YEAR_OF_ERA: (MIN_YEAR, MAX_YEAR),
    FieldKind.MONTH_OF_YEAR: (1, 12),
    FieldKind.DAY_OF_MONTH: (1, 31),
    FieldKind.HOUR_24: (0, 23),
    FieldKind.MINUTE: (0, 59),
    FieldKind.SECOND: (0, 59),
}

_REQUIRED: tuple[FieldKind, ...] = (
    FieldKind.YEAR_OF_ERA,
    FieldKind.MONTH_OF_YEAR,
    FieldKind.DAY_OF_MONTH,
)

_MAX_OFFSET_TEXT = f"{MAX_OFFSET_HOURS:02d}:00"


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Wall-clock view of an instant at a fixed UTC offset.

    Attributes:
        year: 1..9999
        month: 1..12
        day: 1..days_in_month(year, month)
        hour: 0..23
        minute: 0..59
        second: 0..59
        nanosecond: 0..999_999_999, full resolution
        offset_minutes: UTC offset the wall clock is expressed in
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    offset_minutes: int = 0


def format_offset(offset_minutes: int) -> str:
    """Render a signed minute offset as +HH:MM."""
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _range_error(field: "ParsedField", source: str, low: int, high: int) -> CalendarRangeError:
    diagnostic = ErrorTemplate.value_out_of_range(
        str(field.kind),
        field.value,
        low,
        high,
        source=source,
        offset=field.offset,
        length=field.digits,
    )
    return CalendarRangeError(diagnostic, field_kind=field.kind, value=field.value)


def _check_zone(field: "ParsedField") -> CalendarRangeError | None:
    if field.parts:
        sign, hours, minutes = field.parts
        text = f"{'-' if sign < 0 else '+'}{hours:02d}:{minutes:02d}"
        in_range = hours <= MAX_OFFSET_HOURS and minutes <= 59
    else:
        text = format_offset(field.value)
        in_range = True
    if in_range and abs(field.value) <= MAX_OFFSET_MINUTES:
        return None
    diagnostic = ErrorTemplate.offset_out_of_range(text, _MAX_OFFSET_TEXT)
    return CalendarRangeError(diagnostic, field_kind=FieldKind.ZONE_OFFSET, value=field.value)


def _fraction_nanos(field: "ParsedField", source: str) -> tuple[int, CalendarRangeError | None]:
    if not 1 <= field.digits <= MAX_FRACTION_DIGITS or not 0 <= field.value < 10**field.digits:
        return (0, _range_error(field, source, 0, 10**field.digits - 1))
    # Scale, never round: "23879" in five digits is 238_790_000 ns
    return (field.value * 10 ** (MAX_FRACTION_DIGITS - field.digits), None)


def normalize(fields: "ParsedFields") -> tuple[Instant | None, tuple[CalendarRangeError, ...]]:
    """Validate parsed fields and build the instant they denote.

    Never raises. Errors are returned in tuple.

    Year, month and day are required; hour, minute, second and fraction
    default to zero. Zone offsets are range-checked but not applied: the
    result is the wall-clock instant. Use to_utc() to apply the offset.

    Args:
        fields: Field values from parse_fields()

    Returns:
        Tuple of (result, errors):
        - result: Instant, or None if any field is missing or out of range
        - errors: Tuple of CalendarRangeError (empty tuple on success)

    Examples:
        >>> pattern, _ = compile_pattern("dd/MM/yyyy")
        >>> fields, _ = parse_fields("31/04/2020", pattern)
        >>> instant, errors = normalize(fields)
        >>> instant is None
        True
        >>> errors[0].diagnostic.message
        'Day 31 is out of range for 2020-04'
    """
    errors: list[CalendarRangeError] = []
    source = fields.source

    for kind in _REQUIRED:
        if kind not in fields:
            errors.append(CalendarRangeError(ErrorTemplate.field_missing(str(kind)), field_kind=kind))

    valid: dict[FieldKind, int] = {}
    for kind, (low, high) in _RANGES.items():
        field = fields.get(kind)
        if field is None:
            continue
        if low <= field.value <= high:
            valid[kind] = field.value
        else:
            errors.append(_range_error(field, source, low, high))

    year = valid.get(FieldKind.YEAR_OF_ERA)
    month = valid.get(FieldKind.MONTH_OF_YEAR)
    day_field = fields.get(FieldKind.DAY_OF_MONTH)
    if year is not None and month is not None and FieldKind.DAY_OF_MONTH in valid:
        days = days_in_month(year, month)
        day = valid[FieldKind.DAY_OF_MONTH]
        if day > days and day_field is not None:
            diagnostic = ErrorTemplate.day_out_of_month(
                year,
                month,
                day,
                days,
                source=source,
                offset=day_field.offset,
                length=day_field.digits,
            )
            errors.append(
                CalendarRangeError(diagnostic, field_kind=FieldKind.DAY_OF_MONTH, value=day)
            )

    nanosecond = 0
    fraction = fields.get(FieldKind.SUBSECOND_FRACTION)
    if fraction is not None:
        nanosecond, fraction_error = _fraction_nanos(fraction, source)
        if fraction_error is not None:
            errors.append(fraction_error)

    zone = fields.get(FieldKind.ZONE_OFFSET)
    if zone is not None:
        zone_error = _check_zone(zone)
        if zone_error is not None:
            errors.append(zone_error)

    if errors:
        logger.debug("Rejected fields %r with %d error(s)", fields, len(errors))
        return (None, tuple(errors))

    # Presence and ranges established above
    nanos = (
        ymd_to_epoch_day(
            valid[FieldKind.YEAR_OF_ERA],
            valid[FieldKind.MONTH_OF_YEAR],
            valid[FieldKind.DAY_OF_MONTH],
        )
        * NANOS_PER_DAY
        + valid.get(FieldKind.HOUR_24, 0) * NANOS_PER_HOUR
        + valid.get(FieldKind.MINUTE, 0) * NANOS_PER_MINUTE
        + valid.get(FieldKind.SECOND, 0) * NANOS_PER_SECOND
        + nanosecond
    )
    return (Instant(nanos), ())


def _offset_error(offset_minutes: object) -> CalendarRangeError | None:
    if isinstance(offset_minutes, bool) or not isinstance(offset_minutes, int):
        diagnostic = ErrorTemplate.offset_out_of_range(repr(offset_minutes), _MAX_OFFSET_TEXT)
        return CalendarRangeError(diagnostic, field_kind=FieldKind.ZONE_OFFSET)
    if abs(offset_minutes) > MAX_OFFSET_MINUTES:
        diagnostic = ErrorTemplate.offset_out_of_range(
            format_offset(offset_minutes), _MAX_OFFSET_TEXT
        )
        return CalendarRangeError(
            diagnostic, field_kind=FieldKind.ZONE_OFFSET, value=offset_minutes
        )
    return None


def _shift(
    nanos: int, offset_minutes: int, description: str, *, sign: int = 1
) -> tuple[int | None, tuple[CalendarRangeError, ...]]:
    error = _offset_error(offset_minutes)
    if error is not None:
        return (None, (error,))
    shifted = nanos + sign * offset_minutes * NANOS_PER_MINUTE
    if not MIN_NANOS <= shifted <= MAX_NANOS:
        diagnostic = ErrorTemplate.instant_out_of_range(
            f"{description} at offset {format_offset(offset_minutes)}", MIN_YEAR, MAX_YEAR
        )
        return (None, (CalendarRangeError(diagnostic, field_kind=FieldKind.YEAR_OF_ERA),))
    return (shifted, ())


def to_utc(
    wall_clock: Instant, offset_minutes: int
) -> tuple[Instant | None, tuple[CalendarRangeError, ...]]:
    """Convert a wall-clock instant at a UTC offset to the UTC instant.

    Never raises. Errors are returned in tuple.

    Example:
        >>> utc, _ = to_utc(Instant.of(2020, 1, 1, 1, 0), 60)
        >>> utc == Instant.of(2020, 1, 1)
        True
    """
    shifted, errors = _shift(wall_clock.nanos, offset_minutes, "UTC instant", sign=-1)
    if shifted is None:
        return (None, errors)
    return (Instant(shifted), ())


def decompose(
    instant: Instant, offset_minutes: int = 0
) -> tuple[CalendarFields | None, tuple[CalendarRangeError, ...]]:
    """Split an instant into wall-clock fields at a UTC offset.

    Never raises. Errors are returned in tuple.

    Args:
        instant: The instant to split
        offset_minutes: Signed UTC offset in minutes, |offset| <= 18:00

    Returns:
        Tuple of (result, errors):
        - result: CalendarFields, or None if the offset is out of range or
          moves the wall clock outside years 0001..9999
        - errors: Tuple of CalendarRangeError (empty tuple on success)
    """
    shifted, errors = _shift(instant.nanos, offset_minutes, "Wall clock")
    if shifted is None:
        return (None, errors)

    day_number, rest = divmod(shifted, NANOS_PER_DAY)
    year, month, day = epoch_day_to_ymd(day_number)
    hour, rest = divmod(rest, NANOS_PER_HOUR)
    minute, rest = divmod(rest, NANOS_PER_MINUTE)
    second, nanosecond = divmod(rest, NANOS_PER_SECOND)
    return (
        CalendarFields(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
            offset_minutes=offset_minutes,
        ),
        (),
    )
