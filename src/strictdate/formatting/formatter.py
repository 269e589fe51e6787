"""Formatter: Instant to text through a CompiledPattern.

- format_instant() returns tuple[str | None, tuple[StrictDateError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple

Rendering rules:
    - Literals verbatim
    - Exact fields zero-padded to their width; single-letter fields unpadded
    - Fractions truncated to the pattern's width, never rounded, so
      .9999999 at SSS is .999 and never rolls into the next second
    - Zone fields render the offset the instant was shifted by

Thread-safe. Pure function over its arguments.

Python 3.13+. Zero external dependencies.
"""

import logging

from strictdate.constants import MAX_FRACTION_DIGITS
from strictdate.diagnostics import ErrorTemplate, StrictDateError, UnsupportedFieldError
from strictdate.enums import FieldKind, ZoneStyle
from strictdate.instant import Instant
from strictdate.normalization.normalizer import CalendarFields, decompose
from strictdate.pattern.tokens import CompiledPattern, FieldSpec, Literal

__all__ = ["format_instant", "format_zone"]

logger = logging.getLogger(__name__)


def format_zone(offset_minutes: int, style: ZoneStyle) -> str:
    """Render a UTC offset in the given zone style.

    Examples:
        >>> format_zone(-330, ZoneStyle.ISO_EXTENDED)
        '-05:30'
        >>> format_zone(0, ZoneStyle.ISO_EXTENDED)
        'Z'
        >>> format_zone(60, ZoneStyle.ISO_HOURS)
        '+01'
        >>> format_zone(0, ZoneStyle.LOCALIZED_GMT)
        'GMT'
    """
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    match style:
        case ZoneStyle.BASIC:
            return f"{sign}{hours:02d}{minutes:02d}"
        case ZoneStyle.LOCALIZED_GMT:
            return "GMT" if offset_minutes == 0 else f"GMT{sign}{hours:02d}:{minutes:02d}"
        case _ if offset_minutes == 0:
            return "Z"
        case ZoneStyle.ISO_HOURS if minutes == 0:
            return f"{sign}{hours:02d}"
        case ZoneStyle.ISO_HOURS | ZoneStyle.ISO_BASIC:
            return f"{sign}{hours:02d}{minutes:02d}"
        case _:
            return f"{sign}{hours:02d}:{minutes:02d}"


def _render_number(value: int, spec: FieldSpec) -> str:
    if spec.exact:
        return str(value).zfill(spec.width)
    return str(value)


def _render_field(fields: CalendarFields, spec: FieldSpec) -> str | None:
    match spec.kind:
        case FieldKind.YEAR_OF_ERA:
            return _render_number(fields.year, spec)
        case FieldKind.MONTH_OF_YEAR:
            return _render_number(fields.month, spec)
        case FieldKind.DAY_OF_MONTH:
            return _render_number(fields.day, spec)
        case FieldKind.HOUR_24:
            return _render_number(fields.hour, spec)
        case FieldKind.MINUTE:
            return _render_number(fields.minute, spec)
        case FieldKind.SECOND:
            return _render_number(fields.second, spec)
        case FieldKind.SUBSECOND_FRACTION:
            # Truncate from the full nine digits
            return f"{fields.nanosecond:0{MAX_FRACTION_DIGITS}d}"[: spec.width]
        case FieldKind.ZONE_OFFSET if spec.zone_style is not None:
            return format_zone(fields.offset_minutes, spec.zone_style)
        case _:
            return None


def format_instant(
    instant: Instant,
    pattern: CompiledPattern,
    zone_offset_minutes: int = 0,
) -> tuple[str | None, tuple[StrictDateError, ...]]:
    """Render an instant through a compiled pattern.

    Never raises. Errors are returned in tuple.

    Args:
        instant: The instant to render
        pattern: Compiled pattern from compile_pattern()
        zone_offset_minutes: UTC offset to render the wall clock in; zone
            fields show this offset

    Returns:
        Tuple of (result, errors):
        - result: Rendered text, or None on failure
        - errors: Tuple of StrictDateError (empty tuple on success)

    Examples:
        >>> pattern, _ = compile_pattern("yyyy-MM-dd'T'HH:mm:ss.SSSXXX")
        >>> instant = Instant.of(2019, 12, 30, 15, 26, 22, 238_790_000)
        >>> format_instant(instant, pattern)
        ('2019-12-30T15:26:22.238Z', ())
        >>> format_instant(instant, pattern, zone_offset_minutes=60)
        ('2019-12-30T16:26:22.238+01:00', ())
    """
    # Runtime defense for untyped callers
    if not isinstance(instant, Instant):
        diagnostic = ErrorTemplate.not_an_instant(type(instant).__name__)  # type: ignore[unreachable]
        return (None, (UnsupportedFieldError(diagnostic),))

    fields, calendar_errors = decompose(instant, zone_offset_minutes)
    if fields is None:
        logger.debug("Format of %s at offset %r failed", instant, zone_offset_minutes)
        return (None, calendar_errors)

    parts: list[str] = []
    errors: list[StrictDateError] = []
    for token in pattern.tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
            continue
        rendered = _render_field(fields, token)
        if rendered is None:
            errors.append(
                UnsupportedFieldError(
                    ErrorTemplate.unsupported_field(str(token.kind)), field_kind=token.kind
                )
            )
        else:
            parts.append(rendered)

    if errors:
        logger.debug(
            "Format of %s with %r failed: %d error(s)", instant, pattern.template, len(errors)
        )
        return (None, tuple(errors))
    return ("".join(parts), ())
