"""Strict parser: input text to Instant, walking a CompiledPattern in lockstep.

- parse_fields() returns tuple[ParsedFields | None, tuple[ParseError, ...]]
- parse() returns tuple[Instant | None, tuple[StrictDateError, ...]]
- parse_zoned() returns tuple[ZonedInstant | None, tuple[StrictDateError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple

Strictness:
    - Literals match character for character; nothing is skipped
    - Numeric fields accept ASCII digits only, in the exact count the
      pattern requires (or 1..width for single-letter fields)
    - Fractions keep every digit; "23879" is 238_790_000 ns, not 238 ms
    - Leftover input is an error, never ignored

Thread-safe. Pure functions over their arguments.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass

from strictdate.constants import NANOS_PER_MINUTE
from strictdate.diagnostics import (
    ErrorTemplate,
    FieldUnderflowError,
    LiteralMismatchError,
    ParseError,
    StrictDateError,
    TrailingInputError,
)
from strictdate.enums import FieldKind, ZoneStyle
from strictdate.instant import Instant
from strictdate.normalization.normalizer import normalize, to_utc
from strictdate.pattern.tokens import CompiledPattern, FieldSpec, Literal

from .cursor import ASCII_DIGITS, Cursor
from .fields import ParsedField, ParsedFields

__all__ = ["ZonedInstant", "parse", "parse_fields", "parse_zoned"]

logger = logging.getLogger(__name__)

_UTC_DESIGNATOR = "Z"
_GMT_PREFIX = "GMT"
_SIGNS = {"+": 1, "-": -1}

# Accepted text per zone style, for diagnostics
_ZONE_SHAPES: dict[ZoneStyle, str] = {
    ZoneStyle.BASIC: "+HHMM",
    ZoneStyle.LOCALIZED_GMT: "GMT or GMT+HH:MM",
    ZoneStyle.ISO_HOURS: "Z, +HH or +HHMM",
    ZoneStyle.ISO_BASIC: "Z or +HHMM",
    ZoneStyle.ISO_EXTENDED: "Z or +HH:MM",
}


@dataclass(frozen=True, slots=True)
class ZonedInstant:
    """UTC instant together with the offset the input was written in.

    Attributes:
        instant: The UTC instant (input wall clock minus offset)
        offset_minutes: Signed UTC offset read from the input (or the default)
    """

    instant: Instant
    offset_minutes: int

    @property
    def wall_clock(self) -> Instant:
        """The instant as written in the input, before the offset was applied."""
        return Instant(self.instant.nanos + self.offset_minutes * NANOS_PER_MINUTE)


# ==============================================================================
# ZONE OFFSETS
# ==============================================================================


def _read_two_digits(cursor: Cursor) -> tuple[int, Cursor] | None:
    digits = cursor.take_digits(2)
    if len(digits) != 2:
        return None
    return (int(digits), cursor.advance(2))


def _read_signed_offset(
    cursor: Cursor, *, separator: str, minutes_optional: bool
) -> tuple[tuple[int, int, int], Cursor] | None:
    """Read +HH[sep]MM. Returns ((sign, hours, minutes), cursor) or None."""
    if cursor.is_eof or cursor.current not in _SIGNS:
        return None
    sign = _SIGNS[cursor.current]
    hours_read = _read_two_digits(cursor.advance())
    if hours_read is None:
        return None
    hours, cursor = hours_read

    if minutes_optional and (cursor.is_eof or cursor.current not in ASCII_DIGITS):
        return ((sign, hours, 0), cursor)
    if separator:
        if not cursor.startswith(separator):
            return None
        cursor = cursor.advance(len(separator))
    minutes_read = _read_two_digits(cursor)
    if minutes_read is None:
        return None
    minutes, cursor = minutes_read
    return ((sign, hours, minutes), cursor)


def _read_zone(cursor: Cursor, style: ZoneStyle) -> tuple[tuple[int, int, int], Cursor] | None:
    match style:
        case ZoneStyle.BASIC:
            return _read_signed_offset(cursor, separator="", minutes_optional=False)
        case ZoneStyle.LOCALIZED_GMT:
            if not cursor.startswith(_GMT_PREFIX):
                return None
            cursor = cursor.advance(len(_GMT_PREFIX))
            if cursor.is_eof or cursor.current not in _SIGNS:
                return ((1, 0, 0), cursor)
            return _read_signed_offset(cursor, separator=":", minutes_optional=False)

    # ISO styles accept the UTC designator
    if cursor.startswith(_UTC_DESIGNATOR):
        return ((1, 0, 0), cursor.advance())
    match style:
        case ZoneStyle.ISO_HOURS:
            return _read_signed_offset(cursor, separator="", minutes_optional=True)
        case ZoneStyle.ISO_BASIC:
            return _read_signed_offset(cursor, separator="", minutes_optional=False)
        case _:
            return _read_signed_offset(cursor, separator=":", minutes_optional=False)


# ==============================================================================
# TOKEN MATCHING
# ==============================================================================


def _match_literal(cursor: Cursor, literal: Literal) -> tuple[Cursor, ParseError | None]:
    text = literal.text
    if cursor.startswith(text):
        return (cursor.advance(len(text)), None)

    # Report the first character that differs, not the literal's start
    index = 0
    while index < len(text) and cursor.peek(index) == text[index]:
        index += 1
    offset = cursor.pos + index
    received = cursor.source[offset : offset + 1]
    diagnostic = ErrorTemplate.literal_mismatch(cursor.source, offset, text, received)
    error = LiteralMismatchError(
        diagnostic,
        input_value=cursor.source,
        offset=offset,
        expected=text,
        received=received,
    )
    return (cursor, error)


def _match_field(
    cursor: Cursor, spec: FieldSpec
) -> tuple[Cursor, ParsedField | None, ParseError | None]:
    start = cursor.pos

    if spec.zone_style is not None:
        read = _read_zone(cursor, spec.zone_style)
        if read is None:
            diagnostic = ErrorTemplate.zone_offset_malformed(
                cursor.source, start, _ZONE_SHAPES[spec.zone_style]
            )
            error = FieldUnderflowError(
                diagnostic,
                input_value=cursor.source,
                offset=start,
                field_kind=spec.kind,
                digits_found=len(cursor.take_digits(len(cursor.remaining))),
            )
            return (cursor, None, error)
        parts, end = read
        sign, hours, minutes = parts
        parsed = ParsedField(
            kind=spec.kind,
            value=sign * (hours * 60 + minutes),
            digits=end.pos - start,
            offset=start,
            parts=parts,
        )
        return (end, parsed, None)

    digits = cursor.take_digits(spec.width)
    if (spec.exact and len(digits) != spec.width) or not digits:
        required = str(spec.width) if spec.exact else f"1-{spec.width}"
        diagnostic = ErrorTemplate.field_underflow(
            cursor.source, start, str(spec.kind), required, len(digits)
        )
        error = FieldUnderflowError(
            diagnostic,
            input_value=cursor.source,
            offset=start,
            field_kind=spec.kind,
            digits_found=len(digits),
        )
        return (cursor, None, error)

    parsed = ParsedField(kind=spec.kind, value=int(digits), digits=len(digits), offset=start)
    return (cursor.advance(len(digits)), parsed, None)


# ==============================================================================
# PUBLIC API
# ==============================================================================


def parse_fields(
    value: str, pattern: CompiledPattern
) -> tuple[ParsedFields | None, tuple[ParseError, ...]]:
    """Read raw field values from input without calendar validation.

    Never raises. Errors are returned in tuple. Matching stops at the first
    mismatch since nothing after it can be located reliably.

    Args:
        value: Input text
        pattern: Compiled pattern from compile_pattern()

    Returns:
        Tuple of (result, errors):
        - result: ParsedFields, or None if the input does not match
        - errors: Tuple of ParseError (empty tuple on success)
    """
    # Runtime defense for untyped callers
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_input_not_string(type(value).__name__)  # type: ignore[unreachable]
        return (None, (ParseError(diagnostic),))

    cursor = Cursor(value, 0)
    fields = ParsedFields(value)

    for token in pattern.tokens:
        if isinstance(token, Literal):
            cursor, error = _match_literal(cursor, token)
        else:
            cursor, parsed, error = _match_field(cursor, token)
            if parsed is not None:
                fields.record(parsed)
        if error is not None:
            logger.debug("Parse of %r with %r failed: %s", value, pattern.template, error)
            return (None, (error,))

    if not cursor.is_eof:
        trailing = TrailingInputError(
            ErrorTemplate.trailing_input(value, cursor.pos),
            input_value=value,
            offset=cursor.pos,
        )
        logger.debug(
            "Parse of %r with %r left input %r", value, pattern.template, trailing.remainder
        )
        return (None, (trailing,))

    return (fields, ())


def parse(
    value: str, pattern: CompiledPattern
) -> tuple[Instant | None, tuple[StrictDateError, ...]]:
    """Parse input into the wall-clock instant it denotes.

    Never raises. Errors are returned in tuple.

    A zone field in the pattern is read and range-checked but not applied;
    use parse_zoned() for the UTC instant.

    Args:
        value: Input text
        pattern: Compiled pattern from compile_pattern()

    Returns:
        Tuple of (result, errors):
        - result: Instant, or None if parsing or validation failed
        - errors: Tuple of ParseError or CalendarRangeError (empty on success)

    Examples:
        >>> pattern, _ = compile_pattern("yyyy-MM-dd'T'HH:mm:ss.SSSSS'Z'")
        >>> instant, errors = parse("2019-12-30T15:26:22.23879Z", pattern)
        >>> instant.nanosecond
        238790000

        >>> pattern, _ = compile_pattern("MM/dd/yyyy")
        >>> instant, errors = parse("2020/02/20", pattern)
        >>> type(errors[0]).__name__
        'LiteralMismatchError'
    """
    fields, parse_errors = parse_fields(value, pattern)
    if fields is None:
        return (None, parse_errors)
    return normalize(fields)


def parse_zoned(
    value: str,
    pattern: CompiledPattern,
    *,
    default_offset_minutes: int = 0,
) -> tuple[ZonedInstant | None, tuple[StrictDateError, ...]]:
    """Parse input and convert it to UTC using its zone offset.

    Never raises. Errors are returned in tuple.

    Args:
        value: Input text
        pattern: Compiled pattern from compile_pattern()
        default_offset_minutes: Offset assumed when the pattern has no zone
            field

    Returns:
        Tuple of (result, errors):
        - result: ZonedInstant, or None on failure
        - errors: Tuple of StrictDateError (empty tuple on success)

    Example:
        >>> pattern, _ = compile_pattern("yyyy-MM-dd HH:mmXXX")
        >>> zoned, _ = parse_zoned("2020-01-01 01:30+01:30", pattern)
        >>> zoned.instant.isoformat()
        '2020-01-01T00:00:00.000000000'
    """
    fields, parse_errors = parse_fields(value, pattern)
    if fields is None:
        return (None, parse_errors)
    wall_clock, calendar_errors = normalize(fields)
    if wall_clock is None:
        return (None, calendar_errors)

    zone = fields.get(FieldKind.ZONE_OFFSET)
    offset = default_offset_minutes if zone is None else zone.value
    utc, offset_errors = to_utc(wall_clock, offset)
    if utc is None:
        logger.debug("Parse of %r could not apply offset %r", value, offset)
        return (None, offset_errors)
    return (ZonedInstant(instant=utc, offset_minutes=offset), ())
