"""Tests for parse(), parse_fields() and parse_zoned().

All functions return tuple[result | None, tuple[error, ...]] and never raise.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from strictdate import (
    CalendarRangeError,
    CompiledPattern,
    FieldKind,
    FieldUnderflowError,
    Instant,
    LiteralMismatchError,
    ParseError,
    ParseErrorKind,
    StrictDateError,
    TrailingInputError,
    compile_pattern,
    parse,
    parse_fields,
    parse_zoned,
)
from strictdate.diagnostics import DiagnosticCode


def _pattern(template: str) -> CompiledPattern:
    pattern, errors = compile_pattern(template)
    assert pattern is not None, errors
    return pattern


def _parse_ok(value: str, template: str) -> Instant:
    instant, errors = parse(value, _pattern(template))
    assert errors == ()
    assert instant is not None
    return instant


def _single_error(value: str, template: str) -> StrictDateError:
    instant, errors = parse(value, _pattern(template))
    assert instant is None
    assert len(errors) == 1
    return errors[0]


class TestParseBasics:
    """Test successful parses."""

    def test_day_month_year(self) -> None:
        """30/12/2019 is December 30 of calendar year 2019."""
        assert _parse_ok("30/12/2019", "dd/MM/yyyy") == Instant.of(2019, 12, 30)

    def test_no_week_year_shift(self) -> None:
        """December 30, 2019 falls in ISO week 1 of 2020; the year stays 2019."""
        instant = _parse_ok("30/12/2019", "dd/MM/yyyy")
        assert instant.isoformat().startswith("2019-12-30")

    def test_full_timestamp(self) -> None:
        """Time fields are combined with the date."""
        instant = _parse_ok("2020-02-29 23:59:58", "yyyy-MM-dd HH:mm:ss")
        assert instant == Instant.of(2020, 2, 29, 23, 59, 58)

    def test_time_fields_default_to_zero(self) -> None:
        """Missing hour, minute and second are midnight."""
        assert _parse_ok("2020-01-02", "yyyy-MM-dd") == Instant.of(2020, 1, 2)

    def test_variable_width_fields(self) -> None:
        """Single-letter fields accept one or more digits."""
        assert _parse_ok("1/2/2020", "d/M/y") == Instant.of(2020, 2, 1)
        assert _parse_ok("10/12/7", "d/M/y") == Instant.of(7, 12, 10)

    def test_compact_exact_fields(self) -> None:
        """Exact widths split digits without separators."""
        instant = _parse_ok("20200229T1230", "yyyyMMdd'T'HHmm")
        assert instant == Instant.of(2020, 2, 29, 12, 30)

    def test_quoted_literal_letters(self) -> None:
        """Quoted letters are matched as text."""
        assert _parse_ok("Day 5 of 3, 2021", "'Day' d 'of' M, y") == Instant.of(2021, 3, 5)


class TestSubsecondFidelity:
    """Fractions keep every digit the pattern declares."""

    def test_five_digit_fraction(self) -> None:
        """.23879 is 238_790_000 ns, not 238 ms."""
        instant = _parse_ok(
            "2019-12-30T15:26:22.23879Z", "yyyy-MM-dd'T'HH:mm:ss.SSSSS'Z'"
        )
        assert instant == Instant.of(2019, 12, 30, 15, 26, 22, 238_790_000)
        assert instant.nanosecond == 238_790_000

    @pytest.mark.parametrize(
        ("fraction", "nanos"),
        [
            ("1", 100_000_000),
            ("05", 50_000_000),
            ("000001", 1_000),
            ("123456789", 123_456_789),
        ],
    )
    def test_fraction_scaling(self, fraction: str, nanos: int) -> None:
        """Fractions are scaled by their digit count without rounding."""
        template = "yyyy-MM-dd ss." + "S" * len(fraction)
        instant = _parse_ok(f"2020-01-01 00.{fraction}", template)
        assert instant.nanosecond == nanos

    def test_fraction_digit_count_is_exact(self) -> None:
        """SSS requires three digits; two is an underflow."""
        error = _single_error("2020-01-01 00.12", "yyyy-MM-dd ss.SSS")
        assert isinstance(error, FieldUnderflowError)
        assert error.field_kind is FieldKind.SUBSECOND_FRACTION
        assert error.digits_found == 2


class TestLiteralMismatch:
    """Literals never bend."""

    def test_wrong_separator(self) -> None:
        """MM/dd/yyyy does not accept 2020/02/20."""
        error = _single_error("2020/02/20", "MM/dd/yyyy")
        assert isinstance(error, LiteralMismatchError)
        assert error.kind is ParseErrorKind.LITERAL_MISMATCH
        assert error.offset == 2
        assert error.expected == "/"
        assert error.received == "2"
        assert error.input_value == "2020/02/20"

    def test_end_of_input(self) -> None:
        """Running out of input before a literal reports end of input."""
        error = _single_error("30/12", "dd/MM/yyyy")
        assert isinstance(error, LiteralMismatchError)
        assert error.offset == 5
        assert error.received == ""
        assert error.diagnostic is not None
        assert "end of input" in error.diagnostic.message

    def test_offset_of_first_differing_character(self) -> None:
        """Multi-character literals report the first character that differs."""
        error = _single_error("2020-01-01Tx12", "yyyy-MM-dd'T:'HH")
        assert isinstance(error, LiteralMismatchError)
        assert error.offset == 11
        assert error.expected == "T:"
        assert error.received == "x"

    def test_exact_year_does_not_absorb_digits(self) -> None:
        """yyyy takes four digits; a fifth meets the separator."""
        error = _single_error("20201-01-01", "yyyy-MM-dd")
        assert isinstance(error, LiteralMismatchError)
        assert error.offset == 4

    def test_variable_width_stops_at_two_digits(self) -> None:
        """M reads at most two digits."""
        error = _single_error("1/123/2020", "d/M/y")
        assert isinstance(error, LiteralMismatchError)
        assert error.offset == 4


class TestFieldUnderflow:
    """Fields need their digits, ASCII only."""

    def test_missing_leading_zero(self) -> None:
        """dd requires two digits."""
        error = _single_error("1/12/2019", "dd/MM/yyyy")
        assert isinstance(error, FieldUnderflowError)
        assert error.kind is ParseErrorKind.FIELD_UNDERFLOW
        assert error.field_kind is FieldKind.DAY_OF_MONTH
        assert error.offset == 0
        assert error.digits_found == 1

    def test_non_ascii_digits_rejected(self) -> None:
        """Arabic-Indic digits are not accepted."""
        error = _single_error("٣٠/12/2019", "dd/MM/yyyy")
        assert isinstance(error, FieldUnderflowError)
        assert error.digits_found == 0

    def test_fullwidth_digits_rejected(self) -> None:
        """Fullwidth digits are not accepted."""
        error = _single_error("２０２０-01-01", "yyyy-MM-dd")
        assert isinstance(error, FieldUnderflowError)
        assert error.field_kind is FieldKind.YEAR_OF_ERA

    def test_sign_not_accepted_in_numeric_field(self) -> None:
        """Numeric fields do not take signs."""
        error = _single_error("-1/1/2020", "d/M/y")
        assert isinstance(error, FieldUnderflowError)

    def test_underflow_diagnostic(self) -> None:
        """The diagnostic names the field and the digit requirement."""
        error = _single_error("2020-1-01", "yyyy-MM-dd")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_FIELD_UNDERFLOW
        assert error.diagnostic.field_kind == "month"
        assert error.diagnostic.expected == "2 digit(s)"


class TestTrailingInput:
    """The whole input must be consumed."""

    def test_trailing_space(self) -> None:
        """A trailing space is an error."""
        error = _single_error("30/12/2019 ", "dd/MM/yyyy")
        assert isinstance(error, TrailingInputError)
        assert error.kind is ParseErrorKind.TRAILING_INPUT
        assert error.offset == 10
        assert error.remainder == " "

    def test_trailing_zone(self) -> None:
        """An unexpected zone designator is not ignored."""
        error = _single_error("2020-01-01T10:00Z", "yyyy-MM-dd'T'HH:mm")
        assert isinstance(error, TrailingInputError)
        assert error.remainder == "Z"


class TestInvalidInput:
    """Non-string input is reported, not raised."""

    @pytest.mark.parametrize("value", [None, 20200101, b"2020-01-01"])
    def test_non_string(self, value: object) -> None:
        """Non-strings produce a ParseError of kind INVALID_INPUT."""
        instant, errors = parse(value, _pattern("yyyy-MM-dd"))  # type: ignore[arg-type]
        assert instant is None
        assert len(errors) == 1
        error = errors[0]
        assert type(error) is ParseError
        assert error.kind is ParseErrorKind.INVALID_INPUT
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_INPUT_NOT_STRING

    def test_empty_input(self) -> None:
        """Empty input underflows the first field."""
        assert isinstance(_single_error("", "yyyy-MM-dd"), FieldUnderflowError)


class TestCalendarValidation:
    """Syntactically valid input must still be a real date-time."""

    def test_april_31(self) -> None:
        """April has 30 days."""
        error = _single_error("31/04/2020", "dd/MM/yyyy")
        assert isinstance(error, CalendarRangeError)
        assert error.field_kind is FieldKind.DAY_OF_MONTH
        assert error.value == 31
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CALENDAR_DAY_OUT_OF_MONTH
        assert error.diagnostic.hint == "April 2020 has 30 days"

    def test_leap_day(self) -> None:
        """February 29 exists in 2020 but not 2021."""
        assert _parse_ok("2020-02-29", "yyyy-MM-dd") == Instant.of(2020, 2, 29)
        error = _single_error("2021-02-29", "yyyy-MM-dd")
        assert isinstance(error, CalendarRangeError)
        assert error.value == 29

    def test_century_leap_rules(self) -> None:
        """1900 is not a leap year; 2000 is."""
        assert isinstance(_single_error("1900-02-29", "yyyy-MM-dd"), CalendarRangeError)
        assert _parse_ok("2000-02-29", "yyyy-MM-dd") == Instant.of(2000, 2, 29)

    def test_no_carry_into_next_month(self) -> None:
        """February 30 is an error, not March 1 or 2."""
        error = _single_error("2020-02-30", "yyyy-MM-dd")
        assert isinstance(error, CalendarRangeError)

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("2020-13-01 00:00:00", FieldKind.MONTH_OF_YEAR),
            ("2020-00-01 00:00:00", FieldKind.MONTH_OF_YEAR),
            ("2020-01-00 00:00:00", FieldKind.DAY_OF_MONTH),
            ("2020-01-01 24:00:00", FieldKind.HOUR_24),
            ("2020-01-01 00:60:00", FieldKind.MINUTE),
            ("2020-01-01 00:00:60", FieldKind.SECOND),
            ("0000-01-01 00:00:00", FieldKind.YEAR_OF_ERA),
        ],
    )
    def test_field_ranges(self, value: str, kind: FieldKind) -> None:
        """Each field is range-checked; no leap seconds, no hour 24."""
        error = _single_error(value, "yyyy-MM-dd HH:mm:ss")
        assert isinstance(error, CalendarRangeError)
        assert error.field_kind is kind
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CALENDAR_VALUE_OUT_OF_RANGE

    def test_all_violations_collected(self) -> None:
        """Every out-of-range field is reported."""
        instant, errors = parse("32/13/2020 25:61", _pattern("dd/MM/yyyy HH:mm"))
        assert instant is None
        kinds = {e.field_kind for e in errors if isinstance(e, CalendarRangeError)}
        assert kinds == {
            FieldKind.DAY_OF_MONTH,
            FieldKind.MONTH_OF_YEAR,
            FieldKind.HOUR_24,
            FieldKind.MINUTE,
        }

    def test_missing_date_fields(self) -> None:
        """A time-only pattern cannot produce an instant."""
        instant, errors = parse("12:30", _pattern("HH:mm"))
        assert instant is None
        assert len(errors) == 3
        for error in errors:
            assert isinstance(error, CalendarRangeError)
            assert error.value is None
            assert error.diagnostic is not None
            assert error.diagnostic.code is DiagnosticCode.CALENDAR_FIELD_MISSING

    def test_error_span_points_at_field(self) -> None:
        """Calendar errors carry the input and the field's position."""
        error = _single_error("2020-04-31", "yyyy-MM-dd")
        assert error.diagnostic is not None
        assert error.diagnostic.source == "2020-04-31"
        assert error.diagnostic.span is not None
        assert (error.diagnostic.span.start, error.diagnostic.span.end) == (8, 10)


class TestZoneFields:
    """Zone offsets in each style."""

    @pytest.mark.parametrize(
        ("template", "text", "minutes"),
        [
            ("Z", "+0530", 330),
            ("Z", "-0800", -480),
            ("ZZZZ", "GMT", 0),
            ("ZZZZ", "GMT-05:00", -300),
            ("ZZZZZ", "Z", 0),
            ("ZZZZZ", "+01:00", 60),
            ("X", "Z", 0),
            ("X", "+05", 300),
            ("X", "-0330", -210),
            ("XX", "+0100", 60),
            ("XXX", "-09:30", -570),
            ("XXXX", "Z", 0),
            ("XXXXX", "+14:00", 840),
        ],
    )
    def test_zone_styles(self, template: str, text: str, minutes: int) -> None:
        """Each style reads its own textual shape."""
        pattern = _pattern("yyyy-MM-dd HH:mm " + template)
        zoned, errors = parse_zoned(f"2020-06-15 12:00 {text}", pattern)
        assert errors == ()
        assert zoned is not None
        assert zoned.offset_minutes == minutes
        assert zoned.wall_clock == Instant.of(2020, 6, 15, 12)

    @pytest.mark.parametrize(
        ("template", "text"),
        [
            ("Z", "Z"),
            ("Z", "+05:30"),
            ("ZZZZ", "+01:00"),
            ("XXX", "+0100"),
            ("XX", "+01:00"),
            ("XXX", "+1:00"),
            ("XXX", "−01:00"),
            ("X", "+"),
        ],
    )
    def test_malformed_zone(self, template: str, text: str) -> None:
        """Text of the wrong shape is a zone underflow."""
        pattern = _pattern("yyyy-MM-dd HH:mm " + template)
        instant, errors = parse(f"2020-06-15 12:00 {text}", pattern)
        assert instant is None
        error = errors[0]
        assert isinstance(error, (FieldUnderflowError, TrailingInputError))
        if isinstance(error, FieldUnderflowError):
            assert error.field_kind is FieldKind.ZONE_OFFSET
            assert error.offset == 17

    def test_parse_keeps_wall_clock(self) -> None:
        """parse() validates the zone but returns the wall clock."""
        instant = _parse_ok("2020-01-01T10:00+02:00", "yyyy-MM-dd'T'HH:mmXXX")
        assert instant == Instant.of(2020, 1, 1, 10)

    def test_parse_zoned_applies_offset(self) -> None:
        """parse_zoned() returns the UTC instant."""
        zoned, errors = parse_zoned("2020-01-01T10:00+02:00", _pattern("yyyy-MM-dd'T'HH:mmXXX"))
        assert errors == ()
        assert zoned is not None
        assert zoned.instant == Instant.of(2020, 1, 1, 8)
        assert zoned.offset_minutes == 120

    def test_parse_zoned_crosses_midnight(self) -> None:
        """Negative offsets move the UTC instant to the next day."""
        zoned, _ = parse_zoned("2019-12-31 23:30 -0100", _pattern("yyyy-MM-dd HH:mm Z"))
        assert zoned is not None
        assert zoned.instant == Instant.of(2020, 1, 1, 0, 30)

    def test_parse_zoned_default_offset(self) -> None:
        """Patterns without a zone use the default offset."""
        zoned, errors = parse_zoned(
            "2020-01-01 10:00", _pattern("yyyy-MM-dd HH:mm"), default_offset_minutes=60
        )
        assert errors == ()
        assert zoned is not None
        assert zoned.instant == Instant.of(2020, 1, 1, 9)
        assert zoned.offset_minutes == 60

    @pytest.mark.parametrize("text", ["+19:00", "-18:01", "+05:60"])
    def test_offset_out_of_range(self, text: str) -> None:
        """Offsets beyond 18:00 or with 60+ minutes are calendar errors."""
        error = _single_error(f"2020-01-01 00:00{text}", "yyyy-MM-dd HH:mmXXX")
        assert isinstance(error, CalendarRangeError)
        assert error.field_kind is FieldKind.ZONE_OFFSET
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CALENDAR_OFFSET_OUT_OF_RANGE

    def test_offset_at_limit(self) -> None:
        """Exactly 18:00 is accepted."""
        _parse_ok("2020-01-01 00:00-18:00", "yyyy-MM-dd HH:mmXXX")

    def test_parse_zoned_leaves_year_range(self) -> None:
        """Applying the offset may not move the instant before year 1."""
        zoned, errors = parse_zoned("0001-01-01 00:00+01:00", _pattern("yyyy-MM-dd HH:mmXXX"))
        assert zoned is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.CALENDAR_INSTANT_OUT_OF_RANGE

    def test_parse_zoned_reports_parse_errors(self) -> None:
        """Parse errors pass through parse_zoned() unchanged."""
        zoned, errors = parse_zoned("2020/01/01", _pattern("yyyy-MM-dd"))
        assert zoned is None
        assert isinstance(errors[0], LiteralMismatchError)


class TestParseFields:
    """Test raw field extraction."""

    def test_fields_record_offsets_and_digits(self) -> None:
        """Each field records value, digit count and offset."""
        fields, errors = parse_fields("5/12/2020 07.050", _pattern("d/MM/yyyy HH.SSS"))
        assert errors == ()
        assert fields is not None
        assert len(fields) == 5
        day = fields.get(FieldKind.DAY_OF_MONTH)
        assert day is not None
        assert (day.value, day.digits, day.offset) == (5, 1, 0)
        fraction = fields.get(FieldKind.SUBSECOND_FRACTION)
        assert fraction is not None
        assert (fraction.value, fraction.digits, fraction.offset) == (50, 3, 13)
        assert FieldKind.MINUTE not in fields
        assert fields.value(FieldKind.MINUTE, 0) == 0

    def test_fields_are_unvalidated(self) -> None:
        """parse_fields() does not range-check."""
        fields, errors = parse_fields("99/99/0000", _pattern("dd/MM/yyyy"))
        assert errors == ()
        assert fields is not None
        assert fields.value(FieldKind.MONTH_OF_YEAR) == 99

    def test_zone_parts(self) -> None:
        """Zone fields keep sign, hours and minutes."""
        fields, _ = parse_fields("-05:30", _pattern("XXX"))
        assert fields is not None
        zone = fields.get(FieldKind.ZONE_OFFSET)
        assert zone is not None
        assert zone.value == -330
        assert zone.parts == (-1, 5, 30)
        assert zone.digits == 6


class TestParseProperties:
    """Property-based tests for parse()."""

    @given(value=st.text(max_size=30))
    def test_never_raises(self, value: str) -> None:
        """PROPERTY: parse returns a result or errors, never both."""
        instant, errors = parse(value, _pattern("yyyy-MM-dd'T'HH:mm:ss.SSSXXX"))
        assert (instant is None) == bool(errors)
        for error in errors:
            assert isinstance(error, StrictDateError)

    @given(
        year=st.integers(min_value=1, max_value=9999),
        month=st.integers(min_value=1, max_value=12),
        day=st.integers(min_value=1, max_value=31),
    )
    def test_accepts_exactly_real_dates(self, year: int, month: int, day: int) -> None:
        """PROPERTY: A date parses iff Instant.of() accepts it."""
        instant, errors = parse(f"{year:04d}-{month:02d}-{day:02d}", _pattern("yyyy-MM-dd"))
        try:
            expected: Instant | None = Instant.of(year, month, day)
        except ValueError:
            expected = None
        assert instant == expected
        assert bool(errors) == (expected is None)
