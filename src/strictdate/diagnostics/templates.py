"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from strictdate.constants import MAX_ECHOED_INPUT_LENGTH

from .codes import Diagnostic, DiagnosticCode, SourceSpan

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _span(offset: int, length: int) -> SourceSpan | None:
    if offset < 0:
        return None
    return SourceSpan(start=offset, end=offset + max(length, 0))


def _excerpt(text: str) -> str:
    """Quote input text, eliding anything past MAX_ECHOED_INPUT_LENGTH."""
    if len(text) <= MAX_ECHOED_INPUT_LENGTH:
        return repr(text)
    elided = len(text) - MAX_ECHOED_INPUT_LENGTH
    return f"{text[:MAX_ECHOED_INPUT_LENGTH]!r} (+{elided} more characters)"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # PATTERN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def pattern_not_string(received_type: str) -> Diagnostic:
        """Template passed to the compiler is not a string."""
        msg = f"Pattern template must be a string, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_STRING,
            message=msg,
            expected="str",
            received=received_type,
        )

    @staticmethod
    def pattern_empty() -> Diagnostic:
        """Template is the empty string."""
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY,
            message="Pattern template is empty",
            hint="A pattern needs at least a year, month and day field to parse",
        )

    @staticmethod
    def pattern_too_long(length: int, max_length: int) -> Diagnostic:
        """Template exceeds the maximum supported length.

        Args:
            length: Actual template length
            max_length: Maximum allowed length
        """
        msg = f"Pattern template is {length} characters long (maximum {max_length})"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
            expected=f"<= {max_length} characters",
            received=str(length),
        )

    @staticmethod
    def pattern_unknown_letter(template: str, offset: int, run: str) -> Diagnostic:
        """Unrecognized pattern letter.

        Args:
            template: The template being compiled
            offset: Offset of the letter run
            run: The letter run (e.g. "EEE")
        """
        msg = f"Unrecognized pattern letter '{run[0]}' at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_LETTER,
            message=msg,
            span=_span(offset, len(run)),
            hint="Supported letters: y M d H m s S Z X; quote literal text as 'text'",
            received=run,
            source=template,
        )

    @staticmethod
    def pattern_week_based_year(template: str, offset: int, run: str) -> Diagnostic:
        """Week-based-year letter Y used.

        Args:
            template: The template being compiled
            offset: Offset of the letter run
            run: The letter run (e.g. "YYYY")
        """
        msg = f"Week-based year '{run}' at offset {offset} is not supported"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_WEEK_BASED_YEAR,
            message=msg,
            span=_span(offset, len(run)),
            hint=(
                f"Use '{'y' * len(run)}' for the calendar year; the week-based year "
                "differs from it in the last days of December and first days of January"
            ),
            expected="y",
            received=run,
            source=template,
        )

    @staticmethod
    def pattern_unsupported_width(
        template: str,
        offset: int,
        run: str,
        field_kind: str,
        allowed: str,
    ) -> Diagnostic:
        """Letter run has a width the field does not support.

        Args:
            template: The template being compiled
            offset: Offset of the letter run
            run: The letter run (e.g. "yy")
            field_kind: Field the letter denotes
            allowed: Human-readable list of supported forms
        """
        msg = f"Unsupported width {len(run)} for {field_kind} field '{run}' at offset {offset}"
        hint = f"Supported forms: {allowed}"
        if field_kind == "year" and len(run) == 2:
            hint = "Two-digit years need a century guess; use 'yyyy'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNSUPPORTED_WIDTH,
            message=msg,
            span=_span(offset, len(run)),
            hint=hint,
            field_kind=field_kind,
            expected=allowed,
            received=run,
            source=template,
        )

    @staticmethod
    def pattern_unterminated_quote(template: str, offset: int) -> Diagnostic:
        """Quoted literal section never closed.

        Args:
            template: The template being compiled
            offset: Offset of the opening quote
        """
        msg = f"Unterminated quoted literal starting at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            span=_span(offset, len(template) - offset),
            hint="Close literal text with a single quote; write '' for a quote character",
            field_kind="quote",
            expected="'",
            source=template,
        )

    @staticmethod
    def pattern_duplicate_field(
        template: str,
        offset: int,
        run: str,
        field_kind: str,
        first_offset: int,
    ) -> Diagnostic:
        """Field kind appears more than once.

        Args:
            template: The template being compiled
            offset: Offset of the repeated run
            run: The repeated letter run
            field_kind: The duplicated field
            first_offset: Offset of the first occurrence
        """
        msg = (
            f"Field '{field_kind}' at offset {offset} repeats the field "
            f"already defined at offset {first_offset}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_DUPLICATE_FIELD,
            message=msg,
            span=_span(offset, len(run)),
            hint="Each field may appear once; two values for one field would conflict",
            field_kind=field_kind,
            received=run,
            source=template,
        )

    @staticmethod
    def pattern_ambiguous_adjacent_fields(
        template: str,
        offset: int,
        run: str,
        next_run: str,
    ) -> Diagnostic:
        """Variable-width field directly followed by another field.

        Args:
            template: The template being compiled
            offset: Offset of the variable-width run
            run: The variable-width letter run
            next_run: The run that follows it
        """
        msg = (
            f"Variable-width field '{run}' at offset {offset} is directly followed "
            f"by '{next_run}'; the boundary between them is ambiguous"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_AMBIGUOUS_ADJACENT_FIELDS,
            message=msg,
            span=_span(offset, len(run) + len(next_run)),
            hint=f"Use the fixed-width form '{run * 2}' or put a literal between the fields",
            received=run + next_run,
            source=template,
        )

    # =========================================================================
    # PARSE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def parse_input_not_string(received_type: str) -> Diagnostic:
        """Parse input is not a string."""
        msg = f"Input must be a string, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_NOT_STRING,
            message=msg,
            expected="str",
            received=received_type,
        )

    @staticmethod
    def literal_mismatch(value: str, offset: int, expected: str, received: str) -> Diagnostic:
        """Input does not contain the literal the pattern requires.

        Args:
            value: The input being parsed
            offset: Offset where the literal should start
            expected: The required literal text
            received: The input text found ("" at end of input)
        """
        found = repr(received) if received else "end of input"
        msg = f"Expected {expected!r} at offset {offset}, found {found}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            span=_span(offset, max(len(received), 1)),
            hint="Input must follow the pattern exactly; separators are never skipped",
            expected=repr(expected),
            received=found,
            source=value,
        )

    @staticmethod
    def field_underflow(
        value: str,
        offset: int,
        field_kind: str,
        required: str,
        found: int,
    ) -> Diagnostic:
        """Numeric field could not consume enough digits.

        Args:
            value: The input being parsed
            offset: Offset where the field starts
            field_kind: The field being consumed
            required: Human-readable digit requirement (e.g. "2", "1-4")
            found: Number of ASCII digits available
        """
        msg = f"Field '{field_kind}' needs {required} digit(s) at offset {offset}, found {found}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELD_UNDERFLOW,
            message=msg,
            span=_span(offset, max(found, 1)),
            hint="Only ASCII digits 0-9 are accepted; fixed-width fields need leading zeros",
            field_kind=field_kind,
            expected=f"{required} digit(s)",
            received=str(found),
            source=value,
        )

    @staticmethod
    def zone_offset_malformed(value: str, offset: int, shape: str) -> Diagnostic:
        """Zone offset text does not match the field's style.

        Args:
            value: The input being parsed
            offset: Offset where the zone field starts
            shape: Human-readable accepted shapes
        """
        msg = f"Malformed zone offset at offset {offset}, expected {shape}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELD_UNDERFLOW,
            message=msg,
            span=_span(offset, 1),
            hint="Zone offsets use an ASCII sign and two-digit hours and minutes",
            field_kind="zone",
            expected=shape,
            received=value[offset : offset + 6] or "end of input",
            source=value,
        )

    @staticmethod
    def trailing_input(value: str, offset: int) -> Diagnostic:
        """Input continues after the pattern is exhausted.

        Args:
            value: The input being parsed
            offset: Offset of the first unconsumed character
        """
        remainder = value[offset:]
        quoted = _excerpt(remainder)
        msg = f"Unexpected trailing input {quoted} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            span=_span(offset, len(remainder)),
            hint="The whole input must be consumed by the pattern",
            received=quoted,
            source=value,
        )

    # =========================================================================
    # CALENDAR ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def field_missing(field_kind: str) -> Diagnostic:
        """Required calendar field absent from the parsed input."""
        msg = f"Field '{field_kind}' is required to build a calendar date"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_FIELD_MISSING,
            message=msg,
            hint="Patterns used for parsing must contain year, month and day fields",
            field_kind=field_kind,
        )

    @staticmethod
    def value_out_of_range(
        field_kind: str,
        value: int,
        low: int,
        high: int,
        *,
        source: str | None = None,
        offset: int = -1,
        length: int = 0,
    ) -> Diagnostic:
        """Field value outside its fixed range.

        Args:
            field_kind: The offending field
            value: The parsed value
            low: Inclusive lower bound
            high: Inclusive upper bound
            source: Input text the value came from (optional)
            offset: Offset of the value in source (-1 if unknown)
            length: Number of characters the value occupied
        """
        msg = f"Value {value} for field '{field_kind}' is out of range [{low}, {high}]"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_VALUE_OUT_OF_RANGE,
            message=msg,
            span=_span(offset, length),
            hint="Fields are range-checked independently and never carried into other fields",
            field_kind=field_kind,
            expected=f"{low}..{high}",
            received=str(value),
            source=source,
        )

    @staticmethod
    def day_out_of_month(
        year: int,
        month: int,
        day: int,
        days: int,
        *,
        source: str | None = None,
        offset: int = -1,
        length: int = 0,
    ) -> Diagnostic:
        """Day exceeds the length of its month.

        Args:
            year: Calendar year
            month: Month (1-12)
            day: Parsed day
            days: Number of days in that month
            source: Input text the value came from (optional)
            offset: Offset of the day in source (-1 if unknown)
            length: Number of characters the day occupied
        """
        msg = f"Day {day} is out of range for {year:04d}-{month:02d}"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_DAY_OUT_OF_MONTH,
            message=msg,
            span=_span(offset, length),
            hint=f"{_MONTH_NAMES[month]} {year} has {days} days",
            field_kind="day",
            expected=f"1..{days}",
            received=str(day),
            source=source,
        )

    @staticmethod
    def offset_out_of_range(offset_text: str, max_text: str) -> Diagnostic:
        """Zone offset beyond the supported bounds.

        Args:
            offset_text: The offending offset rendered as +HH:MM
            max_text: The bound rendered as HH:MM
        """
        msg = f"Zone offset {offset_text} is out of range [-{max_text}, +{max_text}]"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_OFFSET_OUT_OF_RANGE,
            message=msg,
            hint="Minutes must be 00-59 and the total offset at most 18 hours",
            field_kind="zone",
            expected=f"-{max_text}..+{max_text}",
            received=offset_text,
        )

    @staticmethod
    def instant_out_of_range(description: str, min_year: int, max_year: int) -> Diagnostic:
        """Instant (possibly after applying an offset) leaves the year range.

        Args:
            description: What was being computed
            min_year: First supported year
            max_year: Last supported year
        """
        msg = f"{description} falls outside years {min_year:04d}..{max_year:04d}"
        return Diagnostic(
            code=DiagnosticCode.CALENDAR_INSTANT_OUT_OF_RANGE,
            message=msg,
            hint="Applying a zone offset near the range limits can cross a year boundary",
            field_kind="year",
            expected=f"{min_year}..{max_year}",
        )

    # =========================================================================
    # FORMAT ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def unsupported_field(field_kind: str) -> Diagnostic:
        """Formatter has no rendering for a field kind."""
        msg = f"Field '{field_kind}' cannot be derived from an instant"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_UNSUPPORTED_FIELD,
            message=msg,
            field_kind=field_kind,
        )

    @staticmethod
    def not_an_instant(received_type: str) -> Diagnostic:
        """Value passed to the formatter is not an Instant."""
        msg = f"Expected an Instant to format, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_NOT_AN_INSTANT,
            message=msg,
            hint="Build one with Instant.of(), Instant.from_datetime() or parse()",
            expected="Instant",
            received=received_type,
        )
