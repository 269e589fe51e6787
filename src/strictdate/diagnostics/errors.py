"""strictdate exception hierarchy with structured diagnostics.

The core API never raises these: compile_pattern(), parse() and
format_instant() return them in an error tuple next to the result, so a
failure can never be mistaken for a best-guess value. They are still
Exception subclasses so callers may raise them where that suits.

Python 3.13+. Zero external dependencies.
"""

from strictdate.enums import FieldKind, ParseErrorKind

from .codes import Diagnostic

__all__ = [
    "CalendarRangeError",
    "FieldUnderflowError",
    "InvalidPatternError",
    "LiteralMismatchError",
    "ParseError",
    "StrictDateError",
    "TrailingInputError",
    "UnsupportedFieldError",
]


class StrictDateError(Exception):
    """Base exception for all strictdate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StrictDateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPatternError(StrictDateError):
    """Template rejected at compile time.

    Attributes:
        template: The template being compiled
        offset: Character offset of the offending construct (-1 if the
            template as a whole is rejected)
    """

    def __init__(self, message: str | Diagnostic, *, template: str = "", offset: int = -1) -> None:
        super().__init__(message)
        self.template = template
        self.offset = offset


class ParseError(StrictDateError):
    """Input does not match the compiled pattern.

    Subclasses narrow the reason; ``kind`` mirrors the subclass so callers
    can dispatch on a value instead of a type.

    Attributes:
        kind: Failure reason
        input_value: The string that failed to parse
        offset: Character offset where matching failed
    """

    kind: ParseErrorKind = ParseErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        offset: int = 0,
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.offset = offset


class LiteralMismatchError(ParseError):
    """Input character differs from a pattern literal.

    Attributes:
        expected: The literal text the pattern requires
        received: The input text found instead ("" at end of input)
    """

    kind = ParseErrorKind.LITERAL_MISMATCH

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        offset: int = 0,
        expected: str = "",
        received: str = "",
    ) -> None:
        super().__init__(message, input_value=input_value, offset=offset)
        self.expected = expected
        self.received = received


class FieldUnderflowError(ParseError):
    """Field could not consume the digits it requires.

    Attributes:
        field_kind: The field being consumed
        digits_found: How many acceptable characters were available
    """

    kind = ParseErrorKind.FIELD_UNDERFLOW

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        offset: int = 0,
        field_kind: FieldKind,
        digits_found: int = 0,
    ) -> None:
        super().__init__(message, input_value=input_value, offset=offset)
        self.field_kind = field_kind
        self.digits_found = digits_found


class TrailingInputError(ParseError):
    """Input continues after the last pattern token.

    Attributes:
        remainder: The unconsumed input
    """

    kind = ParseErrorKind.TRAILING_INPUT

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        offset: int = 0,
    ) -> None:
        super().__init__(message, input_value=input_value, offset=offset)
        self.remainder = input_value[offset:]


class CalendarRangeError(StrictDateError):
    """Syntactically valid fields do not form a calendar date-time.

    Examples:
    - Day 31 in April
    - February 29 in a common year
    - Hour 24, minute 60, second 60

    Attributes:
        field_kind: The offending field (None for whole-instant range errors)
        value: The offending value (None when the field is missing)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        field_kind: FieldKind | None = None,
        value: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field_kind = field_kind
        self.value = value


class UnsupportedFieldError(StrictDateError):
    """Formatter cannot derive a field from the given instant.

    Attributes:
        field_kind: The field that could not be rendered (None when the
            value passed in is not an instant at all)
    """

    def __init__(self, message: str | Diagnostic, *, field_kind: FieldKind | None = None) -> None:
        super().__init__(message)
        self.field_kind = field_kind
