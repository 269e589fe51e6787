"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization by pipeline stage.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"pattern"``, ``"parse"``, etc.).

    Categories:
        PATTERN: Template rejected by the compiler
        PARSE: Input does not match the compiled pattern
        CALENDAR: Parsed fields do not form a valid date-time
        FORMAT: Instant cannot be rendered through the pattern
    """

    PATTERN = "pattern"
    PARSE = "parse"
    CALENDAR = "calendar"
    FORMAT = "format"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (template compilation)
        2000-2999: Parse errors (input/pattern mismatch)
        3000-3999: Calendar errors (range validation)
        4000-4999: Format errors (rendering)
    """

    # Pattern errors (1000-1999)
    PATTERN_NOT_STRING = 1001
    PATTERN_EMPTY = 1002
    PATTERN_TOO_LONG = 1003
    PATTERN_UNKNOWN_LETTER = 1004
    PATTERN_WEEK_BASED_YEAR = 1005
    PATTERN_UNSUPPORTED_WIDTH = 1006
    PATTERN_UNTERMINATED_QUOTE = 1007
    PATTERN_DUPLICATE_FIELD = 1008
    PATTERN_AMBIGUOUS_ADJACENT_FIELDS = 1009

    # Parse errors (2000-2999)
    PARSE_LITERAL_MISMATCH = 2001
    PARSE_FIELD_UNDERFLOW = 2002
    PARSE_TRAILING_INPUT = 2003
    PARSE_INPUT_NOT_STRING = 2004

    # Calendar errors (3000-3999)
    CALENDAR_FIELD_MISSING = 3001
    CALENDAR_VALUE_OUT_OF_RANGE = 3002
    CALENDAR_DAY_OUT_OF_MONTH = 3003
    CALENDAR_OFFSET_OUT_OF_RANGE = 3004
    CALENDAR_INSTANT_OUT_OF_RANGE = 3005

    # Format errors (4000-4999)
    FORMAT_UNSUPPORTED_FIELD = 4001
    FORMAT_NOT_AN_INSTANT = 4002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's thousands block."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.PATTERN
            case 2:
                return ErrorCategory.PARSE
            case 3:
                return ErrorCategory.CALENDAR
            case _:
                return ErrorCategory.FORMAT


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic within a template or input string.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything needed to
    diagnose a failure without re-running it.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending region of ``source`` (None when not positional)
        hint: Suggestion for fixing the error
        field_kind: Pattern field involved (e.g. "month")
        expected: What the pattern required at the failure point
        received: What was actually found
        source: Template or input text the span refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    field_kind: str | None = None
    expected: str | None = None
    received: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[PARSE_LITERAL_MISMATCH]: Expected '/' at offset 2, found '2'
              --> offset 2
               | 2020/02/20
               |   ^
              = expected: '/'
              = received: '2'
              = help: Input must follow the pattern exactly

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
