"""strictdate - Strict, unambiguous date/time parsing and formatting.

Parses and formats calendar date-times through CLDR-style patterns without
the usual silent failures: no week-based year, no lenient carry of
overflowing fields, no truncation of fractional seconds to milliseconds.

Public API:
    compile_pattern - Template text to an immutable CompiledPattern
    parse - Text to Instant (wall clock)
    parse_zoned - Text to ZonedInstant (UTC instant plus offset)
    parse_fields - Text to raw ParsedFields (no calendar validation)
    normalize - ParsedFields to Instant
    decompose - Instant to CalendarFields at a UTC offset
    format_instant - Instant to text
    offset_minutes_for - Minutes, tzinfo or zone name to a UTC offset
    Instant - Nanoseconds since 1970-01-01T00:00:00, years 0001..9999

Every function returns tuple[result | None, tuple[error, ...]] and never
raises for bad input.

Exceptions:
    StrictDateError - Base exception class
    InvalidPatternError - Template rejected at compile time
    ParseError - Input does not match (LiteralMismatchError,
        FieldUnderflowError, TrailingInputError)
    CalendarRangeError - Fields do not form a calendar date-time
    UnsupportedFieldError - Formatter cannot render a field

Submodules:
    strictdate.diagnostics - Diagnostic codes, templates and rendering
    strictdate.core - Calendar arithmetic and the optional Babel bridge
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    CalendarRangeError,
    FieldUnderflowError,
    InvalidPatternError,
    LiteralMismatchError,
    ParseError,
    StrictDateError,
    TrailingInputError,
    UnsupportedFieldError,
)
from .enums import FieldKind, ParseErrorKind, ZoneStyle
from .formatting import format_instant, offset_minutes_for
from .instant import Instant
from .normalization import CalendarFields, decompose, normalize
from .parsing import (
    ParsedField,
    ParsedFields,
    ZonedInstant,
    is_valid_instant,
    is_valid_pattern,
    parse,
    parse_fields,
    parse_zoned,
)
from .pattern import CompiledPattern, FieldSpec, Literal, compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("strictdate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    # Errors
    "CalendarRangeError",
    "FieldUnderflowError",
    "InvalidPatternError",
    "LiteralMismatchError",
    "ParseError",
    "StrictDateError",
    "TrailingInputError",
    "UnsupportedFieldError",
    # Value types
    "CalendarFields",
    "CompiledPattern",
    "FieldKind",
    "FieldSpec",
    "Instant",
    "Literal",
    "ParseErrorKind",
    "ParsedField",
    "ParsedFields",
    "ZoneStyle",
    "ZonedInstant",
    # Functions
    "__version__",
    "compile_pattern",
    "decompose",
    "format_instant",
    "is_valid_instant",
    "is_valid_pattern",
    "normalize",
    "offset_minutes_for",
    "parse",
    "parse_fields",
    "parse_zoned",
]
