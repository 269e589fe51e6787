"""Diagnostic system for strictdate errors.

Provides structured error diagnostics with codes, spans, hints, and
expected-versus-received details. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    CalendarRangeError,
    FieldUnderflowError,
    InvalidPatternError,
    LiteralMismatchError,
    ParseError,
    StrictDateError,
    TrailingInputError,
    UnsupportedFieldError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CalendarRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FieldUnderflowError",
    "InvalidPatternError",
    "LiteralMismatchError",
    "OutputFormat",
    "ParseError",
    "SourceSpan",
    "StrictDateError",
    "TrailingInputError",
    "UnsupportedFieldError",
]
