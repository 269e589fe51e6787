"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from strictdate.constants import DIAGNOSTIC_CONTEXT_CHARS

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x1b": "\\x1b"})
_ELLIPSIS = "..."


def _escape(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


def _source_excerpt(source: str, span: SourceSpan) -> tuple[str, int, int]:
    """Cut the source down to a window around the span.

    Long inputs are elided on both sides so a diagnostic never echoes more
    than a few dozen characters. Column and width are measured on the
    escaped text, so the caret stays under the offending characters even
    when control characters before it expand to escape sequences.

    Returns:
        Tuple of (escaped line, caret column, caret width)
    """
    start = min(span.start, len(source))
    marked_end = min(span.end, len(source), start + 2 * DIAGNOSTIC_CONTEXT_CHARS)
    window_start = max(start - DIAGNOSTIC_CONTEXT_CHARS, 0)
    window_end = min(marked_end + DIAGNOSTIC_CONTEXT_CHARS, len(source))

    head = _ELLIPSIS if window_start > 0 else ""
    tail = _ELLIPSIS if window_end < len(source) else ""
    before = _escape(source[window_start:start])
    marked = _escape(source[start:marked_end])
    after = _escape(source[marked_end:window_end])
    return (f"{head}{before}{marked}{after}{tail}", len(head) + len(before), max(len(marked), 1))


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Renders Diagnostic objects into human-readable or machine-readable
    output. Input text echoed back into diagnostics has control characters
    escaped, so a hostile input cannot forge extra log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_TRAILING_INPUT: Unexpected trailing input 'Z' at offset 10
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[CALENDAR_DAY_OUT_OF_MONTH]: Day 31 is out of range for 2020-04
              --> offset 0
               | 31/04/2020
               | ^^
              = field: day
              = help: April 2020 has 30 days
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._clean(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span is not None:
            parts.append(f"  --> offset {diagnostic.span.start}")
            if diagnostic.source is not None:
                line, column, width = _source_excerpt(diagnostic.source, diagnostic.span)
                parts.append(f"   | {line}")
                parts.append(f"   | {' ' * column}{'^' * width}")

        if diagnostic.field_kind:
            parts.append(f"  = field: {diagnostic.field_kind}")

        if diagnostic.expected:
            parts.append(f"  = expected: {self._clean(diagnostic.expected)}")

        if diagnostic.received:
            parts.append(f"  = received: {self._clean(diagnostic.received)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            PARSE_FIELD_UNDERFLOW: Field 'month' needs 2 digits at offset 5, found 1
        """
        message = self._clean(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "PARSE_TRAILING_INPUT", "code_value": 2003, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span is not None:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.field_kind:
            data["field_kind"] = diagnostic.field_kind

        if diagnostic.expected:
            data["expected"] = self._maybe_sanitize(diagnostic.expected)

        if diagnostic.received:
            data["received"] = self._maybe_sanitize(diagnostic.received)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then apply sanitization."""
        return self._maybe_sanitize(_escape(text))

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
