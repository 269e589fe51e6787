"""Tests for diagnostic codes, templates and rendering."""

import json

import pytest

from strictdate import (
    InvalidPatternError,
    LiteralMismatchError,
    StrictDateError,
    compile_pattern,
    parse,
)
from strictdate.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)


class TestDiagnosticCode:
    """Test code numbering and categories."""

    def test_codes_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.PATTERN_WEEK_BASED_YEAR, ErrorCategory.PATTERN),
            (DiagnosticCode.PARSE_LITERAL_MISMATCH, ErrorCategory.PARSE),
            (DiagnosticCode.CALENDAR_DAY_OUT_OF_MONTH, ErrorCategory.CALENDAR),
            (DiagnosticCode.FORMAT_UNSUPPORTED_FIELD, ErrorCategory.FORMAT),
        ],
    )
    def test_category(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        """Categories follow the thousands block."""
        assert code.category is category


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_negative_start(self) -> None:
        """Negative start raises ValueError."""
        with pytest.raises(ValueError, match="start"):
            SourceSpan(-1, 0)

    def test_end_before_start(self) -> None:
        """End before start raises ValueError."""
        with pytest.raises(ValueError, match="end"):
            SourceSpan(5, 4)


class TestFormatter:
    """Test DiagnosticFormatter output styles."""

    @staticmethod
    def _mismatch() -> Diagnostic:
        return ErrorTemplate.literal_mismatch("2020/02/20", 2, "/", "2")

    def test_rust_style(self) -> None:
        """Rust style shows the input with a caret under the offset."""
        text = DiagnosticFormatter().format(self._mismatch())
        lines = text.splitlines()
        assert lines[0] == "error[PARSE_LITERAL_MISMATCH]: Expected '/' at offset 2, found '2'"
        assert lines[1] == "  --> offset 2"
        assert lines[2] == "   | 2020/02/20"
        assert lines[3] == "   |   ^"
        assert "  = expected: '/'" in lines
        assert any(line.startswith("  = help: ") for line in lines)

    def test_simple_style(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self._mismatch()) == (
            "PARSE_LITERAL_MISMATCH: Expected '/' at offset 2, found '2'"
        )

    def test_json_style(self) -> None:
        """JSON style carries code, category and span."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._mismatch()))
        assert data["code"] == "PARSE_LITERAL_MISMATCH"
        assert data["code_value"] == 2001
        assert data["category"] == "parse"
        assert (data["start"], data["end"]) == (2, 3)

    def test_control_characters_escaped(self) -> None:
        """Echoed input cannot inject new lines."""
        diagnostic = ErrorTemplate.trailing_input("2020\nFAKE", 4)
        text = DiagnosticFormatter().format(diagnostic)
        assert "\\n" in text
        assert "\nFAKE" not in text

    def test_caret_aligned_after_control_characters(self) -> None:
        """The caret sits under the offending character after escaping."""
        diagnostic = ErrorTemplate.literal_mismatch("a\tb/", 3, "-", "/")
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[2] == "   | a\\tb/"
        assert lines[3].index("^") == lines[2].index("/")

    def test_long_source_is_windowed(self) -> None:
        """Only a window of a long input is echoed around the caret."""
        value = "2020-01-01" + "x" * 1_000_000
        diagnostic = ErrorTemplate.trailing_input(value, 10)
        text = DiagnosticFormatter().format(diagnostic)
        assert len(text) < 1_000
        lines = text.splitlines()
        assert lines[2].startswith("   | 2020-01-01x")
        assert lines[2].endswith("...")
        assert lines[3].index("^") == lines[2].index("x")
        assert "more characters" in diagnostic.message

    def test_window_elides_leading_input(self) -> None:
        """Input far before the offset is elided too."""
        value = "y" * 500 + "/"
        diagnostic = ErrorTemplate.literal_mismatch(value, 500, "-", "/")
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[2].startswith("   | ...y")
        assert lines[2].endswith("/")
        assert lines[3].index("^") == lines[2].index("/")

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long content."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(self._mismatch()).endswith("...")

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.pattern_empty()
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1


class TestErrors:
    """Test exception classes carry their diagnostics."""

    def test_str_is_rendered_diagnostic(self) -> None:
        """str(error) is the Rust-style rendering."""
        pattern, _ = compile_pattern("MM/dd/yyyy")
        assert pattern is not None
        _, errors = parse("2020/02/20", pattern)
        error = errors[0]
        assert isinstance(error, LiteralMismatchError)
        assert str(error).startswith("error[PARSE_LITERAL_MISMATCH]")
        assert "   | 2020/02/20" in str(error)

    def test_long_input_error_is_bounded(self) -> None:
        """A huge non-matching input does not end up whole in the message."""
        pattern, _ = compile_pattern("yyyy-MM-dd")
        assert pattern is not None
        _, errors = parse("2020-01-01" + "9" * 100_000, pattern)
        assert len(str(errors[0])) < 1_000
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.source is not None

    def test_plain_message(self) -> None:
        """Errors may be built from plain strings."""
        error = StrictDateError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_errors_are_raisable(self) -> None:
        """Returned errors are still exceptions."""
        _, errors = compile_pattern("YYYY")
        with pytest.raises(InvalidPatternError, match="Week-based year"):
            raise errors[0]

    def test_day_out_of_month_hint(self) -> None:
        """The hint names the month and its length."""
        diagnostic = ErrorTemplate.day_out_of_month(2021, 2, 29, 28)
        assert diagnostic.message == "Day 29 is out of range for 2021-02"
        assert diagnostic.hint == "February 2021 has 28 days"
