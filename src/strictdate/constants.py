"""Shared constants for strictdate.

This module provides centralized configuration constants used across the
pattern, parsing, normalization and formatting packages. Placing constants
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Time units: Nanosecond arithmetic for the canonical instant
- Calendar limits: Supported year range and zone offset bounds
- Pattern limits: Template size and field width constraints
- Diagnostic limits: How much input text an error message echoes
- Cache limits: Memory bounds for the compiled-pattern cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Time units
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_DAY",
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_OFFSET_HOURS",
    "MAX_OFFSET_MINUTES",
    # Pattern limits
    "MAX_TEMPLATE_LENGTH",
    "MAX_FRACTION_DIGITS",
    "MAX_YEAR_DIGITS",
    "ASCII_DIGITS",
    # Diagnostic limits
    "MAX_ECHOED_INPUT_LENGTH",
    "DIAGNOSTIC_CONTEXT_CHARS",
    # Cache limits
    "PATTERN_CACHE_SIZE",
]

# ============================================================================
# TIME UNITS
# ============================================================================

NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR

SECONDS_PER_DAY: int = 86_400

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Year range of the canonical instant. Patterns carry no sign or era, so a
# year is always a plain non-negative digit string; year 0 has no
# representation without an era and is excluded. The same range as
# datetime.date keeps Instant.to_datetime() total.
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# CLDR bounds zone offsets to +/-18:00.
MAX_OFFSET_HOURS: int = 18
MAX_OFFSET_MINUTES: int = MAX_OFFSET_HOURS * 60

# ============================================================================
# PATTERN LIMITS
# ============================================================================

# Maximum template length in characters.
# Real date patterns are well under 64 characters; anything longer is
# malformed or adversarial.
MAX_TEMPLATE_LENGTH: int = 256

# Nanosecond resolution: the fraction field accepts at most 9 digits.
MAX_FRACTION_DIGITS: int = 9

MAX_YEAR_DIGITS: int = 4

# Field digits are ASCII only; other Unicode digits never match.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Longest stretch of input quoted inside an error message.
MAX_ECHOED_INPUT_LENGTH: int = 64

# Characters of input shown on each side of the caret in Rust-style output.
DIAGNOSTIC_CONTEXT_CHARS: int = 32

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached compile results.
# Applications typically use a handful of fixed templates.
PATTERN_CACHE_SIZE: int = 128
