"""Strict parsing: input text to Instant values.

- Functions NEVER raise exceptions - errors are returned in tuple
- No leniency: no skipped separators, no carried overflow, no guessed century

Public API:
    Parsing Functions:
        parse_fields - Returns tuple[ParsedFields | None, tuple[ParseError, ...]]
        parse - Returns tuple[Instant | None, tuple[StrictDateError, ...]]
        parse_zoned - Returns tuple[ZonedInstant | None, tuple[StrictDateError, ...]]

    Type Guards:
        is_valid_instant - TypeIs guard for Instant (not None)
        is_valid_pattern - TypeIs guard for CompiledPattern (not None)

Python 3.13+. Zero external dependencies.
"""

from .fields import ParsedField, ParsedFields
from .guards import is_valid_instant, is_valid_pattern
from .parser import ZonedInstant, parse, parse_fields, parse_zoned

__all__ = [
    # Field containers
    "ParsedField",
    "ParsedFields",
    "ZonedInstant",
    # Type guards
    "is_valid_instant",
    "is_valid_pattern",
    # Parsing functions
    "parse",
    "parse_fields",
    "parse_zoned",
]
