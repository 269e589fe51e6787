"""Type guard functions for result type narrowing.

compile_pattern(), parse() and decompose() return tuple[result | None, errors].
Type guards check the result component so mypy can narrow it without a
separate None check.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False.

Example:
    >>> from strictdate import compile_pattern, parse
    >>> from strictdate.parsing.guards import is_valid_instant, is_valid_pattern
    >>> pattern, errors = compile_pattern("yyyy-MM-dd")
    >>> if is_valid_pattern(pattern):
    ...     instant, errors = parse("2020-02-29", pattern)
    ...     if is_valid_instant(instant):
    ...         print(instant.isoformat())
    2020-02-29T00:00:00.000000000
"""

from typing import TypeIs

from strictdate.instant import Instant
from strictdate.pattern.tokens import CompiledPattern

__all__ = ["is_valid_instant", "is_valid_pattern"]


def is_valid_instant(value: object) -> TypeIs[Instant]:
    """Type guard: Check if a parse result is an Instant (not None).

    Instant validates its own range on construction, so any Instant is a
    real date-time.
    """
    return isinstance(value, Instant)


def is_valid_pattern(value: object) -> TypeIs[CompiledPattern]:
    """Type guard: Check if a compile result is a CompiledPattern (not None)."""
    return isinstance(value, CompiledPattern)
