"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that named
time zones resolve with one consistent error message when Babel is missing.

Design Rationale:
    strictdate supports two installation modes:
    - Core: `pip install strictdate` (no external dependencies; fixed
      minute offsets and tzinfo objects only)
    - Named zones: `pip install strictdate[babel]` (IANA zone names resolved
      through babel.dates.get_timezone)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Zone-name lookups get a helpful error when Babel is missing

Usage Pattern:
    from strictdate.core.babel_compat import get_babel_dates

    def resolve(name: str) -> tzinfo:
        return get_babel_dates().get_timezone(name)  # BabelImportError if missing

Python 3.13+.
"""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from typing import Protocol

__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "get_babel_dates",
    "is_babel_available",
    "require_babel",
]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelDatesProtocol(Protocol):
    """Protocol for Babel dates module interface.

    Defines the subset of babel.dates API actually used by strictdate.
    Provides type safety without requiring full Babel type stubs.
    """

    def get_timezone(self, zone: str | tzinfo | None = None) -> tzinfo:
        """Look up a time zone by IANA name; LookupError if unknown."""
        ...
# pylint: enable=unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for time zone data. "
            "Install with: pip install strictdate[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_dates() -> BabelDatesProtocol:
    """Get the Babel dates module.

    Returns:
        The babel.dates module (typed via BabelDatesProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
