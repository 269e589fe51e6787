"""Core utilities shared across the pattern, parsing and formatting layers.

This package provides the foundation every other layer depends on. By
isolating these utilities here, we maintain a clean dependency graph:

    core <- instant <- pattern <- parsing / normalization <- formatting

Exports:
    is_leap_year, days_in_month: Proleptic Gregorian rules
    ymd_to_epoch_day, epoch_day_to_ymd: Epoch-day arithmetic
    BabelImportError: Raised when a named zone needs Babel and it is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available
from .calendar import days_in_month, epoch_day_to_ymd, is_leap_year, ymd_to_epoch_day

__all__ = [
    "BabelImportError",
    "days_in_month",
    "epoch_day_to_ymd",
    "is_babel_available",
    "is_leap_year",
    "ymd_to_epoch_day",
]
