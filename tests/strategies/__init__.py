"""Hypothesis strategies for strictdate property-based testing.

Usage:
    from tests.strategies import instants, round_trip_templates
    from tests.strategies.temporal import instants_at_resolution, zone_offsets

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - instant_by_boundary
"""

from .temporal import (
    ROUND_TRIP_TEMPLATES,
    calendar_dates,
    instant_by_boundary,
    instants,
    instants_at_resolution,
    round_trip_templates,
    zone_offsets,
)

__all__ = [
    "ROUND_TRIP_TEMPLATES",
    "calendar_dates",
    "instant_by_boundary",
    "instants",
    "instants_at_resolution",
    "round_trip_templates",
    "zone_offsets",
]
