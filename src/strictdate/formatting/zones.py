"""Zone offset resolution: minutes, tzinfo objects or IANA zone names.

The formatter works with fixed minute offsets only. This module turns the
zone a caller has in hand into the offset in force at a given instant, so
daylight-saving rules stay with the zone provider.

Named zones are looked up through babel.dates.get_timezone and need the
optional Babel dependency (pip install strictdate[babel]).

Python 3.13+.
"""

import logging
from datetime import timedelta, tzinfo

from strictdate.constants import MAX_OFFSET_MINUTES
from strictdate.core.babel_compat import get_babel_dates, require_babel
from strictdate.instant import Instant

__all__ = ["offset_minutes_for"]

logger = logging.getLogger(__name__)

_SECONDS_PER_MINUTE = 60


def _check_minutes(minutes: int) -> int:
    if abs(minutes) > MAX_OFFSET_MINUTES:
        msg = f"UTC offset {minutes} min exceeds +/-{MAX_OFFSET_MINUTES} min"
        raise ValueError(msg)
    return minutes


def _offset_from_tzinfo(zone: tzinfo, instant: Instant) -> int:
    try:
        local = instant.to_datetime(truncate=True).astimezone(zone)
    except OverflowError as exc:
        msg = f"Cannot resolve zone {zone} at {instant}: outside the datetime range"
        raise ValueError(msg) from exc

    delta: timedelta | None = local.utcoffset()
    if delta is None:
        msg = f"Zone {zone} has no UTC offset at {instant}"
        raise ValueError(msg)
    seconds = int(delta.total_seconds())
    if seconds % _SECONDS_PER_MINUTE:
        msg = f"Zone {zone} offset {delta} at {instant} is not a whole number of minutes"
        raise ValueError(msg)
    return _check_minutes(seconds // _SECONDS_PER_MINUTE)


def offset_minutes_for(zone: int | tzinfo | str, instant: Instant) -> int:
    """Resolve the UTC offset of a zone at an instant, in minutes.

    Args:
        zone: Fixed offset in minutes, a tzinfo, or an IANA zone name
        instant: UTC instant the offset applies to

    Returns:
        Signed offset in minutes, within +/-18:00

    Raises:
        TypeError: If zone is none of the accepted types
        ValueError: If the offset is out of range or not whole minutes
        LookupError: If a zone name is unknown
        BabelImportError: If a zone name is given and Babel is not installed

    Example:
        >>> winter = Instant.of(2024, 1, 15, 12)
        >>> offset_minutes_for("Europe/Riga", winter)
        120
        >>> offset_minutes_for(-300, winter)
        -300
    """
    match zone:
        case bool():
            msg = "Zone must be an int, tzinfo or zone name, got bool"
            raise TypeError(msg)
        case int():
            return _check_minutes(zone)
        case tzinfo():
            return _offset_from_tzinfo(zone, instant)
        case str():
            require_babel("offset_minutes_for")
            resolved = get_babel_dates().get_timezone(zone)
            minutes = _offset_from_tzinfo(resolved, instant)
            logger.debug("Resolved zone %r at %s to %+d min", zone, instant, minutes)
            return minutes
        case _:
            msg = f"Zone must be an int, tzinfo or zone name, got {type(zone).__name__}"
            raise TypeError(msg)
