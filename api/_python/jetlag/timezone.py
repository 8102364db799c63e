"""
Time zone offset resolution.

Offsets are looked up through an injected provider so the plan engine can run
against the real zone database (pytz) or against a fabricated offset table.
Every lookup is evaluated at a specific instant, which is what makes the
results DST-aware.
"""

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Protocol

import pytz

from .time_math import MINUTES_PER_DAY
from .types import Direction


class InvalidTimeZone(ValueError):
    """Raised when a zone identifier is not in the zone database."""

    def __init__(self, timezone: str):
        super().__init__(f"Unknown time zone: {timezone!r}")
        self.timezone = timezone


class OffsetProvider(Protocol):
    """Anything that can report a zone's UTC offset at an instant."""

    def offset_hours(self, tz_name: str, instant: datetime) -> float:
        """Signed UTC offset in hours (positive = ahead of UTC)."""
        ...


class PytzOffsetProvider:
    """
    Offsets from the IANA database shipped with pytz.

    The offset is derived by rendering the same instant as a wall clock in the
    zone and in UTC and taking the difference, corrected by a full day when
    the two clocks sit on different calendar dates.
    """

    def offset_hours(self, tz_name: str, instant: datetime) -> float:
        try:
            tz = pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError as e:
            raise InvalidTimeZone(tz_name) from e

        utc_clock = _as_utc(instant)
        zone_clock = utc_clock.astimezone(tz)

        utc_minutes = utc_clock.hour * 60 + utc_clock.minute
        zone_minutes = zone_clock.hour * 60 + zone_clock.minute
        diff_minutes = zone_minutes - utc_minutes

        # Zone may be on the previous or next calendar day
        if zone_clock.date() > utc_clock.date():
            diff_minutes += MINUTES_PER_DAY
        elif zone_clock.date() < utc_clock.date():
            diff_minutes -= MINUTES_PER_DAY

        return diff_minutes / 60


class FixedOffsetProvider:
    """
    Offsets from a static table, ignoring the instant.

    Used in tests and by callers that already know the offsets they want.
    """

    def __init__(self, offsets: Mapping[str, float]):
        self._offsets = dict(offsets)

    def offset_hours(self, tz_name: str, instant: datetime) -> float:
        try:
            return self._offsets[tz_name]
        except KeyError as e:
            raise InvalidTimeZone(tz_name) from e


_default_provider = PytzOffsetProvider()


def _as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def get_utc_offset(
    tz_name: str,
    instant: datetime | None = None,
    provider: OffsetProvider | None = None,
) -> float:
    """
    Get UTC offset in hours for a timezone at a given instant.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")
        instant: Moment to check (for DST), defaults to now
        provider: Offset source, defaults to the pytz database

    Returns:
        Offset in hours (e.g., -8.0 for PST, -7.0 for PDT, 5.5 for IST)
    """
    if instant is None:
        instant = datetime.now(pytz.utc)
    provider = provider or _default_provider
    return provider.offset_hours(tz_name, instant)


def calculate_timezone_difference(
    home_tz: str,
    dest_tz: str,
    instant: datetime | None = None,
    provider: OffsetProvider | None = None,
) -> float:
    """
    Calculate the time difference between two time zones in hours.

    The raw difference is folded into (-12, +12] by adding or subtracting a
    day. Zones whose offsets lie beyond ±12h (e.g. Pacific/Kiritimati) can be
    folded the "wrong" way round; that is the accepted behavior.

    Args:
        home_tz: IANA timezone the traveler is coming from
        dest_tz: IANA timezone the traveler is arriving in
        instant: Moment to evaluate both offsets at, defaults to now
        provider: Offset source, defaults to the pytz database

    Returns:
        Hours, positive = destination ahead, negative = destination behind
    """
    if instant is None:
        instant = datetime.now(pytz.utc)

    home_offset = get_utc_offset(home_tz, instant, provider)
    dest_offset = get_utc_offset(dest_tz, instant, provider)

    diff = dest_offset - home_offset
    if diff > 12:
        diff -= 24
    elif diff <= -12:
        diff += 24
    return diff


def determine_adjustment_direction(time_difference_hours: float) -> Direction:
    """
    Positive difference = destination ahead = eastbound = advance.

    Zero falls through to "delay".
    """
    return "advance" if time_difference_hours > 0 else "delay"


def get_time_difference_description(time_difference_hours: float) -> str:
    """Human-readable difference, e.g. "5 hours ahead" or "5h 30m behind"."""
    abs_hours = abs(time_difference_hours)
    hours = int(abs_hours)
    minutes = round((abs_hours - hours) * 60)

    direction = "ahead" if time_difference_hours > 0 else "behind"

    if minutes == 0:
        plural = "" if hours == 1 else "s"
        return f"{hours} hour{plural} {direction}"
    return f"{hours}h {minutes}m {direction}"


def localize_arrival(
    arrival: datetime,
    dest_tz: str,
    provider: OffsetProvider | None = None,
) -> tuple[datetime, int]:
    """
    Resolve an arrival time to a UTC instant and a destination wall clock.

    Naive datetimes are destination-local wall-clock times. Aware datetimes
    are absolute and get re-rendered in the destination zone.

    Returns:
        Tuple of (instant in UTC, destination wall clock in minutes since midnight)
    """
    if arrival.tzinfo is not None:
        instant = arrival.astimezone(pytz.utc)
        offset = get_utc_offset(dest_tz, instant, provider)
        local = instant + timedelta(hours=offset)
        return instant, local.hour * 60 + local.minute

    # Two passes so the offset is taken on the correct side of a DST change
    wall_clock = pytz.utc.localize(arrival)
    instant = wall_clock
    for _ in range(2):
        offset = get_utc_offset(dest_tz, instant, provider)
        instant = wall_clock - timedelta(hours=offset)
    return instant, arrival.hour * 60 + arrival.minute
