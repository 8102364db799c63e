"""
Time-of-day arithmetic.

All plan times are handled as minutes since midnight. Values may run past
1439 while a delay plan is being computed ("25:00" is 1 AM the next day);
formatting wraps them back onto a 24-hour clock.
"""

MINUTES_PER_DAY = 24 * 60


def parse_minutes(time_str: str) -> int:
    """
    Parse "HH:MM" to minutes since midnight.

    The fields are not range-checked: "99:99" gives 6039. Callers that need
    a well-formed clock time validate before calling.
    """
    hours, minutes = time_str.split(":")
    return int(hours) * 60 + int(minutes)


def wrap_minutes(minutes: int) -> int:
    """Wrap a minute count into [0, 1440)."""
    return minutes % MINUTES_PER_DAY


def format_minutes(minutes: int) -> str:
    """Format minutes as zero-padded "HH:MM", modulo 24 hours."""
    minutes = wrap_minutes(minutes)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def add_minutes(base_minutes: int, delta: int) -> int:
    """Add minutes to a time of day, wrapping at midnight."""
    return wrap_minutes(base_minutes + delta)


def shift_minutes(base_minutes: int, hours: float) -> int:
    """
    Shift a time of day by a (possibly fractional) number of hours.

    Args:
        base_minutes: Starting time in minutes since midnight
        hours: Hours to shift (positive = later, negative = earlier)

    Returns:
        Shifted time in [0, 1440)
    """
    return wrap_minutes(round(base_minutes + hours * 60))
