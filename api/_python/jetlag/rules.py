"""
Rule-set constants for the two adjustment directions.

Times are minutes since midnight. Delay bounds may exceed 1439 because a
westbound bedtime is allowed to land after midnight (1500 = 1 AM).
"""

from dataclasses import dataclass

from .types import Direction

# First-night shift is a fraction of the zone gap, capped
ADJUSTMENT_FACTOR = 0.4
MAX_ADJUSTMENT_HOURS = 3.0

NOON = 12 * 60


@dataclass(frozen=True)
class LightWindow:
    """Fixed light window (minutes since midnight) with its guidance text."""

    start: int
    end: int
    description: str


@dataclass(frozen=True)
class DirectionRules:
    """
    Configuration for one direction's rule set.

    Advance and delay share the same shape but differ in every bound: an
    eastbound traveler is pulled earlier, a westbound one pushed later.
    """

    min_bedtime: int
    max_bedtime: int

    # Light exposure depends on whether the traveler landed in the morning
    morning_arrival_light: LightWindow
    afternoon_arrival_light: LightWindow
    light_avoidance: LightWindow

    # Caffeine cutoff = bedtime hour - offset, bounded by cutoff_bound_hour
    caffeine_offset_hours: int
    caffeine_bound_hour: int

    # Naps only offered when landing before nap_arrival_limit
    nap_arrival_limit: int
    nap_delay_min: int
    nap_duration_min: int
    nap_description: str

    fallback_rules: tuple[str, ...]


DIRECTION_RULES: dict[Direction, DirectionRules] = {
    "advance": DirectionRules(
        min_bedtime=20 * 60,  # 8 PM
        max_bedtime=23 * 60,  # 11 PM
        morning_arrival_light=LightWindow(
            start=6 * 60,
            end=10 * 60,
            description="Seek bright light (especially sunlight) to advance your clock",
        ),
        afternoon_arrival_light=LightWindow(
            start=7 * 60,
            end=11 * 60,
            description="Seek bright light in the morning to advance your clock",
        ),
        light_avoidance=LightWindow(
            start=18 * 60,
            end=22 * 60,
            description="Avoid bright light in the evening to help advance your clock",
        ),
        caffeine_offset_hours=8,
        caffeine_bound_hour=12,  # Never earlier than noon
        nap_arrival_limit=14 * 60,
        nap_delay_min=60,
        nap_duration_min=20,
        nap_description="Short 20-minute nap to combat fatigue, but not too late",
        fallback_rules=(
            "If you can't sleep at the recommended time, try to at least rest in a dark room",
            "Even if you wake up early, try to stay in bed until the recommended wake time",
        ),
    ),
    "delay": DirectionRules(
        min_bedtime=21 * 60,  # 9 PM
        max_bedtime=25 * 60,  # 1 AM next day
        morning_arrival_light=LightWindow(
            start=14 * 60,
            end=18 * 60,
            description="Seek bright light in the afternoon to delay your clock",
        ),
        afternoon_arrival_light=LightWindow(
            start=16 * 60,
            end=20 * 60,
            description="Seek bright light in the afternoon/evening to delay your clock",
        ),
        light_avoidance=LightWindow(
            start=6 * 60,
            end=10 * 60,
            description="Avoid bright light in the morning to help delay your clock",
        ),
        caffeine_offset_hours=6,
        caffeine_bound_hour=16,  # Never later than 4 PM
        nap_arrival_limit=16 * 60,
        nap_delay_min=90,
        nap_duration_min=30,
        nap_description="Short 30-minute nap to help you stay up later",
        fallback_rules=(
            "If you feel sleepy, try to stay active and get some light exposure",
            "Avoid napping too close to your recommended bedtime",
        ),
    ),
}

# Late eastbound arrivals go to bed this long after landing
LATE_ARRIVAL_THRESHOLD = 22 * 60
LATE_ARRIVAL_BEDTIME_DELAY = 60

# Early westbound arrivals stay up at least this long after landing
EARLY_ARRIVAL_THRESHOLD = 8 * 60
EARLY_ARRIVAL_MIN_AWAKE = 14 * 60

MIN_WAKE_TIME = 6 * 60  # Advance only


def get_direction_rules(direction: Direction) -> DirectionRules:
    """Get the rule set for a given direction."""
    return DIRECTION_RULES[direction]


def calculate_adjustment_minutes(time_difference_hours: float) -> int:
    """First-night shift: 40% of the gap, at most 3 hours, in whole minutes."""
    adjustment_hours = min(abs(time_difference_hours) * ADJUSTMENT_FACTOR, MAX_ADJUSTMENT_HOURS)
    return round(adjustment_hours * 60)
