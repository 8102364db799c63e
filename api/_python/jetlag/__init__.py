"""
Jet Lag Fixer arrival-day planning.

Computes a first-night sleep plan (bedtime, wake time, light, nap and
caffeine guidance) for a traveler crossing time zones.
"""

from .plan_generator import PlanGenerator, generate_plan
from .timezone import (
    FixedOffsetProvider,
    InvalidTimeZone,
    OffsetProvider,
    PytzOffsetProvider,
    calculate_timezone_difference,
    determine_adjustment_direction,
    get_time_difference_description,
    get_utc_offset,
)
from .types import Direction, JetLagPlan, TimeWindow, UserInputs

__all__ = [
    # Types
    "Direction",
    "UserInputs",
    "TimeWindow",
    "JetLagPlan",
    # Time zones
    "InvalidTimeZone",
    "OffsetProvider",
    "PytzOffsetProvider",
    "FixedOffsetProvider",
    "get_utc_offset",
    "calculate_timezone_difference",
    "determine_adjustment_direction",
    "get_time_difference_description",
    # Generator
    "PlanGenerator",
    "generate_plan",
]
