"""
Test helper functions for plan validation.

These functions can be imported by test modules for plan analysis.
"""

import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from jetlag.time_math import parse_minutes
from jetlag.types import JetLagPlan


def at(hour: int, minute: int = 0) -> datetime:
    """Naive destination-local arrival on a fixed winter date."""
    return datetime(2026, 1, 15, hour, minute)


def minutes(time_str: str) -> int:
    return parse_minutes(time_str)


def window_minutes(time_str_start: str, time_str_end: str) -> int:
    """Length of a window in minutes, allowing it to cross midnight."""
    return (parse_minutes(time_str_end) - parse_minutes(time_str_start)) % (24 * 60)


def sleep_duration_hours(plan: JetLagPlan) -> float:
    """Hours from recommended bedtime to recommended wake time."""
    return window_minutes(plan.bedtime, plan.wake_time) / 60
