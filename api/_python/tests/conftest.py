"""
Pytest fixtures for arrival-day plan tests.
"""

import pytest
from datetime import datetime

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from jetlag.plan_generator import PlanGenerator
from jetlag.timezone import FixedOffsetProvider
from jetlag.types import UserInputs


# Standard-time offsets, no DST
FIXED_OFFSETS = {
    "America/Los_Angeles": -8.0,
    "America/New_York": -5.0,
    "America/Sao_Paulo": -3.0,
    "Europe/London": 0.0,
    "Europe/Athens": 2.0,
    "Asia/Dubai": 4.0,
    "Asia/Kabul": 4.5,
    "Asia/Kolkata": 5.5,
    "Asia/Tokyo": 9.0,
}


@pytest.fixture
def fixed_offsets():
    """Offset provider backed by a static table."""
    return FixedOffsetProvider(FIXED_OFFSETS)


@pytest.fixture
def fixed_generator(fixed_offsets):
    """PlanGenerator that never touches the zone database."""
    return PlanGenerator(fixed_offsets)


@pytest.fixture
def generator():
    """PlanGenerator on the real (pytz) zone database."""
    return PlanGenerator()


@pytest.fixture
def make_inputs():
    """Factory for UserInputs with a 23:00/07:00 sleeper by default."""

    def _make(
        home: str = "America/New_York",
        dest: str = "Europe/London",
        arrival: datetime = datetime(2026, 1, 15, 10, 0),
        bedtime: str = "23:00",
        wake_time: str = "07:00",
        naps_allowed: bool = True,
        caffeine_use: bool = True,
    ) -> UserInputs:
        return UserInputs(
            home_timezone=home,
            destination_timezone=dest,
            arrival_datetime=arrival,
            usual_bedtime=bedtime,
            usual_wake_time=wake_time,
            naps_allowed=naps_allowed,
            caffeine_use=caffeine_use,
        )

    return _make
