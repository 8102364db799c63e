"""
Data structures for arrival-day plan generation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

# advance = eastbound (sleep earlier), delay = westbound (sleep later)
Direction = Literal["advance", "delay"]


@dataclass(frozen=True)
class UserInputs:
    """Input from the trip form."""

    home_timezone: str  # IANA timezone (e.g., "America/New_York")
    destination_timezone: str  # IANA timezone (e.g., "Europe/London")
    arrival_datetime: datetime  # Naive = destination-local wall clock
    usual_bedtime: str  # "23:00" format, home timezone
    usual_wake_time: str  # "07:00" format, home timezone
    naps_allowed: bool = False
    caffeine_use: bool = False


@dataclass(frozen=True)
class TimeWindow:
    """A destination-local window with user-facing guidance."""

    start: str  # "HH:MM"
    end: str  # "HH:MM"
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end, "description": self.description}


@dataclass(frozen=True)
class JetLagPlan:
    """
    Recommendations for the arrival night and following morning.

    All times are destination-local "HH:MM".
    """

    bedtime: str
    wake_time: str
    direction: Direction
    time_difference_hours: float  # Destination offset minus home offset
    nap_window: TimeWindow | None = None
    caffeine_cutoff: str | None = None
    light_exposure: tuple[TimeWindow, ...] = field(default_factory=tuple)
    light_avoidance: tuple[TimeWindow, ...] = field(default_factory=tuple)
    fallback_rules: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """JSON shape rendered by the frontend (camelCase keys)."""
        return {
            "bedtime": self.bedtime,
            "wakeTime": self.wake_time,
            "napWindow": self.nap_window.to_dict() if self.nap_window else None,
            "caffeineCutoff": self.caffeine_cutoff,
            "lightExposure": [w.to_dict() for w in self.light_exposure],
            "lightAvoidance": [w.to_dict() for w in self.light_avoidance],
            "direction": self.direction,
            "timeDifferenceHours": self.time_difference_hours,
            "fallbackRules": list(self.fallback_rules),
        }
