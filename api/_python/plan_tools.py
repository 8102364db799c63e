"""
Request/response boundary for the plan engine.

Provides two tools, used by the serverless endpoints:
1. calculate_time_difference - Offset difference and direction for a zone pair
2. get_arrival_plan - Full arrival-day plan with summary
"""

import logging
from datetime import datetime
from typing import Any

from jetlag.plan_generator import PlanGenerator
from jetlag.timezone import (
    calculate_timezone_difference,
    determine_adjustment_direction,
    get_time_difference_description,
)
from jetlag.timezones import get_timezone_label
from jetlag.types import UserInputs

logger = logging.getLogger(__name__)

# Validation patterns
TIMEZONE_PATTERN_CHARS = set(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_/+-"
)


class InvalidRequest(ValueError):
    """Raised when tool arguments fail validation."""


REQUIRED_FIELDS = [
    "home_timezone",
    "destination_timezone",
    "arrival_datetime",
    "usual_bedtime",
    "usual_wake_time",
]


def validate_timezone(tz: str) -> bool:
    """Validate IANA timezone shape like 'America/Los_Angeles' or 'UTC'."""
    if not tz or not isinstance(tz, str):
        return False
    return all(c in TIMEZONE_PATTERN_CHARS for c in tz)


def validate_datetime(dt: str) -> bool:
    """Validate ISO datetime format like '2025-01-06T09:45'."""
    if not isinstance(dt, str) or len(dt) != 16 or dt[10] != "T":
        return False
    try:
        datetime.strptime(dt, "%Y-%m-%dT%H:%M")
    except ValueError:
        return False
    return True


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5:
        return False
    try:
        parts = t.split(":")
        if len(parts) != 2:
            return False
        hour = int(parts[0])
        minute = int(parts[1])
        return 0 <= hour <= 23 and 0 <= minute <= 59
    except (ValueError, IndexError):
        return False


def validate_request(data: dict) -> str | None:
    """Validate request data, return error message or None if valid."""
    for field in REQUIRED_FIELDS:
        if field not in data:
            return f"Missing required field: {field}"

    if not validate_timezone(data["home_timezone"]):
        return f"Invalid home timezone format: {data['home_timezone']}"
    if not validate_timezone(data["destination_timezone"]):
        return f"Invalid destination timezone format: {data['destination_timezone']}"

    if not validate_datetime(data["arrival_datetime"]):
        return f"Invalid arrival datetime format: {data['arrival_datetime']}"

    if not validate_time(data["usual_bedtime"]):
        return f"Invalid bedtime format: {data['usual_bedtime']}"
    if not validate_time(data["usual_wake_time"]):
        return f"Invalid wake time format: {data['usual_wake_time']}"

    for flag in ("naps_allowed", "caffeine_use"):
        if flag in data and not isinstance(data[flag], bool):
            return f"{flag} must be true or false"

    return None


def validate_time_difference_args(arguments: dict) -> str | None:
    """Validate calculate_time_difference arguments, return error message or None."""
    unknown = set(arguments) - {"home_timezone", "destination_timezone", "travel_date"}
    if unknown:
        return f"Unexpected argument: {sorted(unknown)[0]}"

    for field in ("home_timezone", "destination_timezone"):
        if field not in arguments:
            return f"Missing required field: {field}"
        if not validate_timezone(arguments[field]):
            return f"Invalid {field.split('_')[0]} timezone format: {arguments[field]}"

    travel_date = arguments.get("travel_date")
    if travel_date is not None and not validate_datetime(travel_date):
        return f"Invalid travel date format: {travel_date}"

    return None


def build_user_inputs(data: dict[str, Any]) -> UserInputs:
    """Build UserInputs from an already-validated request body."""
    return UserInputs(
        home_timezone=data["home_timezone"],
        destination_timezone=data["destination_timezone"],
        arrival_datetime=datetime.fromisoformat(data["arrival_datetime"]),
        usual_bedtime=data["usual_bedtime"],
        usual_wake_time=data["usual_wake_time"],
        naps_allowed=data.get("naps_allowed", False),
        caffeine_use=data.get("caffeine_use", False),
    )


def calculate_time_difference(
    home_timezone: str,
    destination_timezone: str,
    travel_date: str | None = None,
) -> dict[str, Any]:
    """
    Calculate the offset difference between two zones.

    travel_date is an ISO datetime read as UTC; omitted means now.
    """
    instant = datetime.fromisoformat(travel_date) if travel_date else None
    hours = calculate_timezone_difference(home_timezone, destination_timezone, instant)
    direction = determine_adjustment_direction(hours)

    return {
        "time_difference_hours": hours,
        "direction": direction,
        "description": get_time_difference_description(hours),
    }


def get_arrival_plan(params: dict[str, Any]) -> dict[str, Any]:
    """
    Generate the arrival-day plan with a summary block.

    Raises:
        InvalidRequest: If params fail validate_request
        InvalidTimeZone: If either zone is unknown to the zone database
    """
    validation_error = validate_request(params)
    if validation_error:
        raise InvalidRequest(validation_error)

    inputs = build_user_inputs(params)

    generator = PlanGenerator()
    plan = generator.generate_plan(inputs)

    summary = {
        "home": get_timezone_label(inputs.home_timezone),
        "destination": get_timezone_label(inputs.destination_timezone),
        "direction": plan.direction,
        "time_difference": get_time_difference_description(plan.time_difference_hours),
    }

    return {
        "summary": summary,
        "plan": plan.to_dict(),
    }


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for endpoint invocation."""
    logger.debug("Invoking tool %s", tool_name)
    if tool_name == "calculate_time_difference":
        validation_error = validate_time_difference_args(arguments)
        if validation_error:
            raise InvalidRequest(validation_error)
        return calculate_time_difference(**arguments)
    elif tool_name == "get_arrival_plan":
        return get_arrival_plan(arguments)
    else:
        raise ValueError(f"Unknown tool: {tool_name}")
