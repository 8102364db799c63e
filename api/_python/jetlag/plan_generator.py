"""
Arrival-day plan generation.

Turns the traveler's usual schedule and trip into a first-night plan:
bedtime, wake time, light windows, and optional nap and caffeine guidance.
Eastbound trips (destination ahead) pull the schedule earlier, westbound
trips push it later, each bounded to sane clock times.
"""

import logging

from .rules import (
    EARLY_ARRIVAL_MIN_AWAKE,
    EARLY_ARRIVAL_THRESHOLD,
    LATE_ARRIVAL_BEDTIME_DELAY,
    LATE_ARRIVAL_THRESHOLD,
    MIN_WAKE_TIME,
    NOON,
    DirectionRules,
    LightWindow,
    calculate_adjustment_minutes,
    get_direction_rules,
)
from .time_math import (
    MINUTES_PER_DAY,
    add_minutes,
    format_minutes,
    parse_minutes,
    shift_minutes,
)
from .timezone import (
    OffsetProvider,
    calculate_timezone_difference,
    determine_adjustment_direction,
    localize_arrival,
)
from .types import JetLagPlan, TimeWindow, UserInputs

logger = logging.getLogger(__name__)


class PlanGenerator:
    """
    Generates arrival-day jet lag plans.

    Stateless apart from the offset provider, so one instance can serve any
    number of requests.
    """

    def __init__(self, offset_provider: OffsetProvider | None = None):
        """
        Args:
            offset_provider: Source of UTC offsets, defaults to the pytz database
        """
        self.offset_provider = offset_provider

    def generate_plan(self, inputs: UserInputs) -> JetLagPlan:
        """
        Generate the plan for one trip.

        Args:
            inputs: UserInputs from the trip form

        Returns:
            JetLagPlan with destination-local times

        Raises:
            InvalidTimeZone: If either zone is not a recognized IANA name
        """
        instant, arrival_minutes = localize_arrival(
            inputs.arrival_datetime, inputs.destination_timezone, self.offset_provider
        )

        time_difference_hours = calculate_timezone_difference(
            inputs.home_timezone,
            inputs.destination_timezone,
            instant,
            self.offset_provider,
        )
        direction = determine_adjustment_direction(time_difference_hours)

        logger.debug(
            "Plan %s -> %s: %+.2fh (%s), arrival %s",
            inputs.home_timezone,
            inputs.destination_timezone,
            time_difference_hours,
            direction,
            format_minutes(arrival_minutes),
        )

        # Usual schedule re-expressed on the destination clock
        usual_bedtime_dest = shift_minutes(parse_minutes(inputs.usual_bedtime), time_difference_hours)
        usual_wake_dest = shift_minutes(parse_minutes(inputs.usual_wake_time), time_difference_hours)

        rules = get_direction_rules(direction)
        adjustment = calculate_adjustment_minutes(time_difference_hours)

        if direction == "advance":
            bedtime, wake_time = self._advance_sleep_times(
                usual_bedtime_dest, usual_wake_dest, arrival_minutes, adjustment, rules
            )
            light = (
                rules.morning_arrival_light
                if arrival_minutes < NOON
                else rules.afternoon_arrival_light
            )
            cutoff_hour = max(
                rules.caffeine_bound_hour, bedtime // 60 - rules.caffeine_offset_hours
            )
        else:
            bedtime, wake_time = self._delay_sleep_times(
                usual_bedtime_dest, usual_wake_dest, arrival_minutes, adjustment, rules
            )
            light = (
                rules.afternoon_arrival_light
                if arrival_minutes > NOON
                else rules.morning_arrival_light
            )
            # Bedtime may be past midnight, so the hour is not wrapped here: 01:00
            # counts as hour 25 and gives 16:00. The wrapped hour would give -5:00.
            cutoff_hour = min(
                rules.caffeine_bound_hour, bedtime // 60 - rules.caffeine_offset_hours
            )

        caffeine_cutoff = format_minutes(cutoff_hour * 60) if inputs.caffeine_use else None

        nap_window = None
        if inputs.naps_allowed:
            nap_window = self._nap_window(arrival_minutes, rules)

        return JetLagPlan(
            bedtime=format_minutes(bedtime),
            wake_time=format_minutes(wake_time),
            direction=direction,
            time_difference_hours=time_difference_hours,
            nap_window=nap_window,
            caffeine_cutoff=caffeine_cutoff,
            light_exposure=(_to_time_window(light),),
            light_avoidance=(_to_time_window(rules.light_avoidance),),
            fallback_rules=rules.fallback_rules,
        )

    def _advance_sleep_times(
        self,
        usual_bedtime: int,
        usual_wake: int,
        arrival_minutes: int,
        adjustment: int,
        rules: DirectionRules,
    ) -> tuple[int, int]:
        """
        Eastbound: go to bed and get up earlier than the usual schedule.

        Returns:
            Tuple of (bedtime, wake_time) in minutes, not yet wrapped
        """
        sleep_gap = usual_wake - usual_bedtime

        bedtime = usual_bedtime - adjustment
        wake_time = usual_wake - adjustment

        if bedtime < rules.min_bedtime:
            bedtime = rules.min_bedtime
            wake_time = bedtime + sleep_gap
        elif bedtime > rules.max_bedtime:
            bedtime = rules.max_bedtime
            wake_time = bedtime + sleep_gap

        # Bedtime is left alone here, so the night may come out shorter
        if wake_time < MIN_WAKE_TIME:
            wake_time = MIN_WAKE_TIME

        if arrival_minutes > LATE_ARRIVAL_THRESHOLD:
            bedtime = min(arrival_minutes + LATE_ARRIVAL_BEDTIME_DELAY, rules.max_bedtime)
            wake_time = bedtime + sleep_gap

        return bedtime, wake_time

    def _delay_sleep_times(
        self,
        usual_bedtime: int,
        usual_wake: int,
        arrival_minutes: int,
        adjustment: int,
        rules: DirectionRules,
    ) -> tuple[int, int]:
        """
        Westbound: stay up and sleep in later than the usual schedule.

        Returns:
            Tuple of (bedtime, wake_time) in minutes; bedtime may run to 1500
        """
        sleep_gap = usual_wake - usual_bedtime

        bedtime = usual_bedtime + adjustment
        wake_time = usual_wake + adjustment

        if bedtime < rules.min_bedtime:
            bedtime = rules.min_bedtime
            wake_time = bedtime + sleep_gap
        elif bedtime > rules.max_bedtime:
            bedtime = rules.max_bedtime
            wake_time = bedtime + sleep_gap

        if wake_time >= MINUTES_PER_DAY:
            wake_time -= MINUTES_PER_DAY

        if arrival_minutes < EARLY_ARRIVAL_THRESHOLD:
            bedtime = max(rules.min_bedtime, arrival_minutes + EARLY_ARRIVAL_MIN_AWAKE)
            wake_time = bedtime + sleep_gap
            if wake_time >= MINUTES_PER_DAY:
                wake_time -= MINUTES_PER_DAY

        return bedtime, wake_time

    def _nap_window(self, arrival_minutes: int, rules: DirectionRules) -> TimeWindow | None:
        """Short nap after landing, only for arrivals early enough in the day."""
        if arrival_minutes >= rules.nap_arrival_limit:
            return None

        nap_start = add_minutes(arrival_minutes, rules.nap_delay_min)
        nap_end = add_minutes(nap_start, rules.nap_duration_min)
        return TimeWindow(
            start=format_minutes(nap_start),
            end=format_minutes(nap_end),
            description=rules.nap_description,
        )


def _to_time_window(window: LightWindow) -> TimeWindow:
    return TimeWindow(
        start=format_minutes(window.start),
        end=format_minutes(window.end),
        description=window.description,
    )


def generate_plan(
    inputs: UserInputs, offset_provider: OffsetProvider | None = None
) -> JetLagPlan:
    """
    Convenience function to generate a plan.

    Args:
        inputs: UserInputs with trip data and preferences
        offset_provider: Optional offset source (defaults to pytz)

    Returns:
        JetLagPlan for the arrival day
    """
    generator = PlanGenerator(offset_provider)
    return generator.generate_plan(inputs)
