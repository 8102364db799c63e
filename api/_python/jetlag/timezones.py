"""
Time zones offered by the trip form picker.

This is a convenience list only; the plan engine accepts any IANA name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimezoneOption:
    label: str
    value: str  # IANA identifier


COMMON_TIMEZONES: tuple[TimezoneOption, ...] = (
    TimezoneOption("New York (EST/EDT)", "America/New_York"),
    TimezoneOption("Los Angeles (PST/PDT)", "America/Los_Angeles"),
    TimezoneOption("Chicago (CST/CDT)", "America/Chicago"),
    TimezoneOption("Denver (MST/MDT)", "America/Denver"),
    TimezoneOption("London (GMT/BST)", "Europe/London"),
    TimezoneOption("Paris (CET/CEST)", "Europe/Paris"),
    TimezoneOption("Berlin (CET/CEST)", "Europe/Berlin"),
    TimezoneOption("Rome (CET/CEST)", "Europe/Rome"),
    TimezoneOption("Madrid (CET/CEST)", "Europe/Madrid"),
    TimezoneOption("Moscow (MSK)", "Europe/Moscow"),
    TimezoneOption("Dubai (GST)", "Asia/Dubai"),
    TimezoneOption("Tokyo (JST)", "Asia/Tokyo"),
    TimezoneOption("Seoul (KST)", "Asia/Seoul"),
    TimezoneOption("Shanghai (CST)", "Asia/Shanghai"),
    TimezoneOption("Hong Kong (HKT)", "Asia/Hong_Kong"),
    TimezoneOption("Singapore (SGT)", "Asia/Singapore"),
    TimezoneOption("Bangkok (ICT)", "Asia/Bangkok"),
    TimezoneOption("Mumbai (IST)", "Asia/Kolkata"),
    TimezoneOption("Sydney (AEDT/AEST)", "Australia/Sydney"),
    TimezoneOption("Melbourne (AEDT/AEST)", "Australia/Melbourne"),
    TimezoneOption("Auckland (NZDT/NZST)", "Pacific/Auckland"),
    TimezoneOption("São Paulo (BRT/BRST)", "America/Sao_Paulo"),
    TimezoneOption("Mexico City (CST/CDT)", "America/Mexico_City"),
    TimezoneOption("Toronto (EST/EDT)", "America/Toronto"),
    TimezoneOption("Vancouver (PST/PDT)", "America/Vancouver"),
)

_LABELS_BY_VALUE = {option.value: option.label for option in COMMON_TIMEZONES}


def is_common_timezone(value: str) -> bool:
    return value in _LABELS_BY_VALUE


def get_timezone_label(value: str) -> str:
    """Picker label for a zone, falling back to the IANA name itself."""
    return _LABELS_BY_VALUE.get(value, value)
