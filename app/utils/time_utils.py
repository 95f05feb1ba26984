"""Calendar grid and time display helpers.

Times on the calendar are fractional hours (13.25 is 1:15 PM). The grid spans
the business-hours window and is drawn at a fixed pixel scale.
"""
import math
import re
from datetime import date, datetime
from typing import List, Optional, Union

from app.core.config import settings

START_HOUR = settings.BUSINESS_START_HOUR
END_HOUR = settings.BUSINESS_END_HOUR
TOTAL_HOURS = END_HOUR - START_HOUR
PIXELS_PER_HOUR = settings.PIXELS_PER_HOUR
SLOT_MINUTES = settings.SLOT_MINUTES

_DISPLAY_TIME = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])?\s*$")


def _split_hour(time: float):
    hours = math.floor(time)
    minutes = round((time - hours) * 60)
    if minutes == 60:
        hours += 1
        minutes = 0
    return hours, minutes


def _twelve_hour(hours: int) -> int:
    display_hour = hours % 12
    return 12 if display_hour == 0 else display_hour


def format_time(time: float) -> str:
    """Format a fractional hour the way the calendar grid labels it: ``1:15pm``."""
    hours, minutes = _split_hour(time)
    period = "pm" if hours % 24 >= 12 else "am"
    return f"{_twelve_hour(hours)}:{minutes:02d}{period}"


def format_time_string(time_string: str) -> str:
    """Format ``HH:MM`` as ``h:mm AM``."""
    if not time_string:
        return ""
    hours, minutes = (int(part) for part in time_string.split(":")[:2])
    period = "PM" if hours >= 12 else "AM"
    return f"{_twelve_hour(hours)}:{minutes:02d} {period}"


def to_24_hour_format(time_with_period: str) -> str:
    """Convert ``1:15 PM`` (or ``1:15pm``) to ``13:15``."""
    if not time_with_period:
        return ""
    match = _DISPLAY_TIME.match(time_with_period)
    if not match:
        raise ValueError(f"Unrecognised time: {time_with_period!r}")

    hour = int(match.group(1))
    minutes = int(match.group(2))
    period = (match.group(3) or "").upper()

    if period == "PM" and hour < 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0

    return f"{hour:02d}:{minutes:02d}"


def parse_time_of_day(value: str) -> float:
    """``HH:MM`` or a 12-hour display string to a fractional hour."""
    hours, minutes = to_24_hour_format(value).split(":")
    return int(hours) + int(minutes) / 60


def format_date_time(day: Union[date, datetime], time: str) -> str:
    return f"{day.strftime('%Y-%m-%d')} {time}"


def is_same_day(first: Union[date, datetime], second: Union[date, datetime]) -> bool:
    return (
        first.year == second.year
        and first.month == second.month
        and first.day == second.day
    )


def format_duration(minutes: Optional[int]) -> str:
    if not minutes:
        return "0m"
    hours, rest = divmod(int(minutes), 60)
    if hours and rest:
        return f"{hours}h {rest}m"
    if hours:
        return f"{hours}h"
    return f"{rest}m"


def hour_labels() -> List[int]:
    """Whole hours shown down the left column of the grid."""
    return list(range(START_HOUR, END_HOUR))


def fractional_hour(moment: datetime) -> float:
    return moment.hour + moment.minute / 60


def now_line_position(now: datetime) -> Optional[float]:
    """Pixel offset of the "now" line, or None outside business hours."""
    current = fractional_hour(now)
    if START_HOUR <= current <= END_HOUR:
        return (current - START_HOUR) * PIXELS_PER_HOUR
    return None


def event_geometry(start_hour: float, duration_hours: float) -> dict:
    return {
        "top": (start_hour - START_HOUR) * PIXELS_PER_HOUR,
        "height": duration_hours * PIXELS_PER_HOUR,
    }


def snap_to_slot(offset_px: float, duration_hours: float = 0) -> float:
    """Map a drop position on the grid to a slot-aligned fractional hour.

    The result is clamped so an event of ``duration_hours`` stays inside the
    business-hours window.
    """
    slots_per_hour = 60 // SLOT_MINUTES
    raw = START_HOUR + offset_px / PIXELS_PER_HOUR
    snapped = round(raw * slots_per_hour) / slots_per_hour
    latest = max(START_HOUR, END_HOUR - duration_hours)
    return min(max(snapped, START_HOUR), latest)
