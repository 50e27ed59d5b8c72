"""Minute-precision wall-clock arithmetic on ``HH:MM`` strings.

``add_minutes`` does not wrap at midnight, so a long enough program yields
hours of 24 or more ("25:30"). Display helpers fold those back onto the
12-hour clock.
"""

import re

from program.domain.errors import InvalidClockTimeError

_CLOCK_RE = re.compile(r"^([0-9]+):([0-9]{2})$")

MINUTES_PER_DAY = 24 * 60


def parse_clock(time: str) -> tuple[int, int]:
    """Split ``HH:MM`` into hours and minutes.

    Raises:
        InvalidClockTimeError: If the value is not ``HH:MM`` or minutes exceed 59.
    """
    match = _CLOCK_RE.match(time.strip()) if isinstance(time, str) else None
    if match is None:
        raise InvalidClockTimeError(str(time))
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise InvalidClockTimeError(time)
    return hours, minutes


def to_minutes(time: str) -> int:
    hours, minutes = parse_clock(time)
    return hours * 60 + minutes


def add_minutes(time: str, minutes: int) -> str:
    total = to_minutes(time) + minutes
    return f"{total // 60:02d}:{total % 60:02d}"


def minutes_between(start: str, end: str) -> int:
    return to_minutes(end) - to_minutes(start)


def is_past_midnight(time: str) -> bool:
    return to_minutes(time) >= MINUTES_PER_DAY


def format_time(time: str) -> str:
    """Render ``HH:MM`` as ``h:MM AM/PM``."""
    hours, minutes = parse_clock(time)
    hours %= 24
    suffix = "PM" if hours >= 12 else "AM"
    display_hours = 12 if hours == 0 else hours - 12 if hours > 12 else hours
    return f"{display_hours}:{minutes:02d} {suffix}"


def format_elapsed(total_minutes: int) -> str:
    """Render a minute count as ``Hh Mm``."""
    return f"{total_minutes // 60}h {total_minutes % 60}m"
