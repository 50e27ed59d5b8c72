"""Schedule builder: lays a venue's items out on the wall clock."""

from collections.abc import Iterable

from program.domain.clock import add_minutes
from program.domain.durations import DEFAULT_DURATION_MINUTES, parse_duration
from program.domain.models import RegisteredItem, ScheduleSlot
from program.domain.regulations import DEFAULT_REGULATIONS, RegulationTable

INTERVAL_MINUTES = 3


def build_schedule(
    items: Iterable[RegisteredItem],
    start_time: str,
    *,
    regulations: RegulationTable = DEFAULT_REGULATIONS,
    interval_minutes: int = INTERVAL_MINUTES,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> list[ScheduleSlot]:
    """Place items back to back starting at ``start_time``.

    Items keep their input order. Each slot lasts the regulation's maximum
    time and is followed by ``interval_minutes`` of changeover. Items with no
    regulation, or with an unreadable time limit, get ``default_duration``.
    """
    slots: list[ScheduleSlot] = []
    current = start_time

    for item in items:
        regulation = regulations.get(item.category, item.item_type)
        max_time = regulation.max_time if regulation else None
        duration = parse_duration(max_time, default=default_duration)
        end = add_minutes(current, duration)
        slots.append(
            ScheduleSlot(
                start_time=current,
                end_time=end,
                item=item.item_type,
                item_code=item.item_code,
                school_name=item.school_name,
                category=item.category,
                code=(regulation.code or "") if regulation else "",
                duration=duration,
                max_cast=regulation.max_cast if regulation else None,
            )
        )
        current = add_minutes(end, interval_minutes)

    return slots
