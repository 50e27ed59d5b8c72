"""Summary figures for built schedules."""

from collections.abc import Sequence

from program.domain.clock import minutes_between
from program.domain.models import ScheduleSlot, ScheduleSummary, Venue, VenueSchedule


def summarize(slots: Sequence[ScheduleSlot]) -> ScheduleSummary:
    """Count slots and measure the span from first start to last end.

    The span includes changeover intervals, so it is longer than the sum of
    slot durations whenever there is more than one slot.
    """
    if not slots:
        return ScheduleSummary(count=0, total_minutes=0)
    return ScheduleSummary(
        count=len(slots),
        total_minutes=minutes_between(slots[0].start_time, slots[-1].end_time),
    )


def present_venue(venue: Venue, slots: Sequence[ScheduleSlot]) -> VenueSchedule:
    return VenueSchedule(venue=venue, slots=tuple(slots), summary=summarize(slots))
