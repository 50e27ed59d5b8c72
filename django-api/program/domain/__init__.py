from program.domain.models import (
    ItemCount,
    ItemRegulation,
    Program,
    RegisteredItem,
    ScheduleSlot,
    ScheduleSummary,
    Venue,
    VenueSchedule,
)
from program.domain.value_objects import ItemCode, SchoolCategory

__all__ = [
    "ItemCount",
    "ItemRegulation",
    "Program",
    "RegisteredItem",
    "ScheduleSlot",
    "ScheduleSummary",
    "Venue",
    "VenueSchedule",
    "ItemCode",
    "SchoolCategory",
]
