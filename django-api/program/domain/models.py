"""Domain models for registrations and the generated program.

These are pure domain objects with no persistence or API concerns.
Django ORM models are in program/models.py (persistence layer).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemRegulation:
    """Limits that apply to one item type within a school category."""

    item_type: str
    code: str | None
    max_time: str | None
    max_cast: int | None


@dataclass(frozen=True)
class RegisteredItem:
    """One performance submitted by a school."""

    item_type: str
    item_code: str
    school_name: str
    category: str


@dataclass(frozen=True)
class ScheduleSlot:
    """A performance placed on a venue's timeline.

    Times are 24-hour ``HH:MM`` strings.
    """

    start_time: str
    end_time: str
    item: str
    item_code: str
    school_name: str
    category: str
    code: str
    duration: int
    max_cast: int | None


@dataclass(frozen=True)
class Venue:
    """A hall running its own sequence of performances."""

    name: str
    description: str
    categories: tuple[str, ...]


@dataclass(frozen=True)
class ScheduleSummary:
    count: int
    total_minutes: int


@dataclass(frozen=True)
class VenueSchedule:
    """Slots for one venue together with their summary."""

    venue: Venue
    slots: tuple[ScheduleSlot, ...]
    summary: ScheduleSummary

    @property
    def categories(self) -> tuple[str, ...]:
        """Distinct categories on this timeline, in order of first appearance."""
        return tuple(dict.fromkeys(slot.category for slot in self.slots))


@dataclass(frozen=True)
class Program:
    """The event-day program across all venues."""

    venues: tuple[VenueSchedule, ...]
    start_time: str
    interval_minutes: int
    unmapped: tuple[RegisteredItem, ...] = ()

    @property
    def total_performances(self) -> int:
        return sum(venue.summary.count for venue in self.venues)


@dataclass(frozen=True)
class ItemCount:
    """Number of registered items of one type within a category."""

    category: str
    item_type: str
    count: int
