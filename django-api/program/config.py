"""Program schedule configuration.

Values come from the ``PROGRAM_SCHEDULE`` dict in Django settings and are
validated into a ScheduleSettings instance. Hall assignments, the start time
and the changeover interval are all changed there, not in code.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from program.domain.clock import parse_clock
from program.domain.durations import DEFAULT_DURATION_MINUTES
from program.domain.errors import InvalidClockTimeError
from program.domain.models import Venue
from program.domain.partition import HallPartitioner, ItemOrder, UnmappedPolicy
from program.domain.scheduler import INTERVAL_MINUTES
from program.domain.value_objects import SchoolCategory


class VenueSettings(BaseModel):
    """One hall and the categories it hosts."""

    name: str = Field(min_length=1)
    description: str = ""
    categories: list[str] = Field(default_factory=list)

    def to_venue(self) -> Venue:
        return Venue(
            name=self.name,
            description=self.description,
            categories=tuple(self.categories),
        )


DEFAULT_VENUES = [
    VenueSettings(
        name="Hall 1",
        description="Category A (EYE)",
        categories=[
            SchoolCategory.PRE_PRIMARY.value,
            SchoolCategory.LOWER_PRIMARY.value,
        ],
    ),
    VenueSettings(
        name="Hall 2",
        description="Category B (Primary)",
        categories=[SchoolCategory.PRIMARY.value],
    ),
]


class ScheduleSettings(BaseModel):
    """Validated scheduling configuration."""

    start_time: str = Field(
        default="06:00",
        description="Start time shared by every venue, 24-hour HH:MM",
    )
    interval_minutes: int = Field(
        default=INTERVAL_MINUTES,
        ge=0,
        description="Changeover gap after every performance",
    )
    default_duration_minutes: int = Field(
        default=DEFAULT_DURATION_MINUTES,
        gt=0,
        description="Slot length for items without a readable time limit",
    )
    item_order: ItemOrder = Field(
        default=ItemOrder.REGISTRATION,
        description="Performance order applied before items are split by venue",
    )
    unmapped_category_policy: UnmappedPolicy = Field(
        default=UnmappedPolicy.DROP,
        description="Handling of items whose category no venue hosts",
    )
    overflow_venue: VenueSettings | None = Field(
        default=None,
        description="Venue receiving unmapped items under the overflow policy",
    )
    venues: list[VenueSettings] = Field(
        default_factory=lambda: [venue.model_copy() for venue in DEFAULT_VENUES]
    )
    cache_timeout: int = Field(
        default=300,
        ge=0,
        description="Seconds a computed program stays cached",
    )

    model_config = {"extra": "ignore"}

    @field_validator("start_time")
    @classmethod
    def check_start_time(cls, value: str) -> str:
        try:
            hours, minutes = parse_clock(value)
        except InvalidClockTimeError as e:
            raise ValueError(e.message) from e
        if hours > 23:
            raise ValueError("start_time must fall within a single day")
        return f"{hours:02d}:{minutes:02d}"

    @model_validator(mode="after")
    def check_venues(self) -> "ScheduleSettings":
        names = [venue.name for venue in self.venues]
        if len(set(names)) != len(names):
            raise ValueError("Venue names must be unique")
        categories = [c for venue in self.venues for c in venue.categories]
        if len(set(categories)) != len(categories):
            raise ValueError("A category can only be hosted by one venue")
        if (
            self.unmapped_category_policy is UnmappedPolicy.OVERFLOW
            and self.overflow_venue is None
        ):
            raise ValueError("overflow_venue is required by the overflow policy")
        if self.overflow_venue is not None and self.overflow_venue.name in names:
            raise ValueError("overflow_venue must not reuse a venue name")
        return self

    def build_partitioner(self) -> HallPartitioner:
        overflow = self.overflow_venue.to_venue() if self.overflow_venue else None
        return HallPartitioner(
            venues=[venue.to_venue() for venue in self.venues],
            unmapped_policy=self.unmapped_category_policy,
            overflow_venue=overflow,
        )


def get_schedule_settings() -> ScheduleSettings:
    """Read and validate ``settings.PROGRAM_SCHEDULE``.

    Raises:
        ImproperlyConfigured: If the configured values fail validation.
    """
    raw = getattr(settings, "PROGRAM_SCHEDULE", None) or {}
    try:
        return ScheduleSettings.model_validate(raw)
    except ValidationError as e:
        raise ImproperlyConfigured(f"Invalid PROGRAM_SCHEDULE: {e}") from e
