"""Program service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Apply ordering, venue assignment and scheduling
- Return domain models or domain errors
"""

from program.config import ScheduleSettings
from program.domain.clock import is_past_midnight
from program.domain.errors import CategoryNotFoundError, UnknownCategoryError
from program.domain.models import ItemCount, ItemRegulation, Program
from program.domain.partition import order_items
from program.domain.presenter import present_venue
from program.domain.regulations import DEFAULT_REGULATIONS, RegulationTable
from program.domain.scheduler import build_schedule
from program.logging import get_logger
from program.stores.interfaces import RegistrationStore

logger = get_logger(__name__)


class ProgramService:
    """Service for the event-day program."""

    def __init__(
        self,
        store: RegistrationStore,
        settings: ScheduleSettings,
        regulations: RegulationTable = DEFAULT_REGULATIONS,
    ) -> None:
        self._store = store
        self._settings = settings
        self._regulations = regulations
        self._partitioner = settings.build_partitioner()

    def build_program(self) -> Program:
        """Compute the full program from the current registrations.

        Raises:
            UnmappedCategoryError: If the reject policy is configured and an
                item's category has no venue.
        """
        items = order_items(
            self._store.list_registered_items(),
            self._partitioner.category_order,
            self._settings.item_order,
        )
        partition = self._partitioner.partition(items)

        venues = []
        for venue in self._partitioner.venues:
            slots = build_schedule(
                partition.venues[venue.name],
                self._settings.start_time,
                regulations=self._regulations,
                interval_minutes=self._settings.interval_minutes,
                default_duration=self._settings.default_duration_minutes,
            )
            if slots and is_past_midnight(slots[-1].end_time):
                logger.warning(
                    "venue_runs_past_midnight",
                    venue=venue.name,
                    end_time=slots[-1].end_time,
                )
            venues.append(present_venue(venue, slots))

        program = Program(
            venues=tuple(venues),
            start_time=self._settings.start_time,
            interval_minutes=self._settings.interval_minutes,
            unmapped=partition.unmapped,
        )
        logger.info(
            "program_built",
            venues=len(program.venues),
            performances=program.total_performances,
            unmapped=len(program.unmapped),
        )
        return program

    def item_counts(self, category: str | None = None) -> list[ItemCount]:
        """Return item counts sorted by category rank, then item type ignoring case.

        Raises:
            UnknownCategoryError: If ``category`` is given but not a known category.
        """
        known = self._known_categories()
        if category is not None and category not in known:
            raise UnknownCategoryError()

        rank = {name: index for index, name in enumerate(known)}
        counts = [
            count
            for count in self._store.count_items_by_type()
            if category is None or count.category == category
        ]
        return sorted(
            counts,
            key=lambda count: (
                rank.get(count.category, len(rank)),
                count.item_type.casefold(),
                count.item_type,
            ),
        )

    def regulations_for(self, category: str) -> tuple[ItemRegulation, ...]:
        """Return the regulations for a category.

        Raises:
            CategoryNotFoundError: If the category has no regulations.
        """
        if not self._regulations.has_category(category):
            raise CategoryNotFoundError()
        return self._regulations.for_category(category)

    def _known_categories(self) -> list[str]:
        known = list(self._partitioner.category_order)
        for category in self._regulations.categories():
            if category not in known:
                known.append(category)
        return known
