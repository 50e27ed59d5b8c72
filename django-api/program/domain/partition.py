"""Assignment of registered items to venues.

The category-to-venue table is configuration; nothing here decides which hall
hosts which category.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from program.domain.errors import UnmappedCategoryError
from program.domain.models import RegisteredItem, Venue
from program.logging import get_logger

logger = get_logger(__name__)


class UnmappedPolicy(str, Enum):
    """What to do with items whose category no venue hosts."""

    DROP = "drop"
    OVERFLOW = "overflow"
    REJECT = "reject"


class ItemOrder(str, Enum):
    """Performance order applied before partitioning."""

    REGISTRATION = "registration"
    CATEGORY = "category"


@dataclass(frozen=True)
class PartitionResult:
    """Items per venue name, plus whatever no venue accepted."""

    venues: dict[str, tuple[RegisteredItem, ...]]
    unmapped: tuple[RegisteredItem, ...] = field(default=())


def order_items(
    items: Iterable[RegisteredItem],
    category_order: Sequence[str],
    policy: ItemOrder = ItemOrder.REGISTRATION,
) -> list[RegisteredItem]:
    """Return items in performance order.

    ``REGISTRATION`` keeps the input order. ``CATEGORY`` sorts by the rank of
    the category in ``category_order`` (unknown categories last) and then by
    item type, ignoring case; ties keep their input order.
    """
    items = list(items)
    if policy is ItemOrder.REGISTRATION:
        return items
    rank = {category: index for index, category in enumerate(category_order)}
    return sorted(
        items,
        key=lambda item: (
            rank.get(item.category, len(rank)),
            item.item_type.casefold(),
        ),
    )


class HallPartitioner:
    """Splits a flat item list into per-venue lists, preserving order."""

    def __init__(
        self,
        venues: Sequence[Venue],
        unmapped_policy: UnmappedPolicy = UnmappedPolicy.DROP,
        overflow_venue: Venue | None = None,
    ) -> None:
        if unmapped_policy is UnmappedPolicy.OVERFLOW and overflow_venue is None:
            raise ValueError("Overflow policy requires an overflow venue")
        self._venues = tuple(venues)
        self._policy = unmapped_policy
        self._overflow_venue = overflow_venue
        self._venue_for_category: dict[str, str] = {}
        for venue in self._venues:
            for category in venue.categories:
                if category in self._venue_for_category:
                    raise ValueError(
                        f"Category {category!r} is assigned to more than one venue"
                    )
                self._venue_for_category[category] = venue.name
        if overflow_venue is not None and overflow_venue.name in {
            venue.name for venue in self._venues
        }:
            raise ValueError("Overflow venue must not share a name with another venue")

    @property
    def venues(self) -> tuple[Venue, ...]:
        """Venues in display order, including the overflow venue when in use."""
        if self._policy is UnmappedPolicy.OVERFLOW:
            return (*self._venues, self._overflow_venue)
        return self._venues

    @property
    def category_order(self) -> list[str]:
        return list(self._venue_for_category)

    def venue_for(self, category: str) -> str | None:
        return self._venue_for_category.get(category)

    def partition(self, items: Iterable[RegisteredItem]) -> PartitionResult:
        """Group items by venue.

        Raises:
            UnmappedCategoryError: If the policy is ``REJECT`` and any item's
                category has no venue.
        """
        grouped: dict[str, list[RegisteredItem]] = {
            venue.name: [] for venue in self.venues
        }
        unmapped: list[RegisteredItem] = []

        for item in items:
            venue_name = self._venue_for_category.get(item.category)
            if venue_name is not None:
                grouped[venue_name].append(item)
            elif self._policy is UnmappedPolicy.OVERFLOW:
                grouped[self._overflow_venue.name].append(item)
            else:
                unmapped.append(item)

        if unmapped:
            categories = sorted({item.category for item in unmapped})
            if self._policy is UnmappedPolicy.REJECT:
                raise UnmappedCategoryError(categories)
            logger.warning(
                "items_dropped_unmapped_category",
                count=len(unmapped),
                categories=categories,
            )

        return PartitionResult(
            venues={name: tuple(venue_items) for name, venue_items in grouped.items()},
            unmapped=tuple(unmapped),
        )
