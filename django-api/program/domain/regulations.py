"""Per-category regulations for creative-arts items.

Category A covers Early Years Education: Pre-Primary (A1-A3) and
Lower Primary (A3-A5). Category B covers Primary schools (B1-B10).
"""

from collections.abc import Iterable, Mapping

from program.domain.models import ItemRegulation
from program.domain.value_objects import SchoolCategory

CATEGORY_REGULATIONS: dict[str, tuple[ItemRegulation, ...]] = {
    SchoolCategory.PRE_PRIMARY.value: (
        ItemRegulation("Dramatized Singing Games", "A1", "5 min", 20),
        ItemRegulation("Dramatized Verse (Solo)", "A2", "4 min", 2),
        ItemRegulation("Dramatized Verse (Choral)", "A3", "4 min", 16),
    ),
    SchoolCategory.LOWER_PRIMARY.value: (
        ItemRegulation("Dramatized Verse (Choral)", "A3", "6 min", 18),
        ItemRegulation("Dramatized Solo Verse", "A4", "6 min", 2),
        ItemRegulation("Film for Early Years", "A5", "30 min", None),
    ),
    SchoolCategory.PRIMARY.value: (
        ItemRegulation("Play", "B1", "15 min", 20),
        ItemRegulation("Cultural Creative Dance", "B2", "7 min", 30),
        ItemRegulation("Modern Creative Dance", "B3", "7 min", 9),
        ItemRegulation("Dramatized Verse (Solo)", "B4", "6 min", 2),
        ItemRegulation("Dramatized Verse (Choral)", "B5", "6 min", 18),
        ItemRegulation("Narrative", "B6", "5 min", 4),
        ItemRegulation("Film", "B7", "30 min", None),
        ItemRegulation("Play in Kenyan Sign Language", "B8", "20 min", 20),
        ItemRegulation(
            "Dramatized Dance for Special Needs (Mentally Handicapped)",
            "B9",
            "10 min",
            25,
        ),
        ItemRegulation(
            "Dramatized Dance for Special Needs (Physically Handicapped)",
            "B10",
            "10 min",
            25,
        ),
    ),
}


class RegulationTable:
    """Read-only lookup over category regulations."""

    def __init__(self, regulations: Mapping[str, Iterable[ItemRegulation]]) -> None:
        self._regulations = {
            category: tuple(items) for category, items in regulations.items()
        }

    def categories(self) -> list[str]:
        return list(self._regulations)

    def has_category(self, category: str) -> bool:
        return category in self._regulations

    def for_category(self, category: str) -> tuple[ItemRegulation, ...]:
        """Return the regulations for a category, empty if unknown."""
        return self._regulations.get(category, ())

    def allowed_item_types(self, category: str) -> list[str]:
        return [regulation.item_type for regulation in self.for_category(category)]

    def get(self, category: str, item_type: str) -> ItemRegulation | None:
        """Return the first regulation matching the item type, or None."""
        for regulation in self.for_category(category):
            if regulation.item_type == item_type:
                return regulation
        return None

    def all_item_types(self) -> list[str]:
        """Every item type across categories, without duplicates."""
        seen: dict[str, None] = {}
        for items in self._regulations.values():
            for regulation in items:
                seen.setdefault(regulation.item_type, None)
        return list(seen)


DEFAULT_REGULATIONS = RegulationTable(CATEGORY_REGULATIONS)


def get_allowed_item_types(category: str) -> list[str]:
    return DEFAULT_REGULATIONS.allowed_item_types(category)


def get_item_regulation(category: str, item_type: str) -> ItemRegulation | None:
    return DEFAULT_REGULATIONS.get(category, item_type)
