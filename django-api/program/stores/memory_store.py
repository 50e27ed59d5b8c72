"""In-memory RegistrationStore for tests and scripts."""

from collections import Counter
from collections.abc import Iterable

from program.domain import ItemCount, RegisteredItem
from program.stores.interfaces import RegistrationStore


class InMemoryRegistrationStore(RegistrationStore):
    """Holds items in the order they were added."""

    def __init__(self, items: Iterable[RegisteredItem] = ()) -> None:
        self._items = list(items)

    def add(self, item: RegisteredItem) -> None:
        self._items.append(item)

    def list_registered_items(self) -> list[RegisteredItem]:
        return list(self._items)

    def count_items_by_type(self) -> list[ItemCount]:
        counts = Counter((item.category, item.item_type) for item in self._items)
        return [
            ItemCount(category=category, item_type=item_type, count=count)
            for (category, item_type), count in counts.items()
        ]
