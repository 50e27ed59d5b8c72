"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from program.domain import ItemCount, RegisteredItem


class RegistrationStore(ABC):
    """Interface for reading registered items."""

    @abstractmethod
    def list_registered_items(self) -> list[RegisteredItem]:
        """Return all items in registration order (created_at, then item_code)."""
        ...

    @abstractmethod
    def count_items_by_type(self) -> list[ItemCount]:
        """Return the number of items per (category, item_type), unordered."""
        ...
