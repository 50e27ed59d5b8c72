"""Django ORM implementation of the RegistrationStore."""

from django.db.models import Count

from program.domain import ItemCount, RegisteredItem
from program.models import Item
from program.stores.interfaces import RegistrationStore


class DjangoRegistrationStore(RegistrationStore):
    """Database-backed registration store using Django ORM."""

    def list_registered_items(self) -> list[RegisteredItem]:
        rows = Item.objects.select_related("school").order_by("created_at", "item_code")
        return [
            RegisteredItem(
                item_type=row.item_type,
                item_code=row.item_code,
                school_name=row.school.school_name,
                category=row.school.category,
            )
            for row in rows
        ]

    def count_items_by_type(self) -> list[ItemCount]:
        rows = (
            Item.objects.values("school__category", "item_type")
            .annotate(count=Count("id"))
            .order_by()
        )
        return [
            ItemCount(
                category=row["school__category"],
                item_type=row["item_type"],
                count=row["count"],
            )
            for row in rows
        ]
