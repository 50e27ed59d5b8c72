"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models

from program.domain.regulations import DEFAULT_REGULATIONS
from program.domain.value_objects import ItemCode, SchoolCategory


class School(models.Model):
    """Persistence model for a school's registration in one category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    school_name = models.CharField(max_length=200)
    category = models.CharField(
        max_length=50,
        choices=[(category.value, category.value) for category in SchoolCategory],
    )
    teacher_name = models.CharField(max_length=100)
    phone_number = models.CharField(max_length=20)
    total_items = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["school_name", "category"],
                name="unique_school_per_category",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.school_name} ({self.category})"


class Item(models.Model):
    """Persistence model for a registered performance item."""

    class Language(models.TextChoices):
        ENGLISH = "English"
        FRENCH = "French"
        GERMAN = "German"

    class Status(models.TextChoices):
        REGISTERED = "Registered"
        FILES_SUBMITTED = "Files Submitted"
        UNDER_REVIEW = "Under Review"
        ADJUDICATED = "Adjudicated"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="items")
    item_type = models.CharField(
        max_length=100,
        choices=[(t, t) for t in DEFAULT_REGULATIONS.all_item_types()],
    )
    item_code = models.CharField(max_length=20, unique=True, blank=True)
    language = models.CharField(
        max_length=20, choices=Language.choices, blank=True, null=True
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.REGISTERED
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "item_code"]
        indexes = [
            models.Index(fields=["school"], name="program_ite_school__idx"),
            models.Index(fields=["created_at"], name="program_ite_created_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        if not self.item_code:
            self.item_code = str(
                ItemCode.generate(
                    self.school.school_name,
                    self.school.category,
                    self._next_item_number(),
                )
            )
        super().save(*args, **kwargs)

    def _next_item_number(self) -> int:
        """One past the highest numeric suffix among the school's item codes."""
        codes = Item.objects.filter(school_id=self.school_id).values_list(
            "item_code", flat=True
        )
        suffixes = [code.rsplit("-", 1)[-1] for code in codes]
        numbers = [int(s) for s in suffixes if s.isascii() and s.isdigit()]
        return max(numbers, default=0) + 1

    def __str__(self) -> str:
        return f"{self.item_code} - {self.item_type}"
