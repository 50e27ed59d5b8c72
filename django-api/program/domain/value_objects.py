"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class SchoolCategory(str, Enum):
    """School categories a registration can belong to."""

    PRE_PRIMARY = "Pre-Primary"
    LOWER_PRIMARY = "Lower Primary"
    PRIMARY = "Primary"

    @property
    def abbreviation(self) -> str:
        return CATEGORY_ABBREVIATIONS[self.value]


CATEGORY_ABBREVIATIONS: dict[str, str] = {
    SchoolCategory.PRE_PRIMARY.value: "PPR",
    SchoolCategory.LOWER_PRIMARY.value: "LPR",
    SchoolCategory.PRIMARY.value: "PRI",
}


def school_abbreviation(school_name: str) -> str:
    """Abbreviate a school name for use in item codes.

    A single word keeps its first three letters. Several words keep the first
    two letters of the first word plus the initial of every other word, capped
    at four characters ("Sisoni Academy" -> "SIA", "Spring Academy" -> "SPA").
    """
    words = school_name.split()
    if not words:
        return "UNK"
    if len(words) == 1:
        return words[0][:3].upper()
    initials = "".join(word[0] for word in words[1:])
    return (words[0][:2] + initials).upper()[:4]


@dataclass(frozen=True)
class ItemCode:
    """Identifier printed on a registered performance, e.g. ``SIA-PRI-01``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Item code cannot be empty")

    @classmethod
    def generate(cls, school_name: str, category: str, item_number: int) -> Self:
        if item_number < 0:
            raise ValueError("Item number cannot be negative")
        category_abbr = CATEGORY_ABBREVIATIONS.get(category, "UNK")
        return cls(
            value=f"{school_abbreviation(school_name)}-{category_abbr}-{item_number:02d}"
        )

    def __str__(self) -> str:
        return self.value
