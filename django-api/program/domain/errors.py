"""Domain error codes for the program module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_CLOCK_TIME = "INVALID_CLOCK_TIME"
    UNMAPPED_CATEGORY = "UNMAPPED_CATEGORY"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidClockTimeError(DomainError):
    """Raised when a wall-clock value is not in HH:MM form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CLOCK_TIME,
            message=f"Invalid clock time {value!r}, expected HH:MM",
        )


class UnmappedCategoryError(DomainError):
    """Raised when items belong to a category no venue hosts."""

    def __init__(self, categories: list[str]) -> None:
        super().__init__(
            code=ErrorCode.UNMAPPED_CATEGORY,
            message="No venue hosts category: " + ", ".join(sorted(categories)),
        )


class UnknownCategoryError(DomainError):
    """Raised when a request filters on a category that does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_CATEGORY,
            message="Unknown school category",
        )


class CategoryNotFoundError(DomainError):
    """Raised when no regulations exist for a category."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CATEGORY_NOT_FOUND,
            message="Category not found",
        )
