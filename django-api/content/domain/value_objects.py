"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self


class EventType(Enum):
    """Kinds of academy events."""

    COMPETITION = "competition"
    PERFORMANCE = "performance"
    WORKSHOP = "workshop"
    RECITAL = "recital"
    MASTERCLASS = "masterclass"
    OTHER = "other"


class GalleryCategory(Enum):
    """Categories a gallery image can be filed under."""

    PERFORMANCE = "performance"
    CLASS = "class"
    COMPETITION = "competition"
    EVENT = "event"
    BEHIND_SCENES = "behind-scenes"
    OTHER = "other"


class ButtonVariant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    GHOST = "ghost"


class ButtonSize(Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_number(cls, value: int | float | str) -> Self:
        return cls(amount=Decimal(str(value)))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Order:
    """Non-negative manual sort position."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Order cannot be negative")


@dataclass(frozen=True)
class Rating:
    """Star rating between 1 and 5 inclusive."""

    MIN = 1
    MAX = 5

    value: int

    def __post_init__(self) -> None:
        if not self.MIN <= self.value <= self.MAX:
            raise ValueError(f"Rating must be between {self.MIN} and {self.MAX}")


@dataclass(frozen=True)
class Pagination:
    """Pagination block returned in a collection response's meta."""

    page: int
    page_size: int
    page_count: int
    total: int

    def __post_init__(self) -> None:
        for name in ("page", "page_size", "page_count", "total"):
            if getattr(self, name) < 0:
                raise ValueError(f"Pagination {name} cannot be negative")
