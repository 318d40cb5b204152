"""Full-screen gallery modal navigation."""

from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class GalleryModal(Generic[T]):
    """Open/close state and wrapping next/previous over a list of items."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = list(items)
        self.index = 0
        self.is_open = False

    def open(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"No gallery item at position {index}")
        self.index = index
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def next(self) -> None:
        if self._items:
            self.index = (self.index + 1) % len(self._items)

    def previous(self) -> None:
        if self._items:
            self.index = (self.index - 1) % len(self._items)

    @property
    def current(self) -> T | None:
        return self._items[self.index] if self._items else None

    @property
    def counter(self) -> str:
        return f"{self.index + 1} / {len(self._items)}"

    @property
    def has_navigation(self) -> bool:
        return len(self._items) > 1
