from dataclasses import dataclass
from typing import Generic, TypeVar

from content.domain.value_objects import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a collection plus the CMS pagination meta, if any."""

    items: list[T]
    pagination: Pagination | None = None
