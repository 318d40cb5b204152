"""Query-string builder for the CMS REST API.

Parameters use bracketed path notation, e.g.::

    populate[author][populate][avatar]=*
    filters[category][slug][$eq]=news
    sort[0]=publishDate:desc
    pagination[pageSize]=10
"""

from datetime import datetime
from enum import Enum
from typing import Any, Self


class FilterOperator(Enum):
    EQ = "$eq"
    NE = "$ne"
    GT = "$gt"
    GTE = "$gte"
    LT = "$lt"
    LTE = "$lte"
    CONTAINS = "$contains"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


def _key(root: str, *parts: str) -> str:
    return root + "".join(f"[{part}]" for part in parts)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Query:
    """Ordered collection of query parameters for one CMS request."""

    def __init__(self) -> None:
        self._params: list[tuple[str, str]] = []
        self._sort_index = 0

    def populate(self, *path: str) -> Self:
        """Inline a relation; extra names populate nested relations."""
        if not path:
            raise ValueError("populate needs at least one field name")
        parts: list[str] = [path[0]]
        for name in path[1:]:
            parts.extend(["populate", name])
        self._params.append((_key("populate", *parts), "*"))
        return self

    def populate_count(self, relation: str) -> Self:
        """Ask for the number of related records instead of the records."""
        self._params.append((_key("populate", relation), "count"))
        return self

    def where(self, *field_path: str, op: FilterOperator = FilterOperator.EQ, value: Any) -> Self:
        if not field_path:
            raise ValueError("where needs a field name")
        self._params.append((_key("filters", *field_path, op.value), _render(value)))
        return self

    def sort(self, field: str, direction: SortDirection = SortDirection.ASC) -> Self:
        self._params.append((_key("sort", str(self._sort_index)), f"{field}:{direction.value}"))
        self._sort_index += 1
        return self

    def paginate(self, page: int | None = None, page_size: int | None = None) -> Self:
        if page is not None:
            if page < 1:
                raise ValueError("page must be positive")
            self._params.append(("pagination[page]", str(page)))
        if page_size is not None:
            if page_size < 1:
                raise ValueError("page_size must be positive")
            self._params.append(("pagination[pageSize]", str(page_size)))
        return self

    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    def __repr__(self) -> str:
        return f"Query({self._params!r})"
