"""Flattening of CMS entity envelopes.

The CMS wraps every record as ``{"id": ..., "attributes": {...}}`` and every
response as ``{"data": ..., "meta": ...}``. Normalized records are plain dicts
holding ``id`` plus the attributes, exactly as returned.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from content.domain.errors import MalformedResponseError
from content.domain.value_objects import Pagination

Record = dict[str, Any]


def normalize_one(entity: Any) -> Record:
    """Merge ``id`` with the entity's attributes into one flat mapping."""
    if not isinstance(entity, Mapping):
        raise MalformedResponseError(f"Entity is not an object: {entity!r}")
    entity_id = entity.get("id")
    attributes = entity.get("attributes")
    if not isinstance(entity_id, int) or isinstance(entity_id, bool):
        raise MalformedResponseError(f"Entity has no integer id: {entity!r}")
    if not isinstance(attributes, Mapping):
        raise MalformedResponseError(f"Entity {entity_id} has no attributes object")
    if "id" in attributes:
        raise MalformedResponseError(f"Entity {entity_id} has an attribute named 'id'")
    return {"id": entity_id, **attributes}


def normalize_many(entities: Any) -> list[Record]:
    """Normalize every entity, preserving order."""
    if isinstance(entities, (str, bytes)) or not isinstance(entities, Sequence):
        raise MalformedResponseError("Collection data is not a list")
    return [normalize_one(entity) for entity in entities]


def _data(response: Any) -> Any:
    if not isinstance(response, Mapping) or "data" not in response:
        raise MalformedResponseError("Response has no 'data' member")
    return response["data"]


def normalize_single(response: Any) -> Record | None:
    """Normalize a single-entity response. A null ``data`` gives None."""
    data = _data(response)
    if data is None:
        return None
    return normalize_one(data)


def normalize_collection(response: Any) -> list[Record]:
    return normalize_many(_data(response))


def pagination_from_meta(response: Mapping[str, Any]) -> Pagination | None:
    """Return ``meta.pagination`` when the response carries it."""
    meta = response.get("meta") or {}
    block = meta.get("pagination") if isinstance(meta, Mapping) else None
    if not block:
        return None
    try:
        return Pagination(
            page=int(block["page"]),
            page_size=int(block["pageSize"]),
            page_count=int(block["pageCount"]),
            total=int(block["total"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Invalid pagination block: {block!r}") from exc


def unwrap_relation(value: Any) -> Record | list[Record] | None:
    """Normalize a populated relation or media field.

    Accepts the nested ``{"data": ...}`` envelope, a bare entity, a list of
    either, or an already flat record (as found in hand-written fixtures).
    """
    if value is None:
        return None
    if isinstance(value, Mapping) and set(value) <= {"data", "meta"} and "data" in value:
        value = value["data"]
        if value is None:
            return None
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [_flatten(item) for item in value]
    return _flatten(value)


def _flatten(value: Any) -> Record:
    if isinstance(value, Mapping) and "attributes" in value:
        return normalize_one(value)
    if isinstance(value, Mapping) and "id" in value:
        return dict(value)
    raise MalformedResponseError(f"Unrecognised relation value: {value!r}")
