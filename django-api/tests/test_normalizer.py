"""Unit tests for entity envelope normalization.

Run with: pytest tests/test_normalizer.py -v
"""

import pytest
from payloads import collection, entity, media, single

from content.domain.errors import MalformedResponseError
from content.domain.value_objects import Pagination
from content.transport.normalizer import (
    normalize_collection,
    normalize_many,
    normalize_one,
    normalize_single,
    pagination_from_meta,
    unwrap_relation,
)


class TestNormalizeOne:
    def test_merges_id_with_attributes(self):
        record = normalize_one(entity(7, title="Spring Recital", featured=True))

        assert record == {"id": 7, "title": "Spring Recital", "featured": True}

    def test_keys_are_id_plus_attribute_keys(self):
        attributes = {"name": "Ballet", "slug": "ballet", "color": "#000", "extra": None}

        record = normalize_one({"id": 3, "attributes": attributes})

        assert set(record) == {"id"} | set(attributes)

    def test_nested_values_are_passed_through_untouched(self):
        image = media(1, "/uploads/a.png")

        record = normalize_one(entity(1, image=image))

        assert record["image"] is image

    def test_attribute_named_id_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            normalize_one({"id": 1, "attributes": {"id": 2}})

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {"attributes": {}},
            {"id": "1", "attributes": {}},
            {"id": True, "attributes": {}},
            {"id": 1},
            {"id": 1, "attributes": []},
        ],
    )
    def test_malformed_entities_are_rejected(self, payload):
        with pytest.raises(MalformedResponseError):
            normalize_one(payload)


class TestNormalizeMany:
    def test_preserves_order_and_length(self):
        entities = [entity(i, order=10 - i) for i in (5, 2, 9, 1)]

        records = normalize_many(entities)

        assert [r["id"] for r in records] == [5, 2, 9, 1]
        assert len(records) == len(entities)

    def test_empty_collection(self):
        assert normalize_many([]) == []

    def test_non_list_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            normalize_many({"id": 1, "attributes": {}})


class TestResponses:
    def test_normalize_collection_unwraps_data(self):
        assert normalize_collection(collection(entity(1, a=1))) == [{"id": 1, "a": 1}]

    def test_normalize_single_unwraps_data(self):
        assert normalize_single(single(entity(1, title="Hero"))) == {"id": 1, "title": "Hero"}

    def test_normalize_single_null_data(self):
        assert normalize_single(single(None)) is None

    def test_response_without_data_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            normalize_collection({"error": {"status": 403}})

    def test_pagination_is_read_from_meta(self):
        response = collection(pagination={"page": 2, "pageSize": 10, "pageCount": 3, "total": 25})

        assert pagination_from_meta(response) == Pagination(
            page=2, page_size=10, page_count=3, total=25
        )

    def test_pagination_absent(self):
        assert pagination_from_meta(collection()) is None
        assert pagination_from_meta({"data": []}) is None

    def test_incomplete_pagination_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            pagination_from_meta({"data": [], "meta": {"pagination": {"page": 1}}})


class TestUnwrapRelation:
    def test_single_envelope(self):
        assert unwrap_relation({"data": entity(1, name="Jane")}) == {"id": 1, "name": "Jane"}

    def test_list_envelope(self):
        value = {"data": [entity(1, name="a"), entity(2, name="b")]}

        assert unwrap_relation(value) == [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]

    def test_null_envelope_and_missing_value(self):
        assert unwrap_relation({"data": None}) is None
        assert unwrap_relation(None) is None

    def test_bare_entity_and_flat_record(self):
        assert unwrap_relation(entity(1, url="/a.png")) == {"id": 1, "url": "/a.png"}
        assert unwrap_relation({"id": 1, "url": "/a.png"}) == {"id": 1, "url": "/a.png"}

    def test_unrecognised_value_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            unwrap_relation({"name": "no id"})
