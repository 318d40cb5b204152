"""Unit tests for gallery modal navigation."""

import pytest

from content.handlers.gallery import GalleryModal


class TestGalleryModal:
    def test_open_and_close(self):
        modal = GalleryModal(["a", "b", "c"])

        modal.open(1)
        assert modal.is_open
        assert modal.current == "b"
        assert modal.counter == "2 / 3"

        modal.close()
        assert not modal.is_open

    def test_next_wraps_from_last_to_first(self):
        modal = GalleryModal(["a", "b"])
        modal.open(1)

        modal.next()

        assert modal.current == "a"

    def test_previous_wraps_from_first_to_last(self):
        modal = GalleryModal(["a", "b", "c"])
        modal.open(0)

        modal.previous()

        assert modal.current == "c"
        assert modal.counter == "3 / 3"

    def test_open_out_of_range(self):
        with pytest.raises(IndexError):
            GalleryModal(["a"]).open(1)

    def test_navigation_on_empty_gallery_is_a_no_op(self):
        modal = GalleryModal([])

        modal.next()
        modal.previous()

        assert modal.current is None
        assert not modal.has_navigation
