"""Tests for services.carousel."""

from storefront.services.carousel import next_slide, previous_slide


class TestCarousel:
    def test_next_wraps(self):
        assert next_slide(0, 3) == 1
        assert next_slide(2, 3) == 0

    def test_previous_wraps(self):
        assert previous_slide(1, 3) == 0
        assert previous_slide(0, 3) == 2

    def test_single_slide_stays(self):
        assert next_slide(0, 1) == 0
        assert previous_slide(0, 1) == 0

    def test_no_slides(self):
        assert next_slide(0, 0) == 0
        assert previous_slide(0, 0) == 0
