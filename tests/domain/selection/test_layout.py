"""Tests for the list layout model."""

import pytest

from scroll_selector.domain.selection.exceptions import InvalidLayoutError
from scroll_selector.domain.selection.layout import ListLayout
from scroll_selector.domain.selection.models import SelectionArea


@pytest.fixture
def layout() -> ListLayout:
    """Four items of growing height in a 50px viewport."""
    return ListLayout(item_heights=(10, 20, 30, 40), viewport_height=50)


class TestGeometry:
    """Test derived layout values."""

    def test_content_height(self, layout: ListLayout):
        assert layout.content_height == 100
        assert layout.max_scroll_offset == 50
        assert layout.item_count == 4

    def test_item_top(self, layout: ListLayout):
        assert layout.item_top(0) == 0
        assert layout.item_top(2) == 30

    def test_short_content_cannot_scroll(self):
        layout = ListLayout(item_heights=(5, 5), viewport_height=50)
        assert layout.max_scroll_offset == 0
        assert layout.last_visible_index() == 1

    def test_rejects_invalid_viewport(self):
        with pytest.raises(InvalidLayoutError):
            ListLayout(item_heights=(10,), viewport_height=0)

    def test_rejects_invalid_item_height(self):
        with pytest.raises(ValueError):
            ListLayout(item_heights=(10, 0), viewport_height=10)


class TestScrolling:
    """Test clamped scrolling."""

    def test_scroll_by(self, layout: ListLayout):
        scrolled, consumed = layout.scroll_by(15)
        assert scrolled.scroll_offset == 15
        assert consumed == 15
        assert layout.scroll_offset == 0

    def test_scroll_clamps_at_bottom(self, layout: ListLayout):
        scrolled, consumed = layout.scroll_by(15)
        scrolled, consumed = scrolled.scroll_by(100)
        assert scrolled.scroll_offset == 50
        assert consumed == 35

    def test_scroll_clamps_at_top(self, layout: ListLayout):
        scrolled, consumed = layout.scroll_by(-10)
        assert scrolled.scroll_offset == 0
        assert consumed == 0

    def test_scroll_to(self, layout: ListLayout):
        scrolled, consumed = layout.scroll_to(40)
        assert scrolled.scroll_offset == 40
        assert consumed == 40


class TestVisibility:
    """Test visible item lookups."""

    def test_visible_range_at_top(self, layout: ListLayout):
        assert layout.first_visible_index() == 0
        assert layout.last_visible_index() == 2

    def test_visible_range_after_scroll(self, layout: ListLayout):
        scrolled, _ = layout.scroll_by(15)
        assert scrolled.first_visible_index() == 1
        assert scrolled.item_offset_in_viewport(1) == -5
        assert scrolled.last_visible_index() == 3

    def test_empty_list(self):
        layout = ListLayout(item_heights=(), viewport_height=10)
        assert layout.first_visible_index() is None
        assert layout.last_visible_index() is None
        assert layout.item_at_ratio(0.5) is None

    def test_item_at_y(self, layout: ListLayout):
        assert layout.item_at_y(0) == 0
        assert layout.item_at_y(10) == 1
        assert layout.item_at_y(49) == 2

    def test_item_at_ratio(self, layout: ListLayout):
        assert layout.item_at_ratio(0.0) == 0
        assert layout.item_at_ratio(0.5) == 1
        assert layout.item_at_ratio(1.0) == 2
        assert layout.item_at_ratio(None) is None

    def test_item_at_ratio_tolerates_rounding_below_zero(self, layout: ListLayout):
        assert layout.item_at_ratio(-1e-16) == 0

    def test_item_at_ratio_in_selection_area(self, layout: ListLayout):
        assert layout.item_at_ratio(0.0, SelectionArea(0.5, 1.0)) == 1

    def test_item_at_ratio_on_short_content(self):
        layout = ListLayout(item_heights=(5, 5), viewport_height=50)
        assert layout.item_at_ratio(1.0) == 1
