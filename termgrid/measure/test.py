"""Tests for natural-size measurement."""

import pytest

from termgrid.component import TextItem
from termgrid.measure import MeasureCache, natural_height


class TestNaturalSize:
    """Tests for the measurement functions."""

    @pytest.mark.unit
    def test_single_line(self):
        assert natural_height(TextItem("hello")) == 1

    @pytest.mark.unit
    def test_multi_line(self):
        assert natural_height(TextItem("a\nb\nc")) == 3

    @pytest.mark.unit
    def test_trailing_newline_counts_a_line(self):
        assert natural_height(TextItem("a\n")) == 2

    @pytest.mark.unit
    def test_empty_render_is_zero(self):
        assert natural_height(TextItem("")) == 0


class TestMeasureCache:
    """Tests for per-render memoization."""

    @pytest.mark.unit
    def test_renders_each_component_once(self, sized_recorder):
        component = sized_recorder("a\nb")
        cache = MeasureCache()

        assert cache.height_of(component) == 2
        assert cache.height_of(component) == 2

        assert component.render_calls == 1
        assert cache.hits == 1
        assert cache.misses == 1
        assert len(cache) == 1

    @pytest.mark.unit
    def test_equal_components_measured_separately(self):
        first = TextItem("a")
        second = TextItem("a")
        cache = MeasureCache()

        cache.height_of(first)
        cache.height_of(second)

        assert cache.misses == 2
