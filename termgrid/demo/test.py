"""Tests for the example layouts."""

import pytest

from termgrid.demo import build_demo, list_demos, render_demo
from termgrid.grid import StackedGrid
from termgrid.style import block_height, block_width


class TestDemoRegistry:
    """Tests for demo lookup."""

    @pytest.mark.unit
    def test_lists_all_demos(self):
        assert list_demos() == ["basic", "frames", "expanded"]

    @pytest.mark.unit
    def test_build_returns_fresh_unsized_grid(self):
        first = build_demo("basic")
        second = build_demo("basic")
        assert isinstance(first, StackedGrid)
        assert first is not second
        assert not first.is_ready

    @pytest.mark.unit
    def test_unknown_demo(self):
        with pytest.raises(KeyError, match="Available"):
            build_demo("nope")


class TestDemoRendering:
    """Tests for rendering the demos once."""

    @pytest.mark.integration
    @pytest.mark.parametrize("name", ["basic", "frames", "expanded"])
    def test_fills_requested_area(self, name):
        result = render_demo(name, 90, 24)
        assert block_width(result) == 90
        assert block_height(result) == 24

    @pytest.mark.integration
    def test_color_off_strips_escapes(self, monkeypatch):
        monkeypatch.setenv("TERMGRID_COLOR", "1")
        assert "\x1b[" in render_demo("basic", 90, 10)
        plain = render_demo("basic", 90, 10, color=False)
        assert "\x1b[" not in plain
        assert block_width(plain) == 90

    @pytest.mark.integration
    def test_basic_columns(self):
        lines = render_demo("basic", 90, 10).split("\n")
        assert lines[0].index("Item 2") == 30
        assert lines[0].index("Item 3") == 60

    @pytest.mark.integration
    def test_expanded_middle_column(self):
        grid = build_demo("expanded")
        grid.set_size(90, 24)
        plan = grid.layout()

        middle = plan.columns[1]
        # The non-expanding frame keeps its natural 5 lines; the two
        # expanding frames share the remaining 19.
        assert [cell.height for cell in middle.cells] == [9, 10, 5]
        right = plan.columns[2]
        assert [cell.height for cell in right.cells] == [8, 8, 8]
