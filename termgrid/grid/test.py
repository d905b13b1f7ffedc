"""Tests for the stacked grid layout engine."""

import pytest
from pydantic import ValidationError

from termgrid.component import TextItem
from termgrid.frame import Frame, FrameStyle
from termgrid.grid import (
    FitPolicy,
    ItemEntry,
    Placement,
    StackedGrid,
    allocate_heights,
    group_columns,
    plan_layout,
    split_width,
)
from termgrid.measure import MeasureCache
from termgrid.style import BorderStyle, block_height, block_width


def _entry(text: str = "x", column: int = 0, expand: bool = False) -> ItemEntry:
    return ItemEntry(TextItem(text), Placement(column=column, expand=expand))


def _lines(count: int) -> str:
    return "\n".join(f"line {i}" for i in range(count))


class TestPlacement:
    """Tests for placement configuration."""

    @pytest.mark.unit
    def test_defaults(self):
        placement = Placement()
        assert placement.column == 0
        assert placement.expand is False

    @pytest.mark.unit
    def test_negative_column_rejected(self):
        with pytest.raises(ValidationError):
            Placement(column=-1)

    @pytest.mark.unit
    def test_immutable(self):
        placement = Placement(column=1)
        with pytest.raises(ValidationError):
            placement.column = 2


class TestGroupColumns:
    """Tests for column grouping."""

    @pytest.mark.unit
    def test_ascending_keys_and_insertion_order(self):
        entries = [
            _entry("a", column=2),
            _entry("b", column=0),
            _entry("c", column=2),
            _entry("d", column=0),
        ]
        groups = group_columns(entries)
        assert list(groups) == [0, 2]
        assert [e.component.content for e in groups[0]] == ["b", "d"]
        assert [e.component.content for e in groups[2]] == ["a", "c"]

    @pytest.mark.unit
    def test_unused_indices_form_no_column(self):
        groups = group_columns([_entry(column=0), _entry(column=5)])
        assert len(groups) == 2

    @pytest.mark.unit
    def test_empty(self):
        assert group_columns([]) == {}


class TestSplitWidth:
    """Tests for column width division."""

    @pytest.mark.unit
    def test_even_split(self):
        assert split_width(90, 3) == [30, 30, 30]

    @pytest.mark.unit
    def test_remainder_goes_to_last_column(self):
        assert split_width(100, 3) == [33, 33, 34]

    @pytest.mark.unit
    @pytest.mark.parametrize("width,count", [(1, 1), (7, 2), (80, 6), (5, 7)])
    def test_columns_fill_width(self, width, count):
        widths = split_width(width, count)
        assert len(widths) == count
        assert sum(widths) == width

    @pytest.mark.unit
    def test_no_columns(self):
        assert split_width(90, 0) == []


class TestAllocateHeights:
    """Tests for per-column height allocation."""

    @pytest.mark.unit
    def test_even_split_without_expansion(self):
        entries = [_entry() for _ in range(3)]
        assert allocate_heights(entries, 9) == [3, 3, 3]

    @pytest.mark.unit
    def test_remainder_goes_to_last_item(self):
        entries = [_entry() for _ in range(3)]
        assert allocate_heights(entries, 10) == [3, 3, 4]

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [1, 2, 3, 4, 7])
    @pytest.mark.parametrize("height", [1, 5, 10, 23])
    def test_non_expanding_column_consumes_height_exactly(self, count, height):
        entries = [_entry() for _ in range(count)]
        assert sum(allocate_heights(entries, height)) == height

    @pytest.mark.unit
    def test_expanding_item_takes_leftover(self):
        entries = [_entry(_lines(3)), _entry(expand=True)]
        assert allocate_heights(entries, 10) == [3, 7]

    @pytest.mark.unit
    def test_expanding_items_share_leftover(self):
        entries = [
            _entry(expand=True),
            _entry(expand=True),
            _entry(_lines(3)),
        ]
        # 10 - 3 = 7 rows for two expanding items: 3 each, remainder to
        # the last expanding one.
        assert allocate_heights(entries, 10) == [3, 4, 3]

    @pytest.mark.unit
    def test_non_expanding_last_item_keeps_natural_height(self):
        entries = [
            _entry(_lines(2)),
            _entry(expand=True),
            _entry(_lines(1)),
        ]
        assert allocate_heights(entries, 12) == [2, 9, 1]

    @pytest.mark.unit
    @pytest.mark.parametrize("height", [4, 10, 17, 31])
    def test_reserved_plus_shares_equal_height(self, height):
        entries = [
            _entry(_lines(1)),
            _entry(expand=True),
            _entry(_lines(2)),
            _entry(expand=True),
            _entry(expand=True),
        ]
        heights = allocate_heights(entries, height)
        reserved = 1 + 2
        k = 3
        per_expand, remainder = divmod(height - reserved, k)
        assert reserved + k * per_expand + remainder == height
        assert sum(heights) == height
        assert heights[1] == heights[3] == per_expand
        assert heights[4] == per_expand + remainder

    @pytest.mark.unit
    def test_overflowing_natural_heights_collapse_expanding_items(self):
        entries = [_entry(_lines(8)), _entry(expand=True)]
        assert allocate_heights(entries, 5) == [8, 0]

    @pytest.mark.unit
    def test_measures_each_component_once(self, fixed_recorder):
        component = fixed_recorder(_lines(2))
        entries = [
            ItemEntry(component, Placement()),
            ItemEntry(TextItem("x"), Placement(expand=True)),
        ]
        cache = MeasureCache()
        allocate_heights(entries, 10, cache)
        allocate_heights(entries, 10, cache)
        assert component.render_calls == 1

    @pytest.mark.unit
    def test_fills_caller_cache(self, fixed_recorder):
        entries = [
            ItemEntry(fixed_recorder(_lines(2)), Placement()),
            ItemEntry(TextItem("x"), Placement(expand=True)),
        ]
        cache = MeasureCache()
        allocate_heights(entries, 10, cache)
        assert len(cache) == 1
        assert cache.misses == 1

    @pytest.mark.unit
    def test_empty_column(self):
        assert allocate_heights([], 10) == []


class TestPlanLayout:
    """Tests for the full layout plan."""

    @pytest.mark.unit
    def test_three_columns(self):
        entries = [_entry(column=i) for i in range(3)]
        plan = plan_layout(entries, 90, 10)

        assert [c.key for c in plan.columns] == [0, 1, 2]
        assert [c.width for c in plan.columns] == [30, 30, 30]
        for column in plan.columns:
            assert len(column.cells) == 1
            assert column.cells[0].height == 10
            assert column.cells[0].width == 30

    @pytest.mark.unit
    def test_expanding_column(self):
        entries = [_entry(_lines(3), column=1), _entry(column=1, expand=True)]
        plan = plan_layout(entries, 90, 10)

        assert len(plan.columns) == 1
        column = plan.columns[0]
        assert column.width == 90
        assert [cell.height for cell in column.cells] == [3, 7]
        assert column.height == 10

    @pytest.mark.unit
    def test_shares_cache_across_columns(self, fixed_recorder):
        shared = fixed_recorder(_lines(2))
        entries = [
            ItemEntry(shared, Placement(column=0)),
            ItemEntry(TextItem("a"), Placement(column=0, expand=True)),
            ItemEntry(shared, Placement(column=1)),
            ItemEntry(TextItem("b"), Placement(column=1, expand=True)),
        ]
        cache = MeasureCache()
        plan = plan_layout(entries, 40, 10, cache)

        assert shared.render_calls == 1
        assert len(cache) == 1
        assert (cache.misses, cache.hits) == (1, 1)
        for column in plan.columns:
            assert [cell.height for cell in column.cells] == [2, 8]

    @pytest.mark.unit
    def test_used_width_matches_assigned_width(self):
        entries = [_entry(column=i) for i in range(4)]
        plan = plan_layout(entries, 83, 5)
        assert plan.used_width == 83


class TestStackedGridState:
    """Tests for grid state handling."""

    @pytest.mark.unit
    def test_unsized_grid_renders_placeholder(self):
        grid = StackedGrid()
        grid.add_item(TextItem("Item 1"))
        assert grid.render() == "Loading..."
        assert grid.layout() is None

    @pytest.mark.unit
    def test_zero_dimension_renders_placeholder(self):
        grid = StackedGrid()
        grid.add_item(TextItem("Item 1"))
        grid.set_size(80, 0)
        assert not grid.is_ready
        assert grid.render() == "Loading..."

    @pytest.mark.unit
    def test_empty_grid_renders_placeholder(self):
        grid = StackedGrid()
        grid.set_size(80, 24)
        assert grid.render() == "Loading..."

    @pytest.mark.unit
    def test_placeholder_from_config(self, monkeypatch):
        monkeypatch.setenv("TERMGRID_PLACEHOLDER", "wait")
        assert StackedGrid().render() == "wait"

    @pytest.mark.unit
    def test_explicit_placeholder(self):
        assert StackedGrid(placeholder="...").render() == "..."

    @pytest.mark.unit
    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            StackedGrid().set_size(-1, 10)

    @pytest.mark.unit
    def test_non_renderable_rejected(self):
        with pytest.raises(TypeError):
            StackedGrid().add_item(42)

    @pytest.mark.unit
    def test_default_placement(self):
        grid = StackedGrid()
        grid.add_item(TextItem("x"))
        assert grid.items[0].placement == Placement(column=0, expand=False)
        assert len(grid) == 1

    @pytest.mark.unit
    def test_resize_returns_independent_copy(self):
        grid = StackedGrid()
        grid.add_item(TextItem("x"))
        sized = grid.resize(40, 5)

        assert sized is not grid
        assert (grid.width, grid.height) == (0, 0)
        assert (sized.width, sized.height) == (40, 5)

        sized.add_item(TextItem("y"))
        assert len(grid) == 1
        assert len(sized) == 2

    @pytest.mark.unit
    def test_fit_policy_from_string(self):
        assert StackedGrid(fit_policy="natural").fit_policy is FitPolicy.NATURAL


class TestStackedGridRender:
    """Tests for stretch-to-fill rendering."""

    @pytest.mark.unit
    def test_three_columns_fill_area(self):
        grid = StackedGrid()
        for i in range(3):
            grid.add_item(TextItem(f"Item {i + 1}"), Placement(column=i))
        grid.set_size(90, 10)

        result = grid.render()
        lines = result.split("\n")
        assert len(lines) == 10
        assert all(block_width(line) == 90 for line in lines)
        assert lines[0] == (
            "Item 1" + " " * 24 + "Item 2" + " " * 24 + "Item 3" + " " * 24
        )

    @pytest.mark.unit
    def test_column_order_follows_index_not_insertion(self):
        grid = StackedGrid()
        grid.add_item(TextItem("right"), Placement(column=3))
        grid.add_item(TextItem("left"), Placement(column=1))
        grid.set_size(20, 1)
        assert grid.render() == "left      right     "

    @pytest.mark.unit
    def test_rows_stack_in_insertion_order(self):
        grid = StackedGrid()
        grid.add_item(TextItem("top"), Placement(column=0))
        grid.add_item(TextItem("bottom"), Placement(column=0))
        grid.set_size(6, 4)
        assert grid.render().split("\n") == ["top   ", "      ", "bottom", "      "]

    @pytest.mark.unit
    def test_resizable_items_get_cell_size(self, sized_recorder):
        recorder = sized_recorder("#")
        grid = StackedGrid()
        grid.add_item(TextItem("a"), Placement(column=0))
        grid.add_item(recorder, Placement(column=1))
        grid.add_item(TextItem("b"), Placement(column=1))
        grid.set_size(90, 11)

        grid.render()
        assert recorder.resize_calls == [(45, 5)]

    @pytest.mark.unit
    def test_expanding_item_heights(self, sized_recorder):
        expanding = sized_recorder("E")
        grid = StackedGrid()
        grid.add_item(TextItem(_lines(3)), Placement(column=1))
        grid.add_item(expanding, Placement(column=1, expand=True))
        grid.set_size(90, 10)

        result = grid.render()
        assert expanding.resize_calls == [(90, 7)]
        lines = result.split("\n")
        assert len(lines) == 10
        assert lines[2].startswith("line 2")
        assert lines[3] == "E" * 90

    @pytest.mark.unit
    def test_oversized_content_clipped_to_cell(self):
        grid = StackedGrid()
        grid.add_item(TextItem("x" * 50 + "\n" + _lines(20)), Placement(column=0))
        grid.add_item(TextItem("y"), Placement(column=1))
        grid.set_size(20, 4)

        result = grid.render()
        assert block_height(result) == 4
        assert block_width(result) == 20
        assert result.split("\n")[0] == "x" * 10 + "y" + " " * 9

    @pytest.mark.unit
    def test_idempotent(self):
        grid = StackedGrid()
        grid.add_item(TextItem(_lines(2)), Placement(column=0))
        grid.add_item(TextItem("z"), Placement(column=0, expand=True))
        grid.add_item(Frame(TextItem("f")), Placement(column=1))
        grid.set_size(40, 12)
        assert grid.render() == grid.render()

    @pytest.mark.unit
    def test_resize_repeatedly(self):
        grid = StackedGrid()
        grid.add_item(TextItem("a"), Placement(column=0))
        grid.add_item(TextItem("b"), Placement(column=1))
        for width, height in [(10, 3), (31, 7), (10, 3)]:
            grid.set_size(width, height)
            result = grid.render()
            assert block_width(result) == width
            assert block_height(result) == height


class TestNesting:
    """Tests for grids and frames nested in grids."""

    @pytest.mark.unit
    def test_inner_grid_receives_cell_size(self, sized_recorder):
        recorder = sized_recorder("#")
        inner = StackedGrid()
        inner.add_item(recorder, Placement(column=0))

        outer = StackedGrid()
        outer.add_item(TextItem("left"), Placement(column=0))
        outer.add_item(inner, Placement(column=1))
        outer.set_size(90, 10)

        result = outer.render()
        assert recorder.resize_calls == [(45, 10)]
        assert result.split("\n")[0] == "left" + " " * 41 + "#" * 45
        # The grid placed in the outer layout is never resized in place.
        assert (inner.width, inner.height) == (0, 0)

    @pytest.mark.unit
    def test_inner_grid_columns_split_cell(self, sized_recorder):
        first = sized_recorder("a")
        second = sized_recorder("b")
        inner = StackedGrid()
        inner.add_item(first, Placement(column=0))
        inner.add_item(second, Placement(column=1))

        outer = StackedGrid()
        outer.add_item(TextItem("top"), Placement(column=0))
        outer.add_item(inner, Placement(column=0))
        outer.set_size(21, 9)

        outer.render()
        assert first.resize_calls == [(10, 5)]
        assert second.resize_calls == [(11, 5)]

    @pytest.mark.unit
    def test_frame_in_grid_gets_inner_area(self, sized_recorder):
        recorder = sized_recorder("#")
        style = FrameStyle(border=BorderStyle.NORMAL, padding=1, border_color=None)
        grid = StackedGrid()
        grid.add_item(Frame(recorder, style), Placement(column=0))
        grid.add_item(TextItem("side"), Placement(column=1))
        grid.set_size(40, 10)

        result = grid.render()
        assert recorder.resize_calls == [(16, 6)]
        lines = result.split("\n")
        assert lines[0] == "┌" + "─" * 18 + "┐" + "side" + " " * 16
        assert lines[9] == "└" + "─" * 18 + "┘" + " " * 20

    @pytest.mark.unit
    def test_framed_grid_in_grid(self, sized_recorder):
        recorder = sized_recorder("#")
        inner = StackedGrid()
        inner.add_item(recorder, Placement(column=0))
        inner.add_item(TextItem("x"), Placement(column=1))
        style = FrameStyle(border=BorderStyle.ROUNDED, padding=0, border_color=None)

        outer = StackedGrid()
        outer.add_item(Frame(inner, style), Placement(column=0))
        outer.set_size(22, 6)

        result = outer.render()
        assert recorder.resize_calls == [(10, 4)]
        assert block_width(result) == 22
        assert block_height(result) == 6


class TestNaturalFitPolicy:
    """Tests for passthrough rendering."""

    @pytest.mark.unit
    def test_items_keep_natural_size(self, sized_recorder):
        recorder = sized_recorder("r")
        grid = StackedGrid(fit_policy=FitPolicy.NATURAL)
        grid.add_item(TextItem("a\nb"), Placement(column=0))
        grid.add_item(recorder, Placement(column=0, expand=True))
        grid.add_item(TextItem("ccc"), Placement(column=1))
        grid.set_size(90, 40)

        result = grid.render()
        assert recorder.resize_calls == []
        assert result.split("\n") == ["accc", "b   ", "r   "]

    @pytest.mark.unit
    def test_unsized_natural_grid_renders_placeholder(self):
        grid = StackedGrid(fit_policy=FitPolicy.NATURAL)
        grid.add_item(TextItem("a"))
        assert grid.render() == "Loading..."
