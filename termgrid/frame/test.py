"""Tests for the frame decorator."""

import pytest
from pydantic import ValidationError

from termgrid.component import TextItem
from termgrid.frame import Frame, FrameStyle
from termgrid.style import BorderStyle, block_height, block_width, strip_ansi


@pytest.fixture
def plain_style():
    """Rounded border, padding 1, no colour."""
    return FrameStyle(border=BorderStyle.ROUNDED, padding=1, border_color=None)


class TestFrameStyle:
    """Tests for decoration metrics."""

    @pytest.mark.unit
    def test_overhead(self, plain_style):
        assert plain_style.horizontal_overhead == 4
        assert plain_style.vertical_overhead == 4

    @pytest.mark.unit
    def test_borderless_overhead(self):
        style = FrameStyle(border=BorderStyle.NONE, padding=2)
        assert style.horizontal_overhead == 4

    @pytest.mark.unit
    def test_negative_padding_rejected(self):
        with pytest.raises(ValidationError):
            FrameStyle(padding=-1)

    @pytest.mark.unit
    def test_invalid_colour_rejected(self):
        with pytest.raises(ValidationError):
            FrameStyle(border_color="definitely-not-a-colour")

    @pytest.mark.unit
    def test_style_is_frozen(self, plain_style):
        with pytest.raises(ValidationError):
            plain_style.padding = 3

    @pytest.mark.unit
    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TERMGRID_BORDER_STYLE", "double")
        monkeypatch.setenv("TERMGRID_FRAME_PADDING", "0")
        monkeypatch.setenv("TERMGRID_BORDER_COLOR", "red")
        style = FrameStyle.from_environment()
        assert style.border is BorderStyle.DOUBLE
        assert style.padding == 0
        assert style.border_color == "red"


class TestInnerSize:
    """Tests for inner area computation."""

    @pytest.mark.unit
    def test_unsized_is_zero(self, plain_style):
        assert Frame(TextItem("x"), plain_style).inner_size() == (0, 0)

    @pytest.mark.unit
    def test_subtracts_overhead(self, plain_style):
        frame = Frame(TextItem("x"), plain_style).resize(20, 10)
        assert frame.inner_size() == (16, 6)

    @pytest.mark.unit
    def test_never_negative(self, plain_style):
        frame = Frame(TextItem("x"), plain_style).resize(3, 2)
        assert frame.inner_size() == (0, 0)

    @pytest.mark.unit
    def test_negative_size_rejected(self, plain_style):
        with pytest.raises(ValueError):
            Frame(TextItem("x"), plain_style, width=-1)

    @pytest.mark.unit
    def test_non_renderable_child_rejected(self, plain_style):
        with pytest.raises(TypeError):
            Frame(object(), plain_style)


class TestResize:
    """Tests for copy-on-resize semantics."""

    @pytest.mark.unit
    def test_resize_returns_new_frame(self, plain_style):
        frame = Frame(TextItem("x"), plain_style)
        sized = frame.resize(20, 10)
        assert sized is not frame
        assert (frame.width, frame.height) == (0, 0)
        assert (sized.width, sized.height) == (20, 10)

    @pytest.mark.unit
    def test_renders_of_different_sizes_do_not_interfere(self, plain_style):
        frame = Frame(TextItem("x"), plain_style)
        small = frame.resize(10, 5)
        large = frame.resize(30, 8)
        small_text = small.render()
        large_text = large.render()
        assert (block_width(small_text), block_height(small_text)) == (10, 5)
        assert (block_width(large_text), block_height(large_text)) == (30, 8)
        assert small.render() == small_text

    @pytest.mark.unit
    def test_with_border_color(self, plain_style):
        frame = Frame(TextItem("x"), plain_style)
        recoloured = frame.with_border_color("#FF0000")
        assert frame.style.border_color is None
        assert recoloured.style.border_color == "#FF0000"
        assert recoloured.style.padding == 1


class TestRender:
    """Tests for frame rendering."""

    @pytest.mark.unit
    def test_unsized_wraps_natural_size(self, plain_style):
        result = Frame(TextItem("Item"), plain_style).render()
        assert result.split("\n") == [
            "╭──────╮",
            "│      │",
            "│ Item │",
            "│      │",
            "╰──────╯",
        ]

    @pytest.mark.unit
    def test_fixed_child_clipped_and_padded(self, plain_style):
        child = TextItem("x" * 30 + "\n" + "\n".join("row" for _ in range(10)))
        result = Frame(child, plain_style).resize(20, 10).render()
        lines = result.split("\n")

        assert len(lines) == 10
        assert all(block_width(line) == 20 for line in lines)
        assert lines[0] == "╭" + "─" * 18 + "╮"
        assert lines[1] == "│" + " " * 18 + "│"
        assert lines[2] == "│ " + "x" * 16 + " │"
        assert lines[3] == "│ row" + " " * 13 + " │"
        assert lines[7] == "│ row" + " " * 13 + " │"
        assert lines[8] == "│" + " " * 18 + "│"
        assert lines[9] == "╰" + "─" * 18 + "╯"

    @pytest.mark.unit
    def test_fixed_child_not_resized(self, plain_style, fixed_recorder):
        child = fixed_recorder("hello")
        Frame(child, plain_style).resize(20, 10).render()
        assert child.render_calls == 1

    @pytest.mark.unit
    def test_resizable_child_receives_inner_size(self, plain_style, sized_recorder):
        child = sized_recorder("#")
        result = Frame(child, plain_style).resize(20, 10).render()

        assert child.resize_calls == [(16, 6)]
        lines = result.split("\n")
        assert lines[2] == "│ " + "#" * 16 + " │"
        assert lines[7] == "│ " + "#" * 16 + " │"

    @pytest.mark.unit
    def test_too_small_for_decoration_is_clipped(self, plain_style):
        result = Frame(TextItem("x"), plain_style).resize(3, 2).render()
        assert block_width(result) == 3
        assert block_height(result) == 2

    @pytest.mark.unit
    def test_colour_applies_to_border_only(self, monkeypatch):
        monkeypatch.setenv("TERMGRID_COLOR", "1")
        style = FrameStyle(border_color="#874BFD")
        result = Frame(TextItem("Item"), style).resize(12, 5).render()

        assert "\x1b[" in result
        plain = strip_ansi(result).split("\n")
        assert plain[2] == "│ Item     │"
        assert all(block_width(line) == 12 for line in result.split("\n"))

    @pytest.mark.unit
    def test_idempotent(self, plain_style):
        frame = Frame(TextItem("abc"), plain_style).resize(15, 7)
        assert frame.render() == frame.render()
