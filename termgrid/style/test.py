"""Tests for text block styling."""

import pytest

from termgrid.style import (
    RESET,
    BorderStyle,
    block_height,
    block_width,
    cell_width,
    clean_line,
    colorize,
    constrain_width,
    decorate,
    fit_block,
    join_horizontal,
    join_vertical,
    lines_of,
    parse_color,
    strip_ansi,
    truncate,
)

RED = "\x1b[31m"


class TestMeasurement:
    """Tests for cell width and line counting."""

    @pytest.mark.unit
    def test_plain_width(self):
        assert cell_width("hello") == 5

    @pytest.mark.unit
    def test_ansi_sequences_take_no_cells(self):
        assert cell_width(f"{RED}hello{RESET}") == 5
        assert strip_ansi(f"{RED}hi{RESET}") == "hi"

    @pytest.mark.unit
    def test_wide_characters_take_two_cells(self):
        assert cell_width("日本") == 4

    @pytest.mark.unit
    def test_empty_block_has_no_lines(self):
        assert lines_of("") == []
        assert block_height("") == 0
        assert block_width("") == 0

    @pytest.mark.unit
    def test_block_dimensions(self):
        block = "ab\nabcd\n"
        assert block_height(block) == 3
        assert block_width(block) == 4


class TestTruncate:
    """Tests for clipping a single line."""

    @pytest.mark.unit
    def test_short_line_unchanged(self):
        assert truncate("abc", 5) == "abc"

    @pytest.mark.unit
    def test_long_line_clipped(self):
        assert truncate("abcdef", 3) == "abc"

    @pytest.mark.unit
    def test_zero_width(self):
        assert truncate("abc", 0) == ""

    @pytest.mark.unit
    def test_styled_line_keeps_escapes_and_resets(self):
        result = truncate(f"{RED}abcdef{RESET}", 2)
        assert strip_ansi(result) == "ab"
        assert result.startswith(RED)
        assert result.endswith(RESET)

    @pytest.mark.unit
    def test_wide_character_not_split(self):
        assert truncate("日本", 3) == "日"


class TestFitBlock:
    """Tests for clipping and padding whole blocks."""

    @pytest.mark.unit
    def test_pads_to_exact_size(self):
        result = fit_block("ab", 4, 3)
        assert result == "ab  \n    \n    "

    @pytest.mark.unit
    def test_clips_to_exact_size(self):
        result = fit_block("abcdef\n1\n2\n3", 3, 2)
        assert result == "abc\n1  "

    @pytest.mark.unit
    def test_zero_height_is_empty(self):
        assert fit_block("abc", 3, 0) == ""

    @pytest.mark.unit
    def test_constrain_width_keeps_line_count(self):
        result = constrain_width("a\nabcdef", 3)
        assert result == "a  \nabc"

    @pytest.mark.unit
    def test_tab_occupies_cells_up_to_next_stop(self):
        result = fit_block("a\tb", 12, 1)
        assert result == "a       b   "
        assert cell_width(result) == 12

    @pytest.mark.unit
    def test_tab_clipped_like_spaces(self):
        assert constrain_width("a\tb", 4) == "a   "

    @pytest.mark.unit
    def test_control_characters_dropped(self):
        assert fit_block("ab\rc\x07", 4, 1) == "abc "


class TestCleanLine:
    """Tests for tab expansion and control character removal."""

    @pytest.mark.unit
    def test_expands_tabs_to_stops(self):
        assert clean_line("\tx") == " " * 8 + "x"
        assert clean_line("abc\tx") == "abc     x"

    @pytest.mark.unit
    def test_escape_sequences_take_no_cells(self):
        assert clean_line(f"{RED}a\tb{RESET}") == f"{RED}a       b{RESET}"

    @pytest.mark.unit
    def test_cell_width_counts_expanded_tabs(self):
        assert cell_width("a\tb") == 9

    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        assert clean_line("hello 世界") == "hello 世界"


class TestJoining:
    """Tests for vertical and horizontal joins."""

    @pytest.mark.unit
    def test_join_vertical_skips_empty_blocks(self):
        assert join_vertical(["a", "", "b\nc"]) == "a\nb\nc"

    @pytest.mark.unit
    def test_join_horizontal_top_aligned(self):
        result = join_horizontal(["ab\ncd\nef", "X"])
        assert result == "abX\ncd \nef "

    @pytest.mark.unit
    def test_join_horizontal_pads_ragged_lines(self):
        result = join_horizontal(["a\nabc", "Z\nZ"])
        assert result == "a  Z\nabcZ"

    @pytest.mark.unit
    def test_join_horizontal_empty(self):
        assert join_horizontal([]) == ""


class TestColour:
    """Tests for ANSI colouring through rich."""

    @pytest.mark.unit
    def test_disabled_is_noop(self):
        assert colorize("abc", foreground="red", enabled=False) == "abc"

    @pytest.mark.unit
    def test_no_colour_is_noop(self):
        assert colorize("abc", enabled=True) == "abc"

    @pytest.mark.unit
    def test_enabled_wraps_each_line(self):
        result = colorize("ab\ncd", foreground="#874BFD", enabled=True)
        lines = result.split("\n")
        assert len(lines) == 2
        assert all("\x1b[" in line for line in lines)
        assert strip_ansi(result) == "ab\ncd"
        assert cell_width(lines[0]) == 2

    @pytest.mark.unit
    def test_parse_color_rejects_garbage(self):
        assert parse_color("#874BFD") == "#874BFD"
        with pytest.raises(ValueError):
            parse_color("not-a-colour")


class TestDecorate:
    """Tests for borders and padding."""

    @pytest.mark.unit
    def test_rounded_border_with_padding(self):
        result = decorate("hi", BorderStyle.ROUNDED, padding=1, enabled=False)
        assert result.split("\n") == [
            "╭────╮",
            "│    │",
            "│ hi │",
            "│    │",
            "╰────╯",
        ]

    @pytest.mark.unit
    def test_overhead_matches_thickness_and_padding(self):
        block = fit_block("x", 5, 3)
        result = decorate(block, BorderStyle.DOUBLE, padding=2, enabled=False)
        assert block_width(result) == 5 + 2 * (1 + 2)
        assert block_height(result) == 3 + 2 * (1 + 2)

    @pytest.mark.unit
    def test_no_border_only_pads(self):
        result = decorate("ab", BorderStyle.NONE, padding=1, enabled=False)
        assert result == "    \n ab \n    "

    @pytest.mark.unit
    def test_ragged_lines_squared_off(self):
        result = decorate("a\nabc", BorderStyle.NORMAL, enabled=False)
        assert result.split("\n") == ["┌───┐", "│a  │", "│abc│", "└───┘"]

    @pytest.mark.unit
    def test_border_thickness(self):
        assert BorderStyle.NONE.thickness == 0
        assert BorderStyle.HIDDEN.thickness == 1
        assert BorderStyle.NONE.glyphs is None
