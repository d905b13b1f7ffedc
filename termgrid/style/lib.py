"""Text block primitives for character-cell layouts.

A *block* is a plain string whose lines are separated by ``\\n``. Widths are
measured in terminal cells: ANSI escape sequences occupy no cells and wide
(East Asian) characters occupy two. Every helper here is pure and returns
new strings; nothing reflows text, content that does not fit is clipped.

Colour rendering is delegated to ``rich`` and only applied when colour
output is enabled (see ``termgrid.config.color_enabled``).
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from enum import Enum

from rich.color import Color, ColorParseError, ColorSystem
from rich.style import Style
from wcwidth import wcwidth

from termgrid.config import color_enabled

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_ANSI_SPLIT = re.compile(r"(\x1b\[[0-9;?]*[ -/]*[@-~])")
RESET = "\x1b[0m"
TAB_SIZE = 8


# =============================================================================
# Measurement
# =============================================================================


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE.sub("", text)


def _char_width(char: str) -> int:
    # Control characters report -1, combining marks 0.
    return max(wcwidth(char), 0)


def clean_line(line: str) -> str:
    """Expand tabs and drop other control characters.

    Tabs stop every ``TAB_SIZE`` cells, counted from the start of the line.
    Escape sequences are kept and occupy no cells.
    """
    pieces: list[str] = []
    column = 0
    for index, part in enumerate(_ANSI_SPLIT.split(line)):
        if index % 2:
            pieces.append(part)
            continue
        for char in part:
            if char == "\t":
                spaces = TAB_SIZE - column % TAB_SIZE
                pieces.append(" " * spaces)
                column += spaces
            elif unicodedata.category(char) != "Cc":
                pieces.append(char)
                column += _char_width(char)
    return "".join(pieces)


def cell_width(line: str) -> int:
    """Number of terminal cells a single line occupies."""
    return sum(_char_width(char) for char in strip_ansi(clean_line(line)))


def lines_of(text: str) -> list[str]:
    """Split a block into lines. The empty block has no lines."""
    if text == "":
        return []
    return text.split("\n")


def block_width(text: str) -> int:
    """Width of the widest line in a block."""
    return max((cell_width(line) for line in lines_of(text)), default=0)


def block_height(text: str) -> int:
    """Number of lines in a block."""
    return len(lines_of(text))


# =============================================================================
# Clipping and Padding
# =============================================================================


def truncate(line: str, width: int) -> str:
    """Cut a line to at most ``width`` cells.

    Escape sequences before the cut are kept; when any were seen a reset
    sequence is appended so styling does not leak into neighbouring cells.
    A wide character that would straddle the cut is dropped.
    """
    if width <= 0:
        return ""
    if cell_width(line) <= width:
        return line

    pieces: list[str] = []
    used = 0
    styled = False
    full = False
    for index, part in enumerate(_ANSI_SPLIT.split(line)):
        if index % 2:
            pieces.append(part)
            styled = True
            continue
        for char in part:
            char_width = _char_width(char)
            if used + char_width > width:
                full = True
                break
            pieces.append(char)
            used += char_width
        if full:
            break

    if styled:
        pieces.append(RESET)
    return "".join(pieces)


def pad_line(line: str, width: int) -> str:
    """Right-pad a line with spaces up to ``width`` cells."""
    missing = width - cell_width(line)
    if missing <= 0:
        return line
    return line + " " * missing


def constrain_width(text: str, width: int) -> str:
    """Clip or pad every line of a block to exactly ``width`` cells."""
    return "\n".join(
        pad_line(truncate(clean_line(line), width), width) for line in lines_of(text)
    )


def fit_block(text: str, width: int, height: int) -> str:
    """Clip or pad a block to exactly ``width`` x ``height`` cells.

    Excess lines are dropped from the bottom, missing lines are appended
    blank. A zero height yields the empty block.
    """
    if height <= 0:
        return ""
    lines = lines_of(text)[:height]
    lines.extend([""] * (height - len(lines)))
    return "\n".join(pad_line(truncate(clean_line(line), width), width) for line in lines)


# =============================================================================
# Joining
# =============================================================================


def join_vertical(blocks: list[str]) -> str:
    """Stack blocks top to bottom. Empty blocks contribute no lines."""
    lines: list[str] = []
    for block in blocks:
        lines.extend(lines_of(block))
    return "\n".join(lines)


def join_horizontal(blocks: list[str]) -> str:
    """Place blocks side by side, aligned to the top.

    Each block keeps its own width; shorter blocks are padded with blank
    lines of that width so every row of the result lines up.
    """
    split = [lines_of(block) for block in blocks]
    widths = [block_width(block) for block in blocks]
    height = max((len(lines) for lines in split), default=0)

    rows: list[str] = []
    for row in range(height):
        cells = []
        for lines, width in zip(split, widths):
            line = lines[row] if row < len(lines) else ""
            cells.append(pad_line(line, width))
        rows.append("".join(cells))
    return "\n".join(rows)


# =============================================================================
# Colour
# =============================================================================


def parse_color(value: str) -> str:
    """Validate a colour token ("#874BFD", "magenta", "color(93)").

    Raises:
        ValueError: If rich cannot parse the colour.
    """
    try:
        Color.parse(value)
    except ColorParseError as exc:
        raise ValueError(f"Invalid colour {value!r}: {exc}") from exc
    return value


def colorize(
    text: str,
    foreground: str | None = None,
    background: str | None = None,
    enabled: bool | None = None,
) -> str:
    """Apply foreground/background colours to every line of a block.

    Each line is styled and reset on its own, so the result can be clipped
    or joined line by line without styles bleeding across cells.
    """
    if not color_enabled(enabled) or (foreground is None and background is None):
        return text

    style = Style(color=foreground, bgcolor=background)
    return "\n".join(
        style.render(line, color_system=ColorSystem.TRUECOLOR)
        for line in text.split("\n")
    )


# =============================================================================
# Borders
# =============================================================================


@dataclass(frozen=True)
class BorderGlyphs:
    """Characters used to draw one border style."""

    top_left: str
    top: str
    top_right: str
    left: str
    right: str
    bottom_left: str
    bottom: str
    bottom_right: str


class BorderStyle(str, Enum):
    """Border drawn around a decorated block.

    Every style is one cell thick except NONE, which draws nothing.
    HIDDEN reserves the border cells but fills them with spaces.
    """

    ROUNDED = "rounded"
    NORMAL = "normal"
    THICK = "thick"
    DOUBLE = "double"
    HIDDEN = "hidden"
    NONE = "none"

    @property
    def thickness(self) -> int:
        """Cells taken by the border on each side."""
        return 0 if self is BorderStyle.NONE else 1

    @property
    def glyphs(self) -> BorderGlyphs | None:
        """Glyph set for the style, or None when no border is drawn."""
        return _BORDER_GLYPHS.get(self)


_BORDER_GLYPHS: dict[BorderStyle, BorderGlyphs] = {
    BorderStyle.ROUNDED: BorderGlyphs("╭", "─", "╮", "│", "│", "╰", "─", "╯"),
    BorderStyle.NORMAL: BorderGlyphs("┌", "─", "┐", "│", "│", "└", "─", "┘"),
    BorderStyle.THICK: BorderGlyphs("┏", "━", "┓", "┃", "┃", "┗", "━", "┛"),
    BorderStyle.DOUBLE: BorderGlyphs("╔", "═", "╗", "║", "║", "╚", "═", "╝"),
    BorderStyle.HIDDEN: BorderGlyphs(" ", " ", " ", " ", " ", " ", " ", " "),
}


def decorate(
    text: str,
    border: BorderStyle = BorderStyle.ROUNDED,
    padding: int = 0,
    color: str | None = None,
    enabled: bool | None = None,
    width: int | None = None,
) -> str:
    """Surround a block with padding and a border.

    The block is first padded to a rectangle of its own width (or of
    ``width`` when given). The result is ``2 * (thickness + padding)``
    cells wider and taller than that rectangle.

    Args:
        text: Block to decorate.
        border: Border style.
        padding: Blank cells between block and border, on every side.
        color: Foreground colour of the border glyphs.
        enabled: Force colour output on or off (None follows config).
        width: Content width to use instead of the widest line.

    Returns:
        Decorated block.
    """
    padding = max(padding, 0)
    inner_width = block_width(text) if width is None else width
    padded_width = inner_width + 2 * padding
    side = " " * padding
    blank = " " * padded_width

    body = [blank] * padding
    body.extend(side + pad_line(line, inner_width) + side for line in lines_of(text))
    body.extend([blank] * padding)

    glyphs = border.glyphs
    if glyphs is None:
        return "\n".join(body)

    def paint(segment: str) -> str:
        return colorize(segment, foreground=color, enabled=enabled)

    top = paint(glyphs.top_left + glyphs.top * padded_width + glyphs.top_right)
    bottom = paint(
        glyphs.bottom_left + glyphs.bottom * padded_width + glyphs.bottom_right
    )
    left = paint(glyphs.left)
    right = paint(glyphs.right)

    rows = [top]
    rows.extend(left + row + right for row in body)
    rows.append(bottom)
    return "\n".join(rows)


__all__ = [
    "ANSI_ESCAPE",
    "RESET",
    "strip_ansi",
    "clean_line",
    "cell_width",
    "lines_of",
    "block_width",
    "block_height",
    "truncate",
    "pad_line",
    "constrain_width",
    "fit_block",
    "join_vertical",
    "join_horizontal",
    "parse_color",
    "colorize",
    "BorderGlyphs",
    "BorderStyle",
    "decorate",
]
