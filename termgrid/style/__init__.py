"""Text block styling for character-cell output.

Measures, clips, pads, joins and decorates multi-line strings. This is
the only place that knows about ANSI sequences and cell widths.

Example usage:
    >>> from termgrid.style import decorate, fit_block, join_horizontal
    >>> boxed = decorate(fit_block("hello", 7, 1), padding=1)
    >>> row = join_horizontal([boxed, boxed])
"""

from .lib import (
    ANSI_ESCAPE,
    RESET,
    BorderGlyphs,
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
    pad_line,
    parse_color,
    strip_ansi,
    truncate,
)

__all__ = [
    # Measurement
    "ANSI_ESCAPE",
    "strip_ansi",
    "clean_line",
    "cell_width",
    "lines_of",
    "block_width",
    "block_height",
    # Clipping and padding
    "RESET",
    "truncate",
    "pad_line",
    "constrain_width",
    "fit_block",
    # Joining
    "join_vertical",
    "join_horizontal",
    # Colour
    "parse_color",
    "colorize",
    # Borders
    "BorderGlyphs",
    "BorderStyle",
    "decorate",
]
