"""Example layouts.

Each demo builds a fresh, unsized grid. ``render_demo`` sizes it once
and returns the text, which is what the ``demo`` CLI command prints.
"""

from __future__ import annotations

from typing import Callable

from termgrid.component import TextItem
from termgrid.core import get_logger
from termgrid.frame import Frame
from termgrid.grid import Placement, StackedGrid
from termgrid.style import strip_ansi

logger = get_logger("demo")

ITEM_BACKGROUND = "#874BFD"


def _item(label: str) -> TextItem:
    return TextItem(label, background=ITEM_BACKGROUND)


def basic_grid() -> StackedGrid:
    """Three plain items side by side."""
    grid = StackedGrid()
    grid.add_item(_item("Item 1"), Placement(column=0))
    grid.add_item(_item("Item 2"), Placement(column=1))
    grid.add_item(_item("Item 3"), Placement(column=2))
    return grid


def framed_grid() -> StackedGrid:
    """Framed items in three columns, the middle column holding two."""
    grid = StackedGrid()
    grid.add_item(Frame(_item("Framed Item 1")), Placement(column=0))
    grid.add_item(Frame(_item("Framed Item 2")), Placement(column=1))
    grid.add_item(Frame(_item("Framed Item 3")), Placement(column=2))
    grid.add_item(Frame(_item("Framed Item 4")), Placement(column=1))
    return grid


def expanded_grid() -> StackedGrid:
    """Framed items where two items of the middle column expand."""
    grid = StackedGrid()
    grid.add_item(Frame(_item("Framed Item 1")), Placement(column=0))
    grid.add_item(Frame(_item("Framed Item 2")), Placement(column=1, expand=True))
    grid.add_item(Frame(_item("Framed Item 3")), Placement(column=1, expand=True))
    grid.add_item(Frame(_item("Framed Item 4")), Placement(column=1))
    grid.add_item(Frame(_item("Framed Item 5")), Placement(column=2))
    grid.add_item(Frame(_item("Framed Item 6")), Placement(column=2))
    grid.add_item(Frame(_item("Framed Item 7")), Placement(column=2))
    return grid


DEMOS: dict[str, Callable[[], StackedGrid]] = {
    "basic": basic_grid,
    "frames": framed_grid,
    "expanded": expanded_grid,
}


def list_demos() -> list[str]:
    """Names of the available demos."""
    return list(DEMOS)


def build_demo(name: str) -> StackedGrid:
    """Build the named demo grid.

    Raises:
        KeyError: If no demo has that name.
    """
    try:
        builder = DEMOS[name]
    except KeyError:
        raise KeyError(
            f"Unknown demo '{name}'. Available: {', '.join(list_demos())}"
        ) from None
    return builder()


def render_demo(name: str, width: int, height: int, color: bool = True) -> str:
    """Build the named demo and render it once at (width, height).

    With ``color`` off the output carries no escape sequences, whatever the
    colour configuration says.
    """
    grid = build_demo(name)
    grid.set_size(width, height)
    logger.info(f"Rendering demo '{name}' at {width}x{height}")
    text = grid.render()
    return text if color else strip_ansi(text)


__all__ = [
    "DEMOS",
    "basic_grid",
    "framed_grid",
    "expanded_grid",
    "list_demos",
    "build_demo",
    "render_demo",
]
