"""Stacked grid: the recursive layout engine.

Items are placed in columns; items sharing a column stack top to bottom
in insertion order. On render the grid:

1. groups items by column index (only used indices form columns),
2. splits its width evenly across the columns,
3. splits each column's height among its items,
4. sizes every item to its cell (resizing it when it supports that,
   clipping or padding its output otherwise),
5. stacks each column and joins the columns side by side.

Height allocation in a column follows one of two rules:

- No expanding item: every item gets ``height // n``; the last item also
  gets the remainder, so the column consumes exactly its height.
- Some expanding items: non-expanding items keep their natural height;
  whatever is left is shared evenly among the expanding items, the
  remainder going to the last expanding item.

Layout is recomputed on every render; nothing is cached between renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Iterable

from pydantic import BaseModel, Field

from termgrid.component import Renderable, ensure_renderable, is_resizable
from termgrid.config import get_placeholder
from termgrid.core import get_logger
from termgrid.measure import MeasureCache
from termgrid.style import (
    constrain_width,
    fit_block,
    join_horizontal,
    join_vertical,
)

logger = get_logger("grid")


# =============================================================================
# Configuration Models
# =============================================================================


class Placement(BaseModel):
    """Where and how an item sits in a grid.

    Attributes:
        column: Column index. Indices only order columns; gaps are ignored.
        expand: Share the column's leftover height with other expanding items.
    """

    column: Annotated[int, Field(ge=0)] = Field(
        default=0,
        description="Column the item is placed in (0-based)",
    )
    expand: bool = Field(
        default=False,
        description="Grow vertically to fill remaining column height",
    )

    model_config = {"frozen": True}


class FitPolicy(str, Enum):
    """How a grid uses its assigned height.

    - STRETCH: allocate the full height to items (cells are exact).
    - NATURAL: render items at their natural size and just stack them.
    """

    STRETCH = "stretch"
    NATURAL = "natural"


@dataclass(frozen=True)
class ItemEntry:
    """A component together with its placement."""

    component: Renderable
    placement: Placement


# =============================================================================
# Layout Plan
# =============================================================================


@dataclass(frozen=True)
class CellLayout:
    """Size assigned to one item."""

    entry: ItemEntry
    width: int
    height: int


@dataclass(frozen=True)
class ColumnLayout:
    """Cells of one column, top to bottom."""

    key: int
    width: int
    cells: tuple[CellLayout, ...]

    @property
    def height(self) -> int:
        return sum(cell.height for cell in self.cells)


@dataclass(frozen=True)
class GridLayout:
    """Computed plan for a grid at a given size."""

    width: int
    height: int
    columns: tuple[ColumnLayout, ...]

    @property
    def used_width(self) -> int:
        return sum(column.width for column in self.columns)


# =============================================================================
# Planning Functions
# =============================================================================


def group_columns(entries: Iterable[ItemEntry]) -> dict[int, list[ItemEntry]]:
    """Group entries by column index.

    Returns:
        Mapping ordered by ascending column index; entries keep their
        insertion order within a column.
    """
    groups: dict[int, list[ItemEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.placement.column, []).append(entry)
    return {key: groups[key] for key in sorted(groups)}


def split_width(width: int, count: int) -> list[int]:
    """Split a width into ``count`` columns.

    Every column gets ``width // count``; the last column also takes the
    remainder so the columns always add up to ``width``.
    """
    if count <= 0:
        return []
    base, remainder = divmod(max(width, 0), count)
    widths = [base] * count
    widths[-1] += remainder
    return widths


def allocate_heights(
    entries: list[ItemEntry],
    height: int,
    measure: MeasureCache | None = None,
) -> list[int]:
    """Split a column's height among its entries.

    Args:
        entries: Entries of one column, top to bottom.
        height: Height available to the column.
        measure: Natural-height cache shared across the render pass.

    Returns:
        One height per entry. With no expanding entry the heights add up
        to ``height`` exactly. With expanding entries they add up to
        ``max(height, reserved)`` where ``reserved`` is the natural height
        of the non-expanding entries.
    """
    count = len(entries)
    if count == 0:
        return []
    height = max(height, 0)

    expanding = [i for i, entry in enumerate(entries) if entry.placement.expand]
    if not expanding:
        base, remainder = divmod(height, count)
        heights = [base] * count
        heights[-1] += remainder
        return heights

    if measure is None:
        measure = MeasureCache()
    heights = [0] * count
    reserved = 0
    for i, entry in enumerate(entries):
        if not entry.placement.expand:
            heights[i] = measure.height_of(entry.component)
            reserved += heights[i]

    # Non-expanding items may already overflow the column; expanding
    # items then collapse to zero rather than going negative.
    leftover = max(height - reserved, 0)
    per_expand, remainder = divmod(leftover, len(expanding))
    for i in expanding:
        heights[i] = per_expand
    heights[expanding[-1]] += remainder

    logger.debug(
        "Column height %d: reserved %d, %d expanding x %d (+%d)",
        height,
        reserved,
        len(expanding),
        per_expand,
        remainder,
    )
    return heights


def plan_layout(
    entries: list[ItemEntry],
    width: int,
    height: int,
    measure: MeasureCache | None = None,
) -> GridLayout:
    """Compute cell sizes for every entry of a stretch-to-fill grid."""
    if measure is None:
        measure = MeasureCache()
    groups = group_columns(entries)
    widths = split_width(width, len(groups))

    columns = []
    for (key, column_entries), column_width in zip(groups.items(), widths):
        heights = allocate_heights(column_entries, height, measure)
        cells = tuple(
            CellLayout(entry=entry, width=column_width, height=cell_height)
            for entry, cell_height in zip(column_entries, heights)
        )
        columns.append(ColumnLayout(key=key, width=column_width, cells=cells))

    layout = GridLayout(width=width, height=height, columns=tuple(columns))
    logger.debug(
        "Planned %dx%d grid: %d column(s) of widths %s, %d cells used",
        width,
        height,
        len(columns),
        widths,
        layout.used_width,
    )
    return layout


def render_cell(cell: CellLayout) -> str:
    """Render one item into exactly its cell."""
    component = cell.entry.component
    if is_resizable(component):
        text = component.resize(cell.width, cell.height).render()
    else:
        text = component.render()
    return fit_block(text, cell.width, cell.height)


# =============================================================================
# Stacked Grid
# =============================================================================


class StackedGrid:
    """Column-based layout container.

    Items are appended with a placement and never removed or reordered.
    The grid renders a placeholder until it has been given a non-zero size
    and at least one item.

    Example:
        >>> grid = StackedGrid()
        >>> grid.add_item(TextItem("Item 1"), Placement(column=0))
        >>> grid.add_item(TextItem("Item 2"), Placement(column=1))
        >>> grid.set_size(90, 10)
        >>> text = grid.render()
    """

    def __init__(
        self,
        fit_policy: FitPolicy = FitPolicy.STRETCH,
        placeholder: str | None = None,
    ):
        """Initialize an empty, unsized grid.

        Args:
            fit_policy: Whether items are stretched to fill the height.
            placeholder: Text rendered while the grid cannot lay out.
                Defaults to the configured placeholder.
        """
        self._fit_policy = FitPolicy(fit_policy)
        self._placeholder = placeholder
        self._items: list[ItemEntry] = []
        self._width = 0
        self._height = 0

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[ItemEntry, ...]:
        return tuple(self._items)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fit_policy(self) -> FitPolicy:
        return self._fit_policy

    @property
    def placeholder(self) -> str:
        return get_placeholder(self._placeholder)

    @property
    def is_ready(self) -> bool:
        """True once both dimensions are positive."""
        return self._width > 0 and self._height > 0

    def __len__(self) -> int:
        return len(self._items)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_item(self, component: Renderable, placement: Placement | None = None) -> None:
        """Append an item.

        Args:
            component: Anything with a ``render()`` method.
            placement: Column and expand flag; column 0, not expanding
                when omitted.

        Raises:
            TypeError: If the component cannot be rendered.
        """
        ensure_renderable(component)
        self._items.append(ItemEntry(component, placement or Placement()))

    def set_size(self, width: int, height: int) -> None:
        """Store the size to lay out at, typically from a window event.

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height

    def resize(self, width: int, height: int) -> StackedGrid:
        """Return a copy of this grid sized to (width, height).

        The copy has its own item list; components are shared since the
        engine never mutates them. This grid is left untouched.
        """
        clone = StackedGrid(self._fit_policy, self._placeholder)
        clone._items = list(self._items)
        clone.set_size(width, height)
        return clone

    # -------------------------------------------------------------------------
    # Layout and Rendering
    # -------------------------------------------------------------------------

    def layout(self) -> GridLayout | None:
        """Compute the stretch-to-fill plan at the current size.

        Returns:
            The plan, or None while the grid is unsized or empty.
        """
        if not self.is_ready or not self._items:
            return None
        return plan_layout(self._items, self._width, self._height)

    def render(self) -> str:
        if not self.is_ready or not self._items:
            return self.placeholder

        if self._fit_policy is FitPolicy.NATURAL:
            return self._render_natural()

        plan = self.layout()
        rendered_columns = []
        for column in plan.columns:
            rows = [render_cell(cell) for cell in column.cells]
            rendered_columns.append(constrain_width(join_vertical(rows), column.width))
        return join_horizontal(rendered_columns)

    def _render_natural(self) -> str:
        rendered_columns = []
        for entries in group_columns(self._items).values():
            rows = [entry.component.render() for entry in entries]
            rendered_columns.append(join_vertical(rows))
        return join_horizontal(rendered_columns)

    def __repr__(self) -> str:
        return (
            f"StackedGrid(items={len(self._items)}, size={self._width}x{self._height}, "
            f"fit_policy={self._fit_policy.value})"
        )


__all__ = [
    # Configuration
    "Placement",
    "FitPolicy",
    "ItemEntry",
    # Plan
    "CellLayout",
    "ColumnLayout",
    "GridLayout",
    # Planning functions
    "group_columns",
    "split_width",
    "allocate_heights",
    "plan_layout",
    "render_cell",
    # Engine
    "StackedGrid",
]
