"""Stacked grid layout engine.

Example usage:
    >>> from termgrid.component import TextItem
    >>> from termgrid.grid import Placement, StackedGrid
    >>> grid = StackedGrid()
    >>> grid.add_item(TextItem("Item 1"), Placement(column=0))
    >>> grid.add_item(TextItem("Item 2"), Placement(column=1, expand=True))
    >>> grid.set_size(90, 10)
    >>> print(grid.render())
"""

from .lib import (
    CellLayout,
    ColumnLayout,
    FitPolicy,
    GridLayout,
    ItemEntry,
    Placement,
    StackedGrid,
    allocate_heights,
    group_columns,
    plan_layout,
    render_cell,
    split_width,
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
