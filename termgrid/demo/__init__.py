"""Example layouts rendered by the ``demo`` command."""

from .lib import (
    DEMOS,
    basic_grid,
    build_demo,
    expanded_grid,
    framed_grid,
    list_demos,
    render_demo,
)

__all__ = [
    "DEMOS",
    "basic_grid",
    "framed_grid",
    "expanded_grid",
    "list_demos",
    "build_demo",
    "render_demo",
]
