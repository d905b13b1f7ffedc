"""Natural-size measurement of components.

The natural height of a component is the number of lines it renders when
no size is imposed on it. Grids measure non-expanding items this way to
reserve their space before sharing the remainder among expanding ones.
"""

from __future__ import annotations

from termgrid.component import Renderable
from termgrid.core import get_logger
from termgrid.style import block_height

logger = get_logger("measure")


def natural_height(component: Renderable) -> int:
    """Count the lines of a component's unconstrained render.

    An empty render counts as zero lines.
    """
    return block_height(component.render())


class MeasureCache:
    """Memoizes natural heights for the duration of one render pass.

    Entries are keyed by component identity. The cache holds a reference
    to every measured component so identities cannot be recycled while
    the cache is alive.
    """

    def __init__(self) -> None:
        self._heights: dict[int, tuple[Renderable, int]] = {}
        self.hits = 0
        self.misses = 0

    def height_of(self, component: Renderable) -> int:
        """Natural height of ``component``, rendering it at most once."""
        key = id(component)
        cached = self._heights.get(key)
        if cached is not None:
            self.hits += 1
            return cached[1]

        self.misses += 1
        height = natural_height(component)
        self._heights[key] = (component, height)
        logger.debug(
            "Measured %s: natural height %d", type(component).__name__, height
        )
        return height

    def __len__(self) -> int:
        return len(self._heights)


__all__ = [
    "natural_height",
    "MeasureCache",
]
