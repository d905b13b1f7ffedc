"""Component capabilities for termgrid layouts.

Example usage:
    >>> from termgrid.component import TextItem, is_resizable
    >>> item = TextItem("Item 1", background="#874BFD")
    >>> is_resizable(item)
    False
"""

from .lib import (
    Renderable,
    Resizable,
    TextItem,
    ensure_renderable,
    is_renderable,
    is_resizable,
)

__all__ = [
    # Capabilities
    "Renderable",
    "Resizable",
    "is_renderable",
    "is_resizable",
    "ensure_renderable",
    # Leaf widgets
    "TextItem",
]
