"""Capabilities shared by everything that can be placed in a layout.

Two capability sets exist and are detected structurally, never by class:

- Renderable: ``render() -> str``.
- Resizable: Renderable plus ``resize(width, height)``, which returns a
  component configured for that size and leaves the receiver untouched.

Grids and frames implement both, so they nest to any depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from termgrid.style import colorize


@runtime_checkable
class Renderable(Protocol):
    """Protocol for components that can produce a text block."""

    def render(self) -> str:
        """Render the component for its current configuration."""
        ...


@runtime_checkable
class Resizable(Renderable, Protocol):
    """Protocol for components that accept an assigned size."""

    def resize(self, width: int, height: int) -> Resizable:
        """Return a component configured to render at (width, height).

        Implementations must not mutate the receiver.
        """
        ...


def is_renderable(obj: Any) -> bool:
    """Check whether an object provides a callable ``render``."""
    return callable(getattr(obj, "render", None))


def is_resizable(obj: Any) -> bool:
    """Check whether an object provides both ``render`` and ``resize``."""
    return is_renderable(obj) and callable(getattr(obj, "resize", None))


def ensure_renderable(obj: Any) -> Renderable:
    """Return ``obj`` unchanged if it can be rendered.

    Raises:
        TypeError: If ``obj`` has no callable ``render``.
    """
    if not is_renderable(obj):
        raise TypeError(
            f"{type(obj).__name__} cannot be placed in a layout: "
            "it has no render() method"
        )
    return obj


@dataclass(frozen=True)
class TextItem:
    """Leaf widget showing a fixed piece of text.

    Renders at its natural size; containers clip or pad it into the cell
    they assign, it is never resized.

    Attributes:
        content: Text to show. May span several lines.
        background: Optional background colour token.
        foreground: Optional foreground colour token.
    """

    content: str
    background: str | None = None
    foreground: str | None = None

    def render(self) -> str:
        return colorize(
            self.content, foreground=self.foreground, background=self.background
        )


__all__ = [
    "Renderable",
    "Resizable",
    "is_renderable",
    "is_resizable",
    "ensure_renderable",
    "TextItem",
]
