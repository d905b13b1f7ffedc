"""Frame decorator: a border and padding around a single component.

A frame owns exactly one child. Once sized it renders as a block of
exactly its assigned size; the child gets the inner area that remains
after subtracting border and padding on both sides. Resizable children
are resized to that area, other children are clipped or padded into it.

Frames are immutable. ``resize`` and the ``with_*`` helpers return new
frames, so a frame observed elsewhere never changes underneath a reader.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from termgrid.component import Renderable, ensure_renderable, is_resizable
from termgrid.config import EnvVar, get_environment
from termgrid.core import get_logger
from termgrid.style import BorderStyle, decorate, fit_block, parse_color

logger = get_logger("frame")


class FrameStyle(BaseModel):
    """Decoration metrics for a frame.

    Attributes:
        border: Border glyph set; NONE takes no cells.
        padding: Blank cells between border and content, on every side.
        border_color: Colour token for the border glyphs, None for plain.
    """

    border: BorderStyle = Field(
        default=BorderStyle.ROUNDED,
        description="Border drawn around the content",
    )
    padding: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Padding in cells on each side of the content",
    )
    border_color: str | None = Field(
        default="#874BFD",
        description="Border foreground colour",
    )

    model_config = {"frozen": True}

    @field_validator("border_color")
    @classmethod
    def _check_color(cls, value: str | None) -> str | None:
        return None if value is None else parse_color(value)

    @classmethod
    def from_environment(cls) -> FrameStyle:
        """Build the default style from TERMGRID_* configuration."""
        return cls(
            border=BorderStyle(get_environment(EnvVar.TERMGRID_BORDER_STYLE)),
            padding=get_environment(EnvVar.TERMGRID_FRAME_PADDING),
            border_color=get_environment(EnvVar.TERMGRID_BORDER_COLOR) or None,
        )

    @property
    def horizontal_overhead(self) -> int:
        """Cells taken by border and padding across the width."""
        return 2 * (self.border.thickness + self.padding)

    @property
    def vertical_overhead(self) -> int:
        """Cells taken by border and padding across the height."""
        return 2 * (self.border.thickness + self.padding)


@dataclass(frozen=True)
class Frame:
    """Border-and-padding decorator around one child component.

    A width or height of 0 means "not sized": the frame then renders the
    child at its natural size.

    Attributes:
        child: The decorated component.
        style: Decoration metrics. Defaults come from configuration.
        width: Assigned outer width in cells.
        height: Assigned outer height in cells.
    """

    child: Renderable
    style: FrameStyle = field(default_factory=FrameStyle.from_environment)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        ensure_renderable(self.child)
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Frame size must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def is_sized(self) -> bool:
        return self.width > 0 and self.height > 0

    def inner_size(self) -> tuple[int, int]:
        """Area left for the child once border and padding are removed.

        Returns:
            (width, height), (0, 0) while the frame is not sized. Never
            negative.
        """
        if not self.is_sized:
            return 0, 0
        return (
            max(self.width - self.style.horizontal_overhead, 0),
            max(self.height - self.style.vertical_overhead, 0),
        )

    def resize(self, width: int, height: int) -> Frame:
        """Return a copy of this frame assigned the given outer size."""
        return replace(self, width=width, height=height)

    def with_border_color(self, color: str | None) -> Frame:
        """Return a copy of this frame with a different border colour."""
        return self.with_style(
            FrameStyle(
                border=self.style.border,
                padding=self.style.padding,
                border_color=color,
            )
        )

    def with_style(self, style: FrameStyle) -> Frame:
        """Return a copy of this frame with different decoration."""
        return replace(self, style=style)

    def render(self) -> str:
        style = self.style
        if not self.is_sized:
            return decorate(
                self.child.render(),
                border=style.border,
                padding=style.padding,
                color=style.border_color,
            )

        inner_width, inner_height = self.inner_size()
        if is_resizable(self.child):
            content = self.child.resize(inner_width, inner_height).render()
        else:
            content = self.child.render()
        logger.debug(
            "Frame %dx%d: child %s gets %dx%d",
            self.width,
            self.height,
            type(self.child).__name__,
            inner_width,
            inner_height,
        )

        boxed = decorate(
            fit_block(content, inner_width, inner_height),
            border=style.border,
            padding=style.padding,
            color=style.border_color,
            width=inner_width,
        )
        # Only differs from ``boxed`` when the outer size is smaller than
        # the decoration itself.
        return fit_block(boxed, self.width, self.height)


__all__ = ["FrameStyle", "Frame"]
