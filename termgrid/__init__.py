"""termgrid: recursive layout engine for character-cell interfaces."""

from termgrid.component import Renderable, Resizable, TextItem, is_resizable
from termgrid.frame import Frame, FrameStyle
from termgrid.grid import FitPolicy, GridLayout, Placement, StackedGrid
from termgrid.measure import MeasureCache, natural_height
from termgrid.style import BorderStyle

__version__ = "0.1.0"

__all__ = [
    # Components
    "Renderable",
    "Resizable",
    "TextItem",
    "is_resizable",
    # Frame
    "Frame",
    "FrameStyle",
    "BorderStyle",
    # Grid
    "StackedGrid",
    "Placement",
    "FitPolicy",
    "GridLayout",
    # Measurement
    "natural_height",
    "MeasureCache",
]
