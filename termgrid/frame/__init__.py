"""Frame decorator for termgrid layouts.

Example usage:
    >>> from termgrid.component import TextItem
    >>> from termgrid.frame import Frame
    >>> framed = Frame(TextItem("Framed Item 1")).resize(20, 10)
    >>> framed.inner_size()
    (16, 6)
"""

from .lib import Frame, FrameStyle

__all__ = ["Frame", "FrameStyle"]
