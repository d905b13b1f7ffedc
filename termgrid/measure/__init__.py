"""Natural-size measurement for layout allocation."""

from .lib import MeasureCache, natural_height

__all__ = ["natural_height", "MeasureCache"]
