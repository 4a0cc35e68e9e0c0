"""SimpleTable: Row-major table layout for cells of known intrinsic size"""

from .config import TableLayoutConfig, RenderConfig
from .layout import (
    TableLayoutEngine,
    LayoutCache,
    LayoutSubview,
    TableLayout,
    LayoutResult,
    Cell,
    Placement,
    Point,
    Rect,
    Size,
)
from . import utils
from .visualizer import TableRenderer

__version__ = "0.1.0"
__all__ = [
    "TableLayoutConfig", "RenderConfig",
    "TableLayoutEngine", "LayoutCache", "LayoutSubview", "TableLayout",
    "LayoutResult", "Cell", "Placement", "Point", "Rect", "Size",
    "TableRenderer", "utils",
]
