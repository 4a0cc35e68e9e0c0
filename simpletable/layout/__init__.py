"""
Layout Module for SimpleTable
Row-major table layout engine

Public API:
    - TableLayoutEngine: Main layout calculation engine
    - LayoutResult: Complete layout solution
    - LayoutCache: Memoization of computed layouts
    - TableLayout: Host adapter driving LayoutSubview objects
"""

from .engine import TableLayoutEngine
from .cache import LayoutCache
from .host import LayoutSubview, TableLayout
from .types import (
    LayoutResult,
    Cell,
    Placement,
    Point,
    Rect,
    Size,
)

__all__ = [
    'TableLayoutEngine',
    'LayoutCache',
    'LayoutSubview',
    'TableLayout',
    'LayoutResult',
    'Cell',
    'Placement',
    'Point',
    'Rect',
    'Size',
]
