"""
Type definitions for SimpleTable

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Union, Tuple, Sequence, Dict, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    import pandas as pd
    from .layout.types import Size

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

SizeLike = Union['Size', Tuple[float, float], Sequence[float]]
"""Size instance or (width, height) pair"""

PlacementTableResult = Tuple['pd.DataFrame', 'LayoutMetadata']
"""Result from reading a placement table: (placements_df, metadata)"""


# Structured data types

class PlacementRecord(TypedDict):
    """One row of a placement table"""
    index: int
    column: int
    row: int
    x: float
    y: float
    width: float
    height: float


class LayoutMetadata(TypedDict, total=False):
    """Header values stored alongside a placement table"""
    columns_count: int
    total_width: float
    total_height: float


PLACEMENT_COLUMNS = ['index', 'column', 'row', 'x', 'y', 'width', 'height']
"""Column order of placement tables"""

METADATA_KEYS: Dict[str, type] = {
    'columns_count': int,
    'total_width': float,
    'total_height': float,
}
"""Metadata header keys and their value types"""
