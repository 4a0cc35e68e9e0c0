"""
Utility functions

General-purpose helpers used across SimpleTable modules.
"""

from __future__ import annotations
from typing import Sequence, Union

from .layout.types import Cell, Size


def cell_for_index(index: int, columns_count: int) -> Cell:
    """
    Map a linear cell index to its row-major grid coordinate

    Cells fill a row left to right, then wrap to the next row.

    Args:
        index: Linear index of the cell (0-based)
        columns_count: Number of columns in the table

    Returns:
        Cell with column = index mod columns_count, row = floor(index / columns_count)
    """
    row, column = divmod(index, columns_count)
    return Cell(column=column, row=row)


def coerce_size(value: Union[Size, Sequence[float]]) -> Size:
    """
    Convert a Size or a (width, height) pair into a Size of floats

    Values are not validated; negative or NaN sizes are passed through.
    """
    if isinstance(value, Size):
        return Size(float(value.width), float(value.height))
    width, height = value
    return Size(float(width), float(height))
