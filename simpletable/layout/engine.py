"""
Layout Engine for SimpleTable
Pure table layout logic

Two phases:
- Measurement: map each cell index to (column, row) and keep the largest
  intrinsic width per column and height per row
- Resolution: apply equal-width / equal-height / aspect-ratio overrides, then
  derive cell origins by prefix-summing the resolved tables
"""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..config import TableLayoutConfig
from ..types import SizeLike
from ..utils import cell_for_index, coerce_size
from .types import (
    Cell,
    LayoutResult,
    Placement,
    Point,
    Size,
)

logger = logging.getLogger(__name__)


class TableLayoutEngine:
    """
    Table layout engine with row-major cell flow

    Algorithm:
    1. Cell i goes to column i mod C, row floor(i / C)
    2. Column width = widest cell in the column, row height = tallest cell in the row
    3. Overrides: aspect ratio, otherwise equal widths and/or equal heights
    4. Origins are prefix sums of resolved widths and heights

    The engine holds no state besides its configuration, so a single
    instance can be shared between threads.
    """

    def __init__(self, config: TableLayoutConfig):
        """
        Initialize layout engine

        Args:
            config: Table layout configuration (not validated here)
        """
        self.config = config

        logger.info(f"TableLayoutEngine initialized ({config.columns_count} columns)")

    def cell_at(self, index: int) -> Cell:
        """Grid coordinate of the cell with the given linear index"""
        return cell_for_index(index, self.config.columns_count)

    def compute_layout(self, cell_sizes: Sequence[SizeLike]) -> LayoutResult:
        """
        Calculate layout for all cells

        Args:
            cell_sizes: Intrinsic size of every cell, in linear placement order

        Returns:
            LayoutResult with resolved tables, cell origins and cell sizes
        """
        sizes = [coerce_size(s) for s in cell_sizes]
        logger.debug(f"Calculating layout for {len(sizes)} cells")

        if not sizes:
            return self._create_empty_layout()

        # Step 1: Measurement
        column_widths, row_heights, cells = self._measure(sizes)

        # Step 2: Overrides
        column_widths, row_heights = self._resolve(column_widths, row_heights)

        # Step 3: Placement from resolved tables
        column_offsets, total_width = self._prefix_offsets(column_widths)
        row_offsets, total_height = self._prefix_offsets(row_heights)

        cell_locations: Dict[Cell, Point] = {}
        cell_sizes_map: Dict[Cell, Size] = {}
        for cell in cells:
            cell_locations[cell] = Point(column_offsets[cell.column], row_offsets[cell.row])
            cell_sizes_map[cell] = Size(column_widths[cell.column], row_heights[cell.row])

        logger.debug(f"Resolved {len(column_widths)} columns x {len(row_heights)} rows, "
                     f"total size {total_width:.1f} x {total_height:.1f}")

        return LayoutResult(
            column_widths=column_widths,
            row_heights=row_heights,
            cell_locations=cell_locations,
            cell_sizes=cell_sizes_map,
            cell_count=len(sizes),
            total_width=total_width,
            total_height=total_height,
        )

    def total_size(self, result: LayoutResult) -> Size:
        """Bounding size of a computed layout"""
        return result.size

    def placements(
        self,
        result: LayoutResult,
        origin: Optional[Point] = None,
        count: Optional[int] = None
    ) -> List[Placement]:
        """
        Placement directive for every cell

        Args:
            result: Layout computed by compute_layout
            origin: Offset added to every cell origin (bounds min corner)
            count: Number of cells to place (default: result.cell_count).
                   Cells missing from the result get zero origin and size.

        Returns:
            One Placement per linear index, in index order
        """
        origin = origin or Point()
        if count is None:
            count = result.cell_count

        placements: List[Placement] = []
        for index in range(count):
            cell = self.cell_at(index)
            placements.append(Placement(
                index=index,
                cell=cell,
                origin=result.location(cell).translated(origin.x, origin.y),
                size=result.size_for(cell)
            ))
        return placements

    def _measure(
        self,
        sizes: List[Size]
    ) -> Tuple[Dict[int, float], Dict[int, float], List[Cell]]:
        """
        Largest intrinsic width per column and height per row

        Returns:
            (column_widths, row_heights, cells in index order)
        """
        column_widths: Dict[int, float] = {}
        row_heights: Dict[int, float] = {}
        cells: List[Cell] = []

        for index, size in enumerate(sizes):
            cell = self.cell_at(index)
            column_widths[cell.column] = max(column_widths.get(cell.column, 0.0), size.width)
            row_heights[cell.row] = max(row_heights.get(cell.row, 0.0), size.height)
            cells.append(cell)

        return column_widths, row_heights, cells

    def _resolve(
        self,
        column_widths: Dict[int, float],
        row_heights: Dict[int, float]
    ) -> Tuple[Dict[int, float], Dict[int, float]]:
        """
        Apply aspect ratio or equal-size overrides to the measured tables

        The aspect ratio takes precedence over both equal-size flags.
        """
        aspect_ratio = self.config.cell_aspect_ratio

        if aspect_ratio is not None:
            if self.config.equal_column_widths or self.config.equal_row_heights:
                logger.debug("cell_aspect_ratio set, ignoring equal column/row flags")
            cell = self._aspect_cell_size(
                Size(max(column_widths.values()), max(row_heights.values())),
                aspect_ratio
            )
            return ({column: cell.width for column in column_widths},
                    {row: cell.height for row in row_heights})

        if self.config.equal_column_widths:
            widest = max(column_widths.values())
            column_widths = {column: widest for column in column_widths}

        if self.config.equal_row_heights:
            tallest = max(row_heights.values())
            row_heights = {row: tallest for row in row_heights}

        return column_widths, row_heights

    @staticmethod
    def _aspect_cell_size(content: Size, aspect_ratio: float) -> Size:
        """
        Smallest cell with the given aspect ratio that holds the largest content

        Zero-height content never widens (its ratio is inf or NaN): the height
        follows from the width instead.
        """
        if content.aspect_ratio < aspect_ratio:
            return Size(content.height * aspect_ratio, content.height)
        return Size(content.width, content.width / aspect_ratio)

    @staticmethod
    def _prefix_offsets(table: Dict[int, float]) -> Tuple[Dict[int, float], float]:
        """
        Offset of every entry as the sum of all preceding entries

        Returns:
            (offsets by index, total of all entries)
        """
        n_entries = max(table) + 1
        values = np.array([table.get(i, 0.0) for i in range(n_entries)], dtype=float)
        offsets = np.concatenate(([0.0], np.cumsum(values)))
        return {i: float(offsets[i]) for i in table}, float(offsets[-1])

    def _create_empty_layout(self) -> LayoutResult:
        """Create empty layout for when there are no cells"""
        return LayoutResult()
