"""
Layout types for SimpleTable
Data structures for layout engine results

All types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Size:
    """
    Width/height pair

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """
    width: float = 0.0
    height: float = 0.0

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height (inf for zero height with positive width)"""
        if self.height == 0:
            return float('inf') if self.width > 0 else float('nan')
        return self.width / self.height


@dataclass(frozen=True)
class Point:
    """
    Absolute position

    Attributes:
        x: Horizontal coordinate, growing to the right
        y: Vertical coordinate, growing downwards
    """
    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> 'Point':
        """Return this point moved by (dx, dy)"""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """
    Bounds rectangle handed over by the host

    Attributes:
        origin: Top-left corner
        size: Extent of the rectangle
    """
    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def min_y(self) -> float:
        return self.origin.y


@dataclass(frozen=True)
class Cell:
    """
    Grid slot address

    Attributes:
        column: Column index (0-based)
        row: Row index (0-based)
    """
    column: int
    row: int


@dataclass(frozen=True)
class Placement:
    """
    Placement directive for a single cell

    Attributes:
        index: Linear index of the cell (subview order)
        cell: Grid coordinate of the cell
        origin: Top-left anchored position, already translated by the bounds origin
        size: Proposed size (resolved column width, resolved row height)
    """
    index: int
    cell: Cell
    origin: Point
    size: Size


@dataclass(frozen=True)
class LayoutResult:
    """
    Complete layout solution for a set of cells

    This is the output of TableLayoutEngine.compute_layout and the input to
    total size queries, placement and rendering. Results compare by value,
    which is what LayoutCache relies on. The tables are read-only views, so a
    result handed out by the cache cannot be altered by any of its users.
    Results are not hashable.

    Attributes:
        column_widths: Resolved width per column index
        row_heights: Resolved height per row index
        cell_locations: Origin of every encountered cell
        cell_sizes: Size of every encountered cell
        cell_count: Number of cells the layout was computed for
    """
    column_widths: Mapping[int, float] = field(default_factory=dict)
    row_heights: Mapping[int, float] = field(default_factory=dict)
    cell_locations: Mapping[Cell, Point] = field(default_factory=dict)
    cell_sizes: Mapping[Cell, Size] = field(default_factory=dict)
    cell_count: int = 0
    total_width: float = 0.0
    total_height: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        for name in ('column_widths', 'row_heights', 'cell_locations', 'cell_sizes'):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def size(self) -> Size:
        """Bounding size of the whole table"""
        return Size(self.total_width, self.total_height)

    @property
    def n_columns(self) -> int:
        """Number of columns that hold at least one cell"""
        return len(self.column_widths)

    @property
    def n_rows(self) -> int:
        """Number of rows that hold at least one cell"""
        return len(self.row_heights)

    @property
    def is_empty(self) -> bool:
        return self.cell_count == 0

    def location(self, cell: Cell) -> Point:
        """Origin of a cell, zero point if the cell is not part of the layout"""
        return self.cell_locations.get(cell, Point())

    def size_for(self, cell: Cell) -> Size:
        """Size of a cell, zero size if the cell is not part of the layout"""
        return self.cell_sizes.get(cell, Size())
