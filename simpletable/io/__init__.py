"""I/O utilities for SimpleTable"""

from .readers import CellSizeReader, PlacementReader, read_cell_sizes, read_placements
from .writers import PlacementWriter, write_placements

__all__ = [
    'CellSizeReader', 'read_cell_sizes',
    'PlacementReader', 'read_placements',
    'PlacementWriter', 'write_placements']
