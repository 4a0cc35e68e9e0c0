"""
I/O Readers

Handles reading of cell size tables and placement tables.
"""

from __future__ import annotations
from typing import List
from pathlib import Path
import pandas as pd
import numpy as np
import logging

from ..layout.types import Size
from ..types import LayoutMetadata, PathLike, PlacementTableResult, PLACEMENT_COLUMNS, METADATA_KEYS

logger = logging.getLogger(__name__)


class CellSizeReader:
    """Reads intrinsic cell sizes from TSV files"""

    REQUIRED_COLUMNS = ['width', 'height']

    @staticmethod
    def read(filepath: PathLike) -> List[Size]:
        """
        Read intrinsic cell sizes

        Expected format (one cell per line, in placement order):
        width   height  [any other columns]
        10      20
        30      5

        Args:
            filepath: Path to TSV file with 'width' and 'height' columns

        Returns:
            List of Size in file order

        Raises:
            FileNotFoundError: File does not exist
            ValueError: Missing columns, or sizes that are negative or not finite
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Cell size file not found: {filepath}")

        cells: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')
        cells.columns = [str(col).strip().lower() for col in cells.columns]

        missing = [col for col in CellSizeReader.REQUIRED_COLUMNS if col not in cells.columns]
        if missing:
            raise ValueError(f"Missing columns {missing} in {filepath}; "
                             f"found {cells.columns.tolist()}")

        values = cells[CellSizeReader.REQUIRED_COLUMNS].apply(pd.to_numeric, errors='coerce').to_numpy(dtype=float)
        bad_rows = np.flatnonzero(~np.isfinite(values).all(axis=1) | (values < 0).any(axis=1))
        if len(bad_rows) > 0:
            raise ValueError(f"Invalid cell sizes in {filepath} at rows {bad_rows[:10].tolist()}: "
                             f"sizes must be finite and non-negative")

        logger.info(f"Loaded {len(values)} cell sizes from {filepath}")
        return [Size(float(width), float(height)) for width, height in values]


def read_cell_sizes(filepath: PathLike) -> List[Size]:
    """
    Convenience function to read a cell size table

    Args:
        filepath: Path to TSV file

    Returns:
        List of Size in file order
    """
    return CellSizeReader.read(filepath)


class PlacementReader:
    """Reads placement tables written by PlacementWriter"""

    @staticmethod
    def read(filepath: PathLike) -> PlacementTableResult:
        """
        Read placements with metadata

        Args:
            filepath: Path to placement TSV file

        Returns:
            Tuple of (placements_df, metadata)
        """
        metadata: LayoutMetadata = {}

        # Read metadata
        with open(filepath, 'r') as f:
            for line in f:
                if not line.startswith('# '):
                    break
                key, _, value = line[2:].strip().partition('=')
                if key in METADATA_KEYS:
                    metadata[key] = METADATA_KEYS[key](value)  # type: ignore[literal-required]

        # Read full dataframe
        placements: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')

        if 'total_width' not in metadata or 'total_height' not in metadata:
            raise ValueError(f"No total size metadata found in {filepath}")

        missing = [col for col in PLACEMENT_COLUMNS if col not in placements.columns]
        if missing:
            raise ValueError(f"Missing columns {missing} in {filepath}")

        return placements, metadata


def read_placements(filepath: PathLike) -> PlacementTableResult:
    """
    Convenience function to read a placement table

    Args:
        filepath: Path to placement TSV file

    Returns:
        Tuple of (placements_df, metadata)
    """
    return PlacementReader.read(filepath)
