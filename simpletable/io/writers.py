"""
I/O Writers

Handles writing of layout results.
"""

from typing import List
import pandas as pd
from pathlib import Path
import logging

from ..layout.types import LayoutResult, Placement
from ..types import PathLike, PlacementRecord, PLACEMENT_COLUMNS

logger = logging.getLogger(__name__)


class PlacementWriter:
    """Writes placements in TSV format with layout metadata"""

    def __init__(self, columns_count):
        """
        Initialize placement writer

        Args:
            columns_count: Column count the layout was computed with
        """
        self.columns_count = columns_count

    @staticmethod
    def to_dataframe(placements: List[Placement]) -> pd.DataFrame:
        """Flatten placements into one row per cell"""
        records: List[PlacementRecord] = [
            {
                'index': p.index,
                'column': p.cell.column,
                'row': p.cell.row,
                'x': p.origin.x,
                'y': p.origin.y,
                'width': p.size.width,
                'height': p.size.height,
            }
            for p in placements
        ]
        return pd.DataFrame(records, columns=PLACEMENT_COLUMNS)

    def write(self, result: LayoutResult, placements: List[Placement], output_file: PathLike) -> None:
        """
        Write placements with metadata header

        Args:
            result: Layout the placements were derived from (for total size)
            placements: Placements to write
            output_file: Path to output TSV file
        """
        if not placements:
            logger.warning("No placements to save, writing header only")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w') as f:
            f.write(f"# columns_count={self.columns_count}\n")
            f.write(f"# total_width={result.total_width!r}\n")
            f.write(f"# total_height={result.total_height!r}\n")

        # Append data
        self.to_dataframe(placements).to_csv(output_file, sep='\t', index=False, mode='a')

        logger.info(f"Placements saved to {output_file} ({len(placements)} cells)")


def write_placements(result: LayoutResult, placements: List[Placement],
                     output_file: PathLike, columns_count: int) -> None:
    """
    Convenience function to write a placement table

    Args:
        result: Computed layout
        placements: Placements derived from it
        output_file: Path to output TSV file
        columns_count: Column count the layout was computed with
    """
    writer = PlacementWriter(columns_count)
    writer.write(result, placements, output_file)
