"""
Table visualizer

Draws a computed table layout as a figure of cell rectangles.
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure

from .config import RenderConfig
from .layout.types import Size
from .types import PathLike

logger = logging.getLogger(__name__)


class TableRenderer:
    """
    Renders placement tables with a top-left origin

    The y axis grows downwards to match the placement coordinates.
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        """
        Initialize TableRenderer

        Args:
            config: Rendering configuration. If None, uses default settings.

        Example:
            >>> renderer = TableRenderer()
            >>> renderer = TableRenderer(RenderConfig.publication())
        """
        self.config: RenderConfig = config or RenderConfig()

    def plot(
        self,
        placements: pd.DataFrame,
        total_size: Size,
        output_file: Optional[PathLike] = None,
        title: Optional[str] = None,
        figsize: Optional[Tuple[float, float]] = None
    ) -> Figure:
        """
        Draw every placement as a rectangle

        Args:
            placements: DataFrame with index, x, y, width, height columns
                        (see PlacementWriter.to_dataframe)
            total_size: Bounding size of the table
            output_file: Save the figure here when given
            title: Optional figure title
            figsize: Override for RenderConfig.figure_size

        Returns:
            The matplotlib Figure (closed from pyplot when saved)
        """
        cfg = self.config
        fig, ax = plt.subplots(figsize=figsize or cfg.figure_size)

        if total_size.width <= 0 or total_size.height <= 0:
            logger.warning(f"Table has zero size ({total_size.width} x {total_size.height}), "
                           f"nothing to draw")

        columns = [placements[col] for col in ('index', 'x', 'y', 'width', 'height')]
        for index, x, y, width, height in zip(*columns):
            ax.add_patch(patches.Rectangle(
                (x, y), width, height,
                facecolor=cfg.cell_facecolor,
                edgecolor=cfg.cell_edgecolor,
                linewidth=cfg.cell_linewidth,
                alpha=cfg.cell_alpha
            ))
            if cfg.show_labels:
                ax.text(x + width / 2, y + height / 2, str(index),
                        ha='center', va='center', fontsize=cfg.label_fontsize)

        pad_x = max(total_size.width, 1.0) * cfg.margin
        pad_y = max(total_size.height, 1.0) * cfg.margin
        ax.set_xlim(-pad_x, total_size.width + pad_x)
        # Top-left origin
        ax.set_ylim(total_size.height + pad_y, -pad_y)
        ax.set_aspect('equal')
        ax.set_xlabel('x')
        ax.set_ylabel('y')

        if title:
            ax.set_title(title, fontsize=cfg.title_fontsize)

        if output_file is not None:
            fig.savefig(output_file, dpi=cfg.dpi, bbox_inches='tight')
            plt.close(fig)
            logger.info(f"Figure saved to {output_file}")

        return fig
