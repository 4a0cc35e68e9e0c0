"""
SimpleTable Configuration
Layout options and rendering parameters
"""
from dataclasses import dataclass
from typing import Optional, Tuple
import math


@dataclass(frozen=True)
class TableLayoutConfig:
    """
    Table layout options

    Fixed at construction. The engine does not validate these values;
    callers that accept user input should call validate() first.
    """

    columns_count: int
    """Number of columns; cells wrap to the next row after this many"""

    equal_column_widths: bool = False
    """Force every column to the width of the widest column"""

    equal_row_heights: bool = False
    """Force every row to the height of the tallest row"""

    cell_aspect_ratio: Optional[float] = None
    """Width / height of every cell. When set, both equal_* flags are ignored"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def uniform(cls, columns_count: int) -> 'TableLayoutConfig':
        """
        Every column shares one width and every row shares one height

        Example:
            >>> config = TableLayoutConfig.uniform(3)
            >>> engine = TableLayoutEngine(config)
        """
        return cls(columns_count=columns_count, equal_column_widths=True, equal_row_heights=True)

    @classmethod
    def square(cls, columns_count: int) -> 'TableLayoutConfig':
        """
        Square cells sized to fit the largest cell content

        Example:
            >>> config = TableLayoutConfig.square(4)
        """
        return cls(columns_count=columns_count, cell_aspect_ratio=1.0)

    def validate(self) -> None:
        """
        Check the configuration contract

        Raises:
            ValueError: columns_count below 1, or an aspect ratio that is
                not a positive finite number
        """
        if isinstance(self.columns_count, bool) or not isinstance(self.columns_count, int):
            raise ValueError(f"columns_count must be an integer, got {self.columns_count!r}")
        if self.columns_count < 1:
            raise ValueError(f"columns_count must be positive, got {self.columns_count}")
        if self.cell_aspect_ratio is not None:
            ratio = self.cell_aspect_ratio
            if not math.isfinite(ratio) or ratio <= 0:
                raise ValueError(f"cell_aspect_ratio must be a positive number, got {ratio}")


@dataclass
class RenderConfig:
    """
    Rendering parameters for TableRenderer
    """

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_size: Tuple[float, float] = (8.0, 6.0)
    """Figure size in inches (width, height)"""

    dpi: int = 150
    """DPI for saved figures"""

    margin: float = 0.05
    """Blank border around the table, as a fraction of the table size"""

    title_fontsize: int = 12
    """Font size for the figure title"""

    # ============================================================
    # CELL STYLING
    # ============================================================
    cell_facecolor: str = '#dbe9f6'
    """Fill colour for cell rectangles"""

    cell_edgecolor: str = '#2b5d8a'
    """Border colour for cell rectangles"""

    cell_alpha: float = 0.9
    """Transparency of cell fills"""

    cell_linewidth: float = 1.0
    """Border width for cell rectangles (px)"""

    # ============================================================
    # LABELS
    # ============================================================
    show_labels: bool = True
    """Write each cell's linear index in its centre"""

    label_fontsize: int = 8
    """Font size for cell labels"""

    @classmethod
    def publication(cls) -> 'RenderConfig':
        """
        High-quality settings for documents

        - 600 DPI
        - Thinner borders, no index labels
        """
        config = cls()
        config.dpi = 600
        config.figure_size = (10.0, 7.5)
        config.cell_linewidth = 0.6
        config.show_labels = False
        return config

    @classmethod
    def debug(cls) -> 'RenderConfig':
        """
        Settings for inspecting layouts

        - Opaque, high-contrast cells
        - Larger labels
        """
        config = cls()
        config.cell_facecolor = '#ffe08a'
        config.cell_edgecolor = 'black'
        config.cell_alpha = 1.0
        config.cell_linewidth = 1.5
        config.label_fontsize = 11
        return config
