"""
Host adapter for SimpleTable

Binds the layout engine to whatever view layer sits around it. A host only
has to provide subviews that can report an intrinsic size and accept a
placement; TableLayout then answers the host's layout protocol:
make_cache -> size_that_fits -> place_subviews.
"""
from __future__ import annotations
from typing import List, Optional, Protocol, Sequence, runtime_checkable
import logging

from ..config import TableLayoutConfig
from .cache import LayoutCache
from .engine import TableLayoutEngine
from .types import LayoutResult, Placement, Point, Rect, Size

logger = logging.getLogger(__name__)


@runtime_checkable
class LayoutSubview(Protocol):
    """Capabilities the host provides for every child view"""

    def intrinsic_size(self) -> Size:
        """Natural size of the view with no constraint imposed"""
        ...

    def place(self, origin: Point, size: Size) -> None:
        """Position the view with its top-left corner at origin, proposing size"""
        ...


class TableLayout:
    """
    Table layout bound to a host's subviews

    Example:
        >>> layout = TableLayout(TableLayoutConfig(columns_count=3), cache=LayoutCache())
        >>> result = layout.make_cache(subviews)
        >>> layout.size_that_fits(subviews, result)
        >>> layout.place_subviews(Rect(Point(10, 10), size), subviews, result)
    """

    def __init__(self, config: TableLayoutConfig, cache: Optional[LayoutCache] = None) -> None:
        self.config = config
        self.engine = TableLayoutEngine(config)
        self.cache = cache

    def make_cache(self, subviews: Sequence[LayoutSubview]) -> LayoutResult:
        """Measure every subview and compute the layout"""
        sizes = [subview.intrinsic_size() for subview in subviews]
        if self.cache is not None:
            return self.cache.get_or_compute(self.engine, sizes)
        return self.engine.compute_layout(sizes)

    def size_that_fits(
        self,
        subviews: Sequence[LayoutSubview],
        cache: Optional[LayoutResult] = None
    ) -> Size:
        """Total size of the table; the proposed size is not consulted"""
        if cache is None:
            cache = self.make_cache(subviews)
        return self.engine.total_size(cache)

    def place_subviews(
        self,
        bounds: Rect,
        subviews: Sequence[LayoutSubview],
        cache: Optional[LayoutResult] = None
    ) -> List[Placement]:
        """
        Place every subview inside bounds

        Args:
            bounds: Rectangle granted by the host; its min corner offsets all cells
            subviews: Subviews in linear order
            cache: Layout from make_cache (computed when omitted)

        Returns:
            Placements that were issued, in subview order
        """
        if cache is None:
            cache = self.make_cache(subviews)
        if bounds.size.width < cache.total_width or bounds.size.height < cache.total_height:
            logger.warning(f"Bounds {bounds.size.width:g} x {bounds.size.height:g} smaller than "
                           f"table {cache.total_width:g} x {cache.total_height:g}, cells will overflow")
        placements = self.engine.placements(
            cache,
            origin=Point(bounds.min_x, bounds.min_y),
            count=len(subviews)
        )
        for subview, placement in zip(subviews, placements):
            subview.place(placement.origin, placement.size)
        logger.debug(f"Placed {len(placements)} subviews in bounds at "
                     f"({bounds.min_x}, {bounds.min_y})")
        return placements
