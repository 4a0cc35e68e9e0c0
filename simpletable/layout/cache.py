"""
Memoization for computed table layouts

A LayoutResult only depends on the engine configuration and the intrinsic
size sequence, so it can be reused for repeated total-size / placement
queries until either of them changes.
"""
from __future__ import annotations
from collections import OrderedDict
from typing import Optional, Sequence, Tuple
import logging
import threading

from ..config import TableLayoutConfig
from ..types import SizeLike
from ..utils import coerce_size
from .engine import TableLayoutEngine
from .types import LayoutResult, Size

logger = logging.getLogger(__name__)

CacheKey = Tuple[TableLayoutConfig, Tuple[Size, ...]]


class LayoutCache:
    """
    In-memory layout cache keyed on configuration and cell sizes

    Keys compare by content, so a fresh list of equal sizes hits the cache.
    Thread-safe: lookups and stores are guarded by a lock.
    """

    def __init__(self, maxsize: int = 1):
        """
        Args:
            maxsize: Number of layouts kept; least recently used ones are evicted
        """
        if maxsize < 1:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: 'OrderedDict[CacheKey, LayoutResult]' = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def make_key(config: TableLayoutConfig, cell_sizes: Sequence[SizeLike]) -> CacheKey:
        return config, tuple(coerce_size(s) for s in cell_sizes)

    def get(self, config: TableLayoutConfig, cell_sizes: Sequence[SizeLike]) -> Optional[LayoutResult]:
        """
        Get a stored layout

        Returns:
            Cached LayoutResult or None if not found
        """
        key = self.make_key(config, cell_sizes)
        with self._lock:
            result = self._entries.get(key)
            if result is not None:
                self._entries.move_to_end(key)
            return result

    def get_or_compute(
        self,
        engine: TableLayoutEngine,
        cell_sizes: Sequence[SizeLike]
    ) -> LayoutResult:
        """
        Return the stored layout for these inputs, computing it on a miss

        Args:
            engine: Engine whose configuration is part of the key
            cell_sizes: Intrinsic cell sizes in linear order

        Returns:
            LayoutResult equal to engine.compute_layout(cell_sizes)
        """
        key = self.make_key(engine.config, cell_sizes)
        with self._lock:
            result = self._entries.get(key)
            if result is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug(f"Layout cache hit ({len(key[1])} cells)")
                return result

        result = engine.compute_layout(key[1])

        with self._lock:
            self.misses += 1
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
        logger.debug(f"Layout cache miss ({len(key[1])} cells)")
        return result

    def clear(self) -> None:
        """Drop every stored layout"""
        with self._lock:
            self._entries.clear()
