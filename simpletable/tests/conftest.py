"""
Shared pytest fixtures for SimpleTable tests
"""
import pytest
from pathlib import Path

from simpletable import Size, TableLayoutConfig, TableLayoutEngine


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to fixtures directory"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def three_cells():
    """Three cells used by the reference two-column scenario"""
    return [Size(10, 20), Size(30, 5), Size(5, 15)]


@pytest.fixture
def two_column_engine():
    """Plain two-column engine, no overrides"""
    return TableLayoutEngine(TableLayoutConfig(columns_count=2))


class RecordingSubview:
    """LayoutSubview stand-in that remembers where it was placed"""

    def __init__(self, width, height):
        self.size = Size(width, height)
        self.measure_calls = 0
        self.placed_at = None
        self.placed_size = None

    def intrinsic_size(self):
        self.measure_calls += 1
        return self.size

    def place(self, origin, size):
        self.placed_at = origin
        self.placed_size = size


@pytest.fixture
def make_subviews():
    """Factory building RecordingSubview objects from (width, height) pairs"""
    def _make(sizes):
        return [RecordingSubview(w, h) for w, h in sizes]
    return _make


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the command-line pipeline"
    )
