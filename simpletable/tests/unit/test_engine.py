"""
Unit tests for TableLayoutEngine

Covers measurement, equal-size and aspect-ratio resolution, prefix-sum
origins and placement lookup.
"""
import math

import pytest

from simpletable import Cell, LayoutResult, Point, Size, TableLayoutConfig, TableLayoutEngine


def engine_for(columns_count, **options):
    return TableLayoutEngine(TableLayoutConfig(columns_count=columns_count, **options))


@pytest.mark.unit
class TestCellAt:
    """Tests for row-major index to coordinate mapping"""

    @pytest.mark.parametrize("columns_count", [1, 2, 3, 7])
    def test_row_major_flow(self, columns_count):
        """Cell i sits in column i mod C, row floor(i / C)"""
        engine = engine_for(columns_count)
        for index in range(30):
            cell = engine.cell_at(index)
            assert cell.column == index % columns_count
            assert cell.row == index // columns_count

    def test_coordinates_are_unique(self):
        """No two indices share a coordinate"""
        engine = engine_for(4)
        cells = {engine.cell_at(i) for i in range(50)}
        assert len(cells) == 50


@pytest.mark.unit
class TestMeasurement:
    """Tests for per-column and per-row maxima"""

    def test_reference_scenario(self, two_column_engine, three_cells):
        """Two columns, three cells: tables, total size, origins and sizes"""
        result = two_column_engine.compute_layout(three_cells)

        assert result.column_widths == {0: 10.0, 1: 30.0}
        assert result.row_heights == {0: 20.0, 1: 15.0}
        assert result.size == Size(40, 35)

        assert result.location(Cell(0, 0)) == Point(0, 0)
        assert result.size_for(Cell(0, 0)) == Size(10, 20)
        assert result.location(Cell(1, 0)) == Point(10, 0)
        assert result.size_for(Cell(1, 0)) == Size(30, 20)
        assert result.location(Cell(0, 1)) == Point(0, 20)
        assert result.size_for(Cell(0, 1)) == Size(10, 15)

    def test_column_width_is_widest_cell(self):
        """Each column takes the width of its widest cell"""
        sizes = [(3, 1), (8, 1), (9, 1), (2, 1), (4, 1), (1, 1), (7, 1)]
        result = engine_for(3).compute_layout(sizes)
        assert result.column_widths == {0: 7.0, 1: 8.0, 2: 9.0}

    def test_row_height_is_tallest_cell(self):
        """Each row takes the height of its tallest cell"""
        sizes = [(1, 3), (1, 8), (1, 2), (1, 2), (1, 6)]
        result = engine_for(2).compute_layout(sizes)
        assert result.row_heights == {0: 8.0, 1: 2.0, 2: 6.0}

    def test_fewer_cells_than_columns(self):
        """Only columns holding a cell appear in the result"""
        result = engine_for(5).compute_layout([(10, 10), (20, 5)])
        assert result.column_widths == {0: 10.0, 1: 20.0}
        assert result.n_columns == 2
        assert result.n_rows == 1
        assert result.size == Size(30, 10)

    def test_accepts_tuples(self, two_column_engine, three_cells):
        """(width, height) pairs give the same result as Size objects"""
        as_tuples = [(s.width, s.height) for s in three_cells]
        assert two_column_engine.compute_layout(as_tuples) == two_column_engine.compute_layout(three_cells)

    def test_cells_share_column_width_and_row_height(self):
        """All cells in a column share width, all cells in a row share height"""
        sizes = [(5, 1), (2, 9), (7, 3), (1, 4), (6, 2), (3, 8)]
        result = engine_for(2).compute_layout(sizes)
        for cell, size in result.cell_sizes.items():
            assert size.width == result.column_widths[cell.column]
            assert size.height == result.row_heights[cell.row]


@pytest.mark.unit
class TestEqualSizes:
    """Tests for equal column widths / equal row heights"""

    def test_equal_column_widths(self, three_cells):
        """Every column gets the widest column's width"""
        result = engine_for(2, equal_column_widths=True).compute_layout(three_cells)
        assert result.column_widths == {0: 30.0, 1: 30.0}
        assert result.row_heights == {0: 20.0, 1: 15.0}
        assert result.total_width == 60.0
        assert result.location(Cell(1, 0)) == Point(30, 0)

    def test_equal_row_heights(self, three_cells):
        """Every row gets the tallest row's height"""
        result = engine_for(2, equal_row_heights=True).compute_layout(three_cells)
        assert result.column_widths == {0: 10.0, 1: 30.0}
        assert result.row_heights == {0: 20.0, 1: 20.0}
        assert result.size == Size(40, 40)
        assert result.size_for(Cell(0, 1)) == Size(10, 20)

    def test_both_flags(self, three_cells):
        """Uniform preset equalizes both axes"""
        engine = TableLayoutEngine(TableLayoutConfig.uniform(2))
        result = engine.compute_layout(three_cells)
        assert set(result.cell_sizes.values()) == {Size(30, 20)}
        assert result.size == Size(60, 40)


@pytest.mark.unit
class TestAspectRatio:
    """Tests for fixed cell aspect ratio"""

    def test_widen_single_cell(self):
        """Narrow content is widened to the ratio"""
        result = engine_for(1, cell_aspect_ratio=2.0).compute_layout([(10, 20)])
        assert result.column_widths == {0: 40.0}
        assert result.row_heights == {0: 20.0}
        assert result.size == Size(40, 20)

    def test_grow_height(self):
        """Wide content keeps its width and grows in height"""
        result = engine_for(1, cell_aspect_ratio=2.0).compute_layout([(100, 10)])
        assert result.size == Size(100, 50)

    def test_ratio_holds_for_every_cell(self, three_cells):
        """All columns share one width, all rows one height, width / height == ratio"""
        ratio = 1.5
        result = engine_for(2, cell_aspect_ratio=ratio).compute_layout(three_cells)
        widths = set(result.column_widths.values())
        heights = set(result.row_heights.values())
        assert len(widths) == 1
        assert len(heights) == 1
        for width in widths:
            for height in heights:
                assert width / height == pytest.approx(ratio)

    def test_uses_unmodified_maxima(self, three_cells):
        """Max width 30, max height 20, ratio 1: 30 / 20 >= 1 so cells are 30 x 30"""
        result = engine_for(2, cell_aspect_ratio=1.0).compute_layout(three_cells)
        assert set(result.cell_sizes.values()) == {Size(30, 30)}
        assert result.size == Size(60, 60)

    def test_overrides_equal_flags(self, three_cells):
        """Aspect ratio wins over both equal-size flags"""
        with_flags = engine_for(2, equal_column_widths=True, equal_row_heights=True,
                                cell_aspect_ratio=1.0).compute_layout(three_cells)
        without_flags = engine_for(2, cell_aspect_ratio=1.0).compute_layout(three_cells)
        assert with_flags == without_flags

    def test_zero_height_cells(self):
        """Zero-height content takes its height from the width instead of dividing by zero"""
        result = engine_for(2, cell_aspect_ratio=2.0).compute_layout([(10, 0), (4, 0)])
        assert result.column_widths == {0: 10.0, 1: 10.0}
        assert result.row_heights == {0: 5.0}

    def test_all_empty_cells(self):
        """Zero-size content collapses to zero-size cells"""
        result = engine_for(3, cell_aspect_ratio=1.0).compute_layout([(0, 0)] * 4)
        assert result.size == Size(0, 0)
        assert not any(math.isnan(v) for v in result.column_widths.values())


@pytest.mark.unit
class TestPrefixSums:
    """Tests for origins derived from resolved tables"""

    def test_origin_is_sum_of_preceding(self):
        """origin.x sums preceding column widths, origin.y preceding row heights"""
        sizes = [(i + 1, 2 * i + 1) for i in range(12)]
        result = engine_for(4).compute_layout(sizes)
        for cell, origin in result.cell_locations.items():
            expected_x = sum(result.column_widths[c] for c in range(cell.column))
            expected_y = sum(result.row_heights[r] for r in range(cell.row))
            assert origin.x == pytest.approx(expected_x)
            assert origin.y == pytest.approx(expected_y)

    def test_distance_between_cells_in_row(self):
        """Horizontal distance between two cells equals the widths in between"""
        sizes = [(1.5, 1), (2.25, 1), (3.125, 1), (0.1, 1), (0.7, 1)]
        result = engine_for(5).compute_layout(sizes)
        for c1 in range(5):
            for c2 in range(c1 + 1, 5):
                distance = result.location(Cell(c2, 0)).x - result.location(Cell(c1, 0)).x
                expected = sum(result.column_widths[c] for c in range(c1, c2))
                assert distance == pytest.approx(expected)

    def test_total_size_is_sum_of_tables(self):
        """Total size equals summed widths by summed heights"""
        sizes = [(3, 7), (11, 2), (5, 5), (8, 1), (2, 9)]
        result = engine_for(3, equal_row_heights=True).compute_layout(sizes)
        assert result.total_width == pytest.approx(sum(result.column_widths.values()))
        assert result.total_height == pytest.approx(sum(result.row_heights.values()))

    def test_origins_follow_resolved_widths(self, three_cells):
        """Origins are computed after the equal-width override"""
        result = engine_for(2, equal_column_widths=True).compute_layout(three_cells)
        assert result.location(Cell(1, 0)) == Point(30, 0)
        assert result.location(Cell(0, 1)) == Point(0, 20)


@pytest.mark.unit
class TestEmptyInput:
    """Tests for zero cells"""

    @pytest.mark.parametrize("options", [
        {},
        {"equal_column_widths": True, "equal_row_heights": True},
        {"cell_aspect_ratio": 2.0},
    ])
    def test_empty_result(self, options):
        """No cells gives empty tables and zero size"""
        engine = engine_for(3, **options)
        result = engine.compute_layout([])
        assert result == LayoutResult()
        assert result.is_empty
        assert engine.total_size(result) == Size(0, 0)
        assert engine.placements(result) == []


@pytest.mark.unit
class TestPlacements:
    """Tests for placement records"""

    def test_placements_in_index_order(self, two_column_engine, three_cells):
        """One placement per cell with its coordinate, origin and size"""
        result = two_column_engine.compute_layout(three_cells)
        placements = two_column_engine.placements(result)

        assert [p.index for p in placements] == [0, 1, 2]
        assert [p.cell for p in placements] == [Cell(0, 0), Cell(1, 0), Cell(0, 1)]
        assert placements[1].origin == Point(10, 0)
        assert placements[1].size == Size(30, 20)

    def test_origin_offset(self, two_column_engine, three_cells):
        """Every origin is translated by the supplied offset"""
        result = two_column_engine.compute_layout(three_cells)
        placements = two_column_engine.placements(result, origin=Point(100, 50))
        assert [p.origin for p in placements] == [Point(100, 50), Point(110, 50), Point(100, 70)]
        assert [p.size for p in placements] == [Size(10, 20), Size(30, 20), Size(10, 15)]

    def test_missing_cells_default_to_zero(self, two_column_engine, three_cells):
        """Indices beyond the computed cells get zero origin and zero size"""
        result = two_column_engine.compute_layout(three_cells)
        placements = two_column_engine.placements(result, origin=Point(5, 5), count=5)
        assert len(placements) == 5
        assert placements[3].cell == Cell(1, 1)
        assert placements[3].origin == Point(5, 5)
        assert placements[3].size == Size(0, 0)

    def test_total_size(self, two_column_engine, three_cells):
        """total_size reports the precomputed bounding size"""
        result = two_column_engine.compute_layout(three_cells)
        assert two_column_engine.total_size(result) == Size(40, 35)


@pytest.mark.unit
class TestIdempotence:
    """Tests for purity of compute_layout"""

    def test_repeated_calls_are_identical(self):
        """Same inputs and configuration give equal results"""
        sizes = [(0.1 * i, 0.3 * (i % 4)) for i in range(23)]
        engine = engine_for(4, equal_row_heights=True)
        first = engine.compute_layout(sizes)
        second = engine.compute_layout(list(sizes))
        assert first == second
        assert first is not second

    def test_input_not_modified(self, two_column_engine, three_cells):
        """The size sequence is left untouched"""
        before = list(three_cells)
        two_column_engine.compute_layout(three_cells)
        assert three_cells == before


@pytest.mark.unit
class TestLayoutResultImmutability:
    """Tests for read-only results"""

    def test_tables_are_read_only(self, two_column_engine, three_cells):
        """Every table rejects item assignment"""
        result = two_column_engine.compute_layout(three_cells)
        with pytest.raises(TypeError):
            result.column_widths[0] = 1.0  # type: ignore[index]
        with pytest.raises(TypeError):
            result.row_heights[0] = 1.0  # type: ignore[index]
        with pytest.raises(TypeError):
            result.cell_locations[Cell(0, 0)] = Point(5, 5)  # type: ignore[index]
        with pytest.raises(TypeError):
            result.cell_sizes[Cell(0, 0)] = Size(5, 5)  # type: ignore[index]

    def test_constructor_copies_tables(self):
        """Mutating the dict a result was built from leaves the result unchanged"""
        widths = {0: 4.0}
        result = LayoutResult(column_widths=widths, total_width=4.0)
        widths[0] = 100.0
        assert result.column_widths == {0: 4.0}

    def test_not_hashable(self, two_column_engine, three_cells):
        """Results compare by value but cannot be hashed"""
        result = two_column_engine.compute_layout(three_cells)
        with pytest.raises(TypeError):
            hash(result)


@pytest.mark.unit
class TestAspectCellSize:
    """Tests for the aspect-ratio cell computation"""

    def test_widens_narrow_content(self):
        assert TableLayoutEngine._aspect_cell_size(Size(10, 20), 2.0) == Size(40, 20)

    def test_grows_wide_content(self):
        assert TableLayoutEngine._aspect_cell_size(Size(100, 10), 2.0) == Size(100, 50)

    def test_zero_height_content(self):
        """inf / NaN content ratios take the height from the width"""
        assert TableLayoutEngine._aspect_cell_size(Size(10, 0), 2.0) == Size(10, 5)
        assert TableLayoutEngine._aspect_cell_size(Size(0, 0), 2.0) == Size(0, 0)
