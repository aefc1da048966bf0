import numpy as np
import pytest

from redmart.errors import MalformedInput
from redmart.grid import Grid, idx_to_rc, rc_to_idx, neighbors_4


def test_index_helpers_round_trip_corners():
    assert idx_to_rc(0, 4) == (0, 0)
    assert idx_to_rc(7, 4) == (1, 3)
    assert rc_to_idx(3, 3, 4) == 15


def test_neighbors_4_order_and_bounds():
    assert list(neighbors_4((1, 1), 3, 3)) == [(1, 0), (1, 2), (0, 1), (2, 1)]
    assert list(neighbors_4((0, 0), 3, 3)) == [(0, 1), (1, 0)]
    assert list(neighbors_4((0, 0), 1, 1)) == []


class TestDescendingNeighbors:
    def test_top_left_corner(self, redmart_grid):
        # 4 -> right 8 is higher, down 2 is lower
        assert redmart_grid.descending_neighbors(0) == [4]

    def test_bottom_right_corner(self, redmart_grid):
        # 6 -> left 1, up 5
        assert redmart_grid.descending_neighbors(15) == [14, 11]

    def test_edge_with_equal_neighbor(self, redmart_grid):
        # 3 at (0,3): left 7 higher, down 3 equal
        assert redmart_grid.descending_neighbors(3) == []

    def test_interior_peak_all_four(self, redmart_grid):
        # 9 at (1,2): left, right, up, down
        assert redmart_grid.descending_neighbors(6) == [5, 7, 2, 10]

    def test_interior_single(self, redmart_grid):
        assert redmart_grid.descending_neighbors(9) == [10]

    def test_plateau_has_no_edges(self):
        g = Grid(2, 2, [3, 3, 3, 3])
        assert all(g.descending_neighbors(i) == [] for i in range(4))

    def test_out_of_range_index(self, redmart_grid):
        with pytest.raises(IndexError):
            redmart_grid.descending_neighbors(16)
        with pytest.raises(IndexError):
            redmart_grid.elev(-1)


class TestConstruction:
    def test_shape_and_lookup(self, redmart_grid):
        assert redmart_grid.shape == (4, 4)
        assert redmart_grid.size == 16
        assert redmart_grid.elev(6) == 9
        assert redmart_grid.as_array()[2, 3] == 5

    def test_elevations_are_read_only(self, redmart_grid):
        with pytest.raises(ValueError):
            redmart_grid.elevations[0] = 100

    def test_length_mismatch(self):
        with pytest.raises(MalformedInput, match="expected 6 elevations"):
            Grid(3, 2, [1, 2, 3, 4, 5])

    def test_negative_dimensions(self):
        with pytest.raises(MalformedInput, match="negative"):
            Grid(-1, 2, [])

    def test_unparsable_elevation(self):
        with pytest.raises(MalformedInput):
            Grid(2, 1, [b"1", b"x"])

    def test_elevation_out_of_range(self):
        with pytest.raises(MalformedInput, match="outside"):
            Grid(2, 1, [1, -5])
        with pytest.raises(MalformedInput, match="outside"):
            Grid(1, 1, [2**31])

    def test_accepts_byte_tokens(self):
        g = Grid(2, 1, [b"7", b"2147483647"])
        assert g.elev(1) == 2**31 - 1

    def test_ragged_rows(self):
        with pytest.raises(MalformedInput, match="row 1"):
            Grid.from_rows([[1, 2], [3]])

    def test_empty_rows_build_empty_grid(self):
        g = Grid.from_rows([])
        assert g.size == 0


def test_symmetry_transforms(redmart_grid):
    a = redmart_grid.as_array()
    assert np.array_equal(redmart_grid.flipped(1).as_array(), a[:, ::-1])
    assert np.array_equal(redmart_grid.flipped(0).as_array(), a[::-1, :])
    assert np.array_equal(redmart_grid.rotated(2).as_array(), a[::-1, ::-1])
    assert np.array_equal(redmart_grid.shifted(10).as_array(), a + 10)
    assert np.array_equal(redmart_grid.scaled(3).as_array(), a * 3)

    wide = Grid(3, 1, [1, 2, 3])
    assert wide.rotated(1).shape == (3, 1)
