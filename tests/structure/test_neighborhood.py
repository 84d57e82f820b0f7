"""Tests for Neighbor and Neighborhood."""

import numpy as np
import pytest

from pixlabel.core.exceptions import EmptyNeighborhoodError, InvalidArgumentError
from pixlabel.structure import Neighbor, Neighborhood, merge_neighborhoods


class TestNeighbor:
    def test_value_equality(self):
        assert Neighbor(1, -1) == Neighbor(dy=1, dx=-1)
        assert hash(Neighbor(0, 2)) == hash(Neighbor(0, 2))

    def test_axis_aliases(self):
        nbr = Neighbor(dy=-2, dx=3)
        assert nbr.y == -2
        assert nbr.x == 3

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Neighbor(0, 0).dy = 1


class TestConstruction:
    def test_neighbors_in_row_major_order(self):
        nbr = Neighborhood([[0, 1, 0], [1, 0, 1], [0, 1, 0]])

        assert nbr.neighbors == (Neighbor(-1, 0), Neighbor(0, -1), Neighbor(0, 1), Neighbor(1, 0))
        assert nbr.n_neighbors == 4
        assert nbr.has_neighbors

    def test_offsets_match_neighbors(self):
        nbr = Neighborhood([[1, 0, 0, 0, 1]])

        assert nbr.offsets.dtype == np.int64
        np.testing.assert_array_equal(nbr.offsets, [[0, -2], [0, 2]])

    def test_all_false_kernel_has_no_neighbors(self):
        nbr = Neighborhood(np.zeros((3, 5), dtype=bool))

        assert nbr.neighbors == ()
        assert not nbr.has_neighbors
        assert nbr.offsets.shape == (0, 2)

    def test_single_cell_kernel(self):
        nbr = Neighborhood([[True]])

        assert nbr.shape == (1, 1)
        assert nbr.center == (0, 0)
        assert nbr.neighbors == (Neighbor(0, 0),)

    @pytest.mark.parametrize("kernel", [np.ones((2, 3)), np.ones((3, 4)), np.ones((1, 2))])
    def test_even_dimension_rejected(self, kernel):
        with pytest.raises(InvalidArgumentError, match="odd"):
            Neighborhood(kernel)

    def test_ragged_rows_rejected(self):
        with pytest.raises(InvalidArgumentError, match="same length"):
            Neighborhood([[1, 1, 1], [1], [1, 1, 1]])

    @pytest.mark.parametrize("kernel", [[1, 1, 1], [], np.ones((3, 3, 3))])
    def test_non_2d_rejected(self, kernel):
        with pytest.raises(InvalidArgumentError):
            Neighborhood(kernel)

    def test_kernel_is_copied_and_read_only(self):
        source = np.ones((3, 3), dtype=bool)
        nbr = Neighborhood(source)
        source[0, 0] = False

        assert nbr.is_neighbor(0, 0)
        with pytest.raises(ValueError):
            nbr.kernel[1, 1] = False
        with pytest.raises(ValueError):
            nbr.offsets[0, 0] = 5

    def test_to_array_is_writable_copy(self):
        nbr = Neighborhood.four_connected()
        arr = nbr.to_array()
        arr[0, 0] = True

        assert not nbr.is_neighbor(0, 0)
        np.testing.assert_array_equal(nbr.to_array(dtype=np.uint8), [[0, 1, 0], [1, 1, 1], [0, 1, 0]])


class TestQueries:
    def test_is_neighbor(self):
        nbr = Neighborhood.saltire(3)

        assert nbr.is_neighbor(0, 0)
        assert nbr.is_neighbor(1, 1)
        assert not nbr.is_neighbor(0, 1)

    def test_is_neighbor_out_of_range(self):
        with pytest.raises(IndexError):
            Neighborhood.square(3).is_neighbor(3, 0)

    def test_dimensions(self):
        nbr = Neighborhood.cross(3, 5)

        assert nbr.height == 3
        assert nbr.width == 5
        assert nbr.center == (1, 2)

    def test_equality_and_hash(self):
        a = Neighborhood([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
        b = Neighborhood.four_connected()

        assert a == b
        assert hash(a) == hash(b)
        assert a != Neighborhood.eight_connected()
        assert a != "not a neighborhood"

    def test_repr_draws_kernel(self):
        text = repr(Neighborhood.four_connected())

        assert "3x3" in text
        assert ".#." in text
        assert "###" in text


class TestComplement:
    def test_complement_inverts_kernel(self):
        comp = Neighborhood.four_connected().complement()

        np.testing.assert_array_equal(comp.kernel, [[1, 0, 1], [0, 0, 0], [1, 0, 1]])
        assert comp.neighbors == (Neighbor(-1, -1), Neighbor(-1, 1), Neighbor(1, -1), Neighbor(1, 1))

    def test_invert_operator(self):
        assert ~Neighborhood.four_connected() == Neighborhood.four_connected().complement()

    def test_complement_of_full_kernel_is_empty(self):
        assert not Neighborhood.square(5).complement().has_neighbors


class TestMerge:
    def test_merge_centres_smaller_kernel(self):
        merged = merge_neighborhoods(Neighborhood.horizontal(5), Neighborhood.vertical(3))

        expected = [
            [0, 0, 1, 0, 0],
            [1, 1, 1, 1, 1],
            [0, 0, 1, 0, 0],
        ]
        np.testing.assert_array_equal(merged.kernel, np.asarray(expected, dtype=bool))

    def test_merge_is_union(self):
        merged = Neighborhood.four_connected() | Neighborhood.saltire(3)

        assert merged == Neighborhood.eight_connected()

    def test_merge_method(self):
        a = Neighborhood.saltire(5)
        assert a.merge(Neighborhood.cross(5, 5)) == merge_neighborhoods(Neighborhood.cross(5, 5), a)

    def test_merge_with_self_is_identity(self):
        nbr = Neighborhood.circular(7)
        assert nbr | nbr == nbr

    @pytest.mark.parametrize("empty_first", [True, False])
    def test_merge_empty_raises(self, empty_first):
        empty = Neighborhood(np.zeros((3, 3), dtype=bool))
        full = Neighborhood.square(3)
        first, second = (empty, full) if empty_first else (full, empty)

        with pytest.raises(EmptyNeighborhoodError):
            merge_neighborhoods(first, second)

    def test_or_with_other_type(self):
        with pytest.raises(TypeError):
            Neighborhood.square(3) | 1  # noqa: B018


class TestFactories:
    def test_square(self):
        nbr = Neighborhood.square(5)
        assert nbr.shape == (5, 5)
        assert nbr.n_neighbors == 25

    def test_horizontal_and_vertical(self):
        assert Neighborhood.horizontal(7).shape == (1, 7)
        assert Neighborhood.vertical(7).shape == (7, 1)
        assert Neighborhood.horizontal(7).neighbors[0] == Neighbor(0, -3)
        assert Neighborhood.vertical(7).neighbors[-1] == Neighbor(3, 0)

    def test_cross(self):
        nbr = Neighborhood.cross(5, 3)
        expected = [
            [0, 1, 0],
            [0, 1, 0],
            [1, 1, 1],
            [0, 1, 0],
            [0, 1, 0],
        ]
        np.testing.assert_array_equal(nbr.kernel, np.asarray(expected, dtype=bool))

    def test_saltire(self):
        expected = [
            [1, 0, 0, 0, 1],
            [0, 1, 0, 1, 0],
            [0, 0, 1, 0, 0],
            [0, 1, 0, 1, 0],
            [1, 0, 0, 0, 1],
        ]
        np.testing.assert_array_equal(Neighborhood.saltire(5).kernel, np.asarray(expected, dtype=bool))

    def test_four_and_eight_connected(self):
        assert Neighborhood.four_connected().n_neighbors == 5
        assert Neighborhood.eight_connected().n_neighbors == 9

    def test_circular(self):
        expected = [
            [0, 0, 1, 0, 0],
            [0, 1, 1, 1, 0],
            [1, 1, 1, 1, 1],
            [0, 1, 1, 1, 0],
            [0, 0, 1, 0, 0],
        ]
        np.testing.assert_array_equal(Neighborhood.circular(5).kernel, np.asarray(expected, dtype=bool))
        assert Neighborhood.circular(1).neighbors == (Neighbor(0, 0),)

    @pytest.mark.parametrize(
        "factory",
        [Neighborhood.square, Neighborhood.horizontal, Neighborhood.vertical, Neighborhood.saltire, Neighborhood.circular],
    )
    @pytest.mark.parametrize("size", [0, -1, 2, 4, 2.5, True])
    def test_invalid_sizes(self, factory, size):
        with pytest.raises(InvalidArgumentError, match="positive odd integer"):
            factory(size)

    @pytest.mark.parametrize("n,m", [(2, 3), (3, 0), (-3, 3)])
    def test_cross_invalid_sizes(self, n, m):
        with pytest.raises(InvalidArgumentError):
            Neighborhood.cross(n, m)

    def test_numpy_integer_size(self):
        assert Neighborhood.square(np.int64(3)) == Neighborhood.eight_connected()
