"""
Tests for the Matrix value type: accessors, indexing, capabilities,
immutability and numpy export.
"""

from dataclasses import FrozenInstanceError
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.capabilities import CAPABILITY_ADD, CAPABILITY_HADAMARD, CAPABILITY_MULTIPLY
from pymatrix.dense import from_elements, zero_filled


class AddOnly:
    def __add__(self, other):
        return AddOnly()


class TestAccessors:

    def test_shape_and_size(self, wide_int):
        assert wide_int.rows == 2
        assert wide_int.columns == 3
        assert wide_int.shape == (2, 3)
        assert wide_int.size == 6
        assert wide_int.element_type is int

    def test_row_major_indexing(self, wide_int):
        # (r, c) lives at flat index r * columns + c
        for r in range(2):
            for c in range(3):
                assert wide_int[r, c] == wide_int.contents[r * 3 + c]
        assert wide_int[1, 0] == 4

    def test_row(self, wide_int):
        assert wide_int.row(0) == (1, 2, 3)
        assert wide_int.row(1) == (4, 5, 6)

    def test_index_out_of_range(self, wide_int):
        with pytest.raises(IndexError):
            wide_int[2, 0]
        with pytest.raises(IndexError):
            wide_int[0, 3]
        with pytest.raises(IndexError):
            wide_int[-1, 0]
        with pytest.raises(IndexError):
            wide_int.row(2)

    def test_iteration_is_row_major(self, wide_int):
        assert list(wide_int) == [1, 2, 3, 4, 5, 6]

    def test_repr(self, wide_int):
        assert repr(wide_int) == "Matrix(rows=2, columns=3, element_type=int)"


class TestValueSemantics:

    def test_frozen(self, wide_int):
        with pytest.raises(FrozenInstanceError):
            wide_int._rows = 5

    def test_equality(self):
        assert from_elements(1, 2, [1, 2]) == from_elements(1, 2, [1, 2])
        assert from_elements(1, 2, [1, 2]) != from_elements(2, 1, [1, 2])

    def test_equality_includes_element_type(self):
        assert zero_filled(2, 2, int) != zero_filled(2, 2, float)

    def test_hashable(self):
        a = from_elements(1, 2, [1, 2])
        assert hash(a) == hash(from_elements(1, 2, [1, 2]))


class TestSupports:

    @pytest.mark.parametrize("capability", [CAPABILITY_ADD, CAPABILITY_MULTIPLY, CAPABILITY_HADAMARD])
    def test_numbers(self, capability):
        assert zero_filled(1, 1).supports(capability)

    def test_add_only(self):
        m = from_elements(1, 1, [AddOnly()])
        assert m.supports(CAPABILITY_ADD)
        assert not m.supports(CAPABILITY_MULTIPLY)
        assert not m.supports(CAPABILITY_HADAMARD)

    def test_unknown_capability_is_false(self):
        assert not zero_filled(1, 1).supports("invert")


class TestToNumpy:

    def test_float(self, wide_int):
        m = from_elements(2, 2, [1.0, 2.0, 3.0, 4.0])
        array = m.to_numpy()
        assert array.shape == (2, 2)
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array, [[1.0, 2.0], [3.0, 4.0]])

    def test_int(self, wide_int):
        array = wide_int.to_numpy()
        assert np.issubdtype(array.dtype, np.integer)
        assert array.shape == (2, 3)

    def test_empty_keeps_shape(self):
        array = zero_filled(0, 4).to_numpy()
        assert array.shape == (0, 4)
        assert array.dtype == np.float64

    def test_object_dtype_warns(self):
        m = from_elements(1, 2, [Fraction(1, 2), Fraction(1, 3)])
        with pytest.warns(UserWarning, match="Fraction has no native numpy dtype"):
            array = m.to_numpy()
        assert array.dtype == object
        assert array[0, 1] == Fraction(1, 3)

    def test_large_int_warns_about_range(self):
        m = from_elements(1, 2, [2 ** 70, 1])
        with pytest.warns(UserWarning, match="int values exceed the range") as record:
            array = m.to_numpy()
        assert "no native numpy dtype" not in str(record[0].message)
        assert array.dtype == object
        assert array[0, 0] == 2 ** 70
