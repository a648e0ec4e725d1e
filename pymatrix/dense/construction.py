"""
Matrix constructors.

Provides zero_filled(), one_filled(), identity(), from_elements() and
from_array(). All of them validate the shape and return a Matrix whose
contents length is exactly rows * columns.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_capacity, check_dimension
from pymatrix.dense.matrix import Matrix
from pymatrix.dense._common import default_of, one_of, zero_of


def zero_filled(rows: int, columns: int, element_type: type = float) -> Matrix:
    """
    Matrix of the given shape with every element equal to element_type(0).

    Parameters
    ----------
    rows, columns : int
        Non-negative shape.
    element_type : type
        Element type. Default float.
    """
    check_dimension(rows, 'rows')
    check_dimension(columns, 'columns')
    zero = zero_of(element_type)
    return Matrix._build(rows, columns, (zero,) * (rows * columns), element_type)


def one_filled(rows: int, columns: int, element_type: type = float) -> Matrix:
    """
    Matrix of the given shape with every element equal to element_type(1).

    Parameters
    ----------
    rows, columns : int
        Non-negative shape.
    element_type : type
        Element type. Default float.
    """
    check_dimension(rows, 'rows')
    check_dimension(columns, 'columns')
    one = one_of(element_type)
    return Matrix._build(rows, columns, (one,) * (rows * columns), element_type)


def identity(n: int, element_type: type = float) -> Matrix:
    """Square n x n matrix with ones on the diagonal and zeros elsewhere."""
    check_dimension(n, 'n')
    zero = zero_of(element_type)
    one = one_of(element_type)
    contents = [one if r == c else zero for r in range(n) for c in range(n)]
    return Matrix._build(n, n, contents, element_type)


def from_elements(
    rows: int,
    columns: int,
    elements: Sequence[Any],
    element_type: type | None = None,
) -> Matrix:
    """
    Matrix from row-major elements, padded with the element default.

    If fewer than rows * columns elements are given, element_type() is
    appended until the matrix is full. The supplied elements keep their
    positions 0..len(elements)-1.

    Parameters
    ----------
    rows, columns : int
        Non-negative shape.
    elements : sequence
        Row-major elements, at most rows * columns of them.
    element_type : type, optional
        Element type. Defaults to the type of the first element, or float
        when elements is empty.

    Raises
    ------
    ShapeOverflowError
        If len(elements) > rows * columns.
    ElementTypeError
        If an element is not an instance of element_type.
    """
    check_dimension(rows, 'rows')
    check_dimension(columns, 'columns')
    elements = list(elements)
    check_capacity(len(elements), rows, columns)

    if element_type is None:
        element_type = type(elements[0]) if elements else float
    elif not isinstance(element_type, type):
        raise ValidationError(f"element_type: expected a type, got {element_type!r}")

    missing = rows * columns - len(elements)
    if missing:
        elements.extend(default_of(element_type) for _ in range(missing))

    return Matrix._build(rows, columns, elements, element_type)


def from_array(array: ArrayLike) -> Matrix:
    """
    Matrix from a 2D numpy array or nested sequence.

    Values are converted to Python scalars with ndarray.tolist(), so a
    float64 array yields a float matrix and an int64 array an int matrix.

    Raises
    ------
    DimensionError
        If the input is not 2D.
    """
    data = np.asarray(array)
    if data.ndim != 2:
        raise DimensionError(
            f"array: expected 2D array, got {data.ndim}D with shape {data.shape}"
        )

    rows, columns = data.shape
    flat = data.reshape(-1).tolist()
    if flat:
        element_type = type(flat[0])
    else:
        element_type = type(np.zeros(1, dtype=data.dtype).tolist()[0])

    return Matrix._build(rows, columns, flat, element_type)
