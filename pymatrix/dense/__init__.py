"""
Dense matrix module.

Generic row-major dense matrices over any element type that provides a
default value and, per operation, a closed '+' and/or '*'.

Public API:
    zero_filled(rows, columns)     - All elements element_type(0)
    one_filled(rows, columns)      - All elements element_type(1)
    identity(n)                    - n x n identity
    from_elements(rows, columns, e) - Row-major elements, default-padded
    from_array(array)              - From a 2D numpy array
    add(a, b)                      - Elementwise sum (a + b)
    multiply(a, b)                 - Matrix product (a @ b)
    hadamard(a, b)                 - Elementwise product (a * b)
    format_matrix(m)               - Boxed text rendering (str(m))
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.construction import (
    zero_filled,
    one_filled,
    identity,
    from_elements,
    from_array,
)
from pymatrix.dense.operations import add, multiply, hadamard
from pymatrix.dense._format import format_matrix

__all__ = [
    "Matrix",
    "zero_filled",
    "one_filled",
    "identity",
    "from_elements",
    "from_array",
    "add",
    "multiply",
    "hadamard",
    "format_matrix",
]
