"""
PyMatrix: generic dense matrices for Python.

A small immutable matrix value type over any element type (int, float,
Fraction, Decimal, numpy scalars, user-defined numbers) with boxed text
rendering, elementwise addition, matrix multiplication and the Hadamard
product.

Submodules:
    core: Exceptions, element protocols, capabilities, validation
    dense: The Matrix type, constructors, arithmetic and formatting
"""

__version__ = "0.1.0"

from pymatrix import core
from pymatrix import dense
from pymatrix.dense import (
    Matrix,
    zero_filled,
    one_filled,
    identity,
    from_elements,
    from_array,
    add,
    multiply,
    hadamard,
    format_matrix,
)

__all__ = [
    "__version__",
    "core",
    "dense",
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
