"""
Matrix: generic dense matrix value type.

Elements are stored as a flat row-major tuple: element (r, c) lives at
flat index r * columns + c. Matrices are immutable; every operation
returns a fresh Matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import ALL_CAPABILITIES
from pymatrix.core.exceptions import ElementTypeError, ValidationError
from pymatrix.core.validation import check_dimension, check_elements, check_element_type

# Element types numpy can hold without falling back to dtype=object
_NATIVE_TYPES = (bool, int, float, complex, np.generic)


@dataclass(frozen=True)
class Matrix:
    """
    Dense matrix over an arbitrary element type.

    Immutable after construction. Build through the constructors in
    pymatrix.dense (zero_filled, one_filled, from_elements, identity,
    from_array) rather than directly.

    Operators:
        A + B   elementwise addition
        A @ B   matrix product
        A * B   Hadamard (elementwise) product
    """
    _rows: int
    _columns: int
    _contents: tuple[Any, ...]
    _element_type: type

    def __post_init__(self) -> None:
        check_dimension(self._rows, 'rows')
        check_dimension(self._columns, 'columns')
        if not isinstance(self._element_type, type):
            raise ValidationError(
                f"element_type: expected a type, got {self._element_type!r}"
            )
        if not isinstance(self._contents, tuple):
            raise ValidationError(
                f"contents: expected a tuple, got {type(self._contents).__name__}"
            )
        if len(self._contents) != self._rows * self._columns:
            raise ValidationError(
                f"contents has {len(self._contents)} elements, expected "
                f"{self._rows} * {self._columns} = {self._rows * self._columns}"
            )
        check_elements(self._contents, self._element_type, 'contents')

    @classmethod
    def _build(
        cls,
        rows: int,
        columns: int,
        contents: tuple[Any, ...] | list[Any],
        element_type: type,
    ) -> Matrix:
        """Internal builder; validation happens in __post_init__."""
        contents = tuple(contents)
        return cls(
            _rows=rows,
            _columns=columns,
            _contents=contents,
            _element_type=element_type,
        )

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Total number of elements, rows * columns."""
        return len(self._contents)

    @property
    def contents(self) -> tuple[Any, ...]:
        """Row-major flat contents."""
        return self._contents

    @property
    def element_type(self) -> type:
        return self._element_type

    def _flat_index(self, row: int, column: int) -> int:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(
                f"index ({row}, {column}) out of range for shape {self.shape}"
            )
        return row * self._columns + column

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, column = key
        return self._contents[self._flat_index(row, column)]

    def row(self, index: int) -> tuple[Any, ...]:
        """Elements of one row, left to right."""
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range for {self._rows} rows")
        start = index * self._columns
        return self._contents[start:start + self._columns]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._contents)

    def supports(self, capability: str) -> bool:
        """
        Check whether the element type supports an operation.

        Args:
            capability: One of the constants in pymatrix.core.capabilities

        Note:
            Unknown capabilities return False, never raise.
        """
        if capability not in ALL_CAPABILITIES:
            return False
        try:
            check_element_type(self._element_type, capability)
        except ElementTypeError:
            return False
        return True

    def to_numpy(self) -> NDArray[Any]:
        """
        Copy into a numpy array of shape (rows, columns).

        Element types numpy has no native dtype for (Fraction, Decimal,
        user-defined types) produce a dtype=object array with a warning, as
        do int values outside the range of every numpy integer dtype.
        """
        name = self._element_type.__name__
        native = issubclass(self._element_type, _NATIVE_TYPES)
        if native and not self._contents:
            return np.empty(self.shape, dtype=self._element_type)

        array = np.array(self._contents, dtype=None if native else object)
        if array.dtype == object:
            if native:
                reason = f"{name} values exceed the range of every native numpy dtype"
            else:
                reason = f"element type {name} has no native numpy dtype"
            warnings.warn(
                f"{reason}; array uses dtype=object",
                UserWarning,
                stacklevel=2,
            )
        return array.reshape(self.shape)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.dense.operations import add
        return add(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.dense.operations import multiply
        return multiply(self, other)

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.dense.operations import hadamard
        return hadamard(self, other)

    def __str__(self) -> str:
        from pymatrix.dense._format import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"element_type={self._element_type.__name__})"
        )
