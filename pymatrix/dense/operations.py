"""
Matrix arithmetic.

Provides add(), multiply() and hadamard(). Each validates shapes and
element types before computing anything and returns a fresh Matrix;
operands are never modified.
"""

from __future__ import annotations

import operator
from typing import Any

from pymatrix.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_MULTIPLY,
    CAPABILITY_HADAMARD,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_element_type,
    check_inner_dimensions,
    check_same_element_type,
    check_same_shape,
)
from pymatrix.dense.matrix import Matrix
from pymatrix.dense._common import combine, zero_of


def _check_operands(a: Any, b: Any, operation: str) -> None:
    for name, value in (('left', a), ('right', b)):
        if not isinstance(value, Matrix):
            raise ValidationError(
                f"{operation}: {name} operand must be a Matrix, got {type(value).__name__}"
            )


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two equally shaped matrices.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    ElementTypeError
        If the element types differ or do not support a closed '+'.
    """
    _check_operands(a, b, CAPABILITY_ADD)
    check_same_shape(a.shape, b.shape, CAPABILITY_ADD)
    check_same_element_type(a.element_type, b.element_type, CAPABILITY_ADD)
    check_element_type(a.element_type, CAPABILITY_ADD)

    t = a.element_type
    contents = [
        combine(operator.add, '+', x, y, t, CAPABILITY_ADD)
        for x, y in zip(a.contents, b.contents)
    ]
    return Matrix._build(a.rows, a.columns, contents, t)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product of an (m, k) and a (k, n) matrix.

    Each result element is accumulated from element_type(0) with k
    ascending: acc = acc + a[r, k] * b[k, c]. An inner dimension of zero
    yields a zero-filled (m, n) result.

    Raises
    ------
    DimensionMismatchError
        If a.columns != b.rows.
    ElementTypeError
        If the element types differ or do not support closed '+' and '*'.
    """
    _check_operands(a, b, CAPABILITY_MULTIPLY)
    check_inner_dimensions(a.shape, b.shape, CAPABILITY_MULTIPLY)
    check_same_element_type(a.element_type, b.element_type, CAPABILITY_MULTIPLY)
    check_element_type(a.element_type, CAPABILITY_MULTIPLY)

    t = a.element_type
    zero = zero_of(t)
    columns_of_b = [
        tuple(b[k, c] for k in range(b.rows)) for c in range(b.columns)
    ]

    contents = []
    for r in range(a.rows):
        left = a.row(r)
        for right in columns_of_b:
            acc = zero
            for x, y in zip(left, right):
                product = combine(operator.mul, '*', x, y, t, CAPABILITY_MULTIPLY)
                acc = combine(operator.add, '+', acc, product, t, CAPABILITY_MULTIPLY)
            contents.append(acc)

    return Matrix._build(a.rows, b.columns, contents, t)


def hadamard(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise (Hadamard) product of two equally shaped matrices.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    ElementTypeError
        If the element types differ or do not support a closed '*'.
    """
    _check_operands(a, b, CAPABILITY_HADAMARD)
    check_same_shape(a.shape, b.shape, CAPABILITY_HADAMARD)
    check_same_element_type(a.element_type, b.element_type, CAPABILITY_HADAMARD)
    check_element_type(a.element_type, CAPABILITY_HADAMARD)

    t = a.element_type
    contents = [
        combine(operator.mul, '*', x, y, t, CAPABILITY_HADAMARD)
        for x, y in zip(a.contents, b.contents)
    ]
    return Matrix._build(a.rows, a.columns, contents, t)
