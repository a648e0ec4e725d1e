"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages

Validators take shapes and element types rather than matrices, so they
can run before any result is built.
"""

from typing import Any, Iterable

from pymatrix.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_MULTIPLY,
    CAPABILITY_HADAMARD,
)
from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    ShapeOverflowError,
    DimensionMismatchError,
    ElementTypeError,
)
from pymatrix.core.protocols import supports_add, supports_mul

Shape = tuple[int, int]


def check_dimension(value: Any, name: str) -> None:
    """
    Verify a shape argument is a non-negative integer.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an int (bool is rejected)
        DimensionError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name}: expected a non-negative int, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise DimensionError(f"{name}: must be non-negative, got {value}")


def check_capacity(n_elements: int, rows: int, columns: int) -> None:
    """
    Verify a declared shape can hold the supplied number of elements.

    Args:
        n_elements: Number of elements supplied
        rows: Declared rows
        columns: Declared columns

    Raises:
        ShapeOverflowError: If n_elements > rows * columns
    """
    capacity = rows * columns
    if n_elements > capacity:
        raise ShapeOverflowError(
            f"{n_elements} elements were given, but a {rows} by {columns} "
            f"matrix can only hold {capacity}",
            n_elements=n_elements,
            rows=rows,
            columns=columns,
        )


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operand shapes must match, got {left} and {right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify left columns equal right rows (matrix product).

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions must agree, got {left} and {right} "
            f"({left[1]} columns vs {right[0]} rows)",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_element_type(element_type: type, capability: str) -> None:
    """
    Verify an element type provides what a capability requires.

    Args:
        element_type: Matrix element type
        capability: One of the constants in pymatrix.core.capabilities

    Raises:
        ValueError: If capability is unknown
        ElementTypeError: If element_type lacks a required operator
    """
    if capability == CAPABILITY_ADD:
        required = [('+', supports_add)]
    elif capability == CAPABILITY_HADAMARD:
        required = [('*', supports_mul)]
    elif capability == CAPABILITY_MULTIPLY:
        required = [('+', supports_add), ('*', supports_mul)]
    else:
        raise ValueError(f"Unknown capability: {capability!r}")

    for symbol, predicate in required:
        if not predicate(element_type):
            raise ElementTypeError(
                f"{capability}: element type {_type_name(element_type)} "
                f"does not support '{symbol}'",
                element_type=element_type,
                operation=capability,
            )


def check_same_element_type(left: type, right: type, operation: str) -> None:
    """
    Verify both operands hold the same element type.

    Raises:
        ElementTypeError: If the element types differ
    """
    if left is not right:
        raise ElementTypeError(
            f"{operation}: operands must share an element type, got "
            f"{_type_name(left)} and {_type_name(right)}",
            element_type=right,
            operation=operation,
        )


def check_elements(elements: Iterable[Any], element_type: type, name: str) -> None:
    """
    Verify every element is an instance of element_type.

    Raises:
        ElementTypeError: On the first element of another type
    """
    for index, value in enumerate(elements):
        if not isinstance(value, element_type):
            raise ElementTypeError(
                f"{name}: element {index} is {type(value).__name__} {value!r}, "
                f"expected {_type_name(element_type)}",
                element_type=element_type,
            )


def _type_name(element_type: Any) -> str:
    return getattr(element_type, '__name__', repr(element_type))
