"""
Shared element-type helpers for the dense matrix code.

The element type T is the matrix's only source of numbers: T() is the
default value used for padding, T(1) is the multiplicative identity and
the additive identity is T(0), or T() for types such as str where T(0)
is not one. Every arithmetic step goes through combine(),
which enforces closure (T op T -> T).
"""

from __future__ import annotations

from typing import Any, Callable

from pymatrix.core.exceptions import ElementTypeError
from pymatrix.core.protocols import supports_add


def default_of(element_type: type) -> Any:
    """T(), the padding value."""
    return _construct(element_type, (), 'default value')


def zero_of(element_type: type) -> Any:
    """
    The additive identity: T(0), or T() when T(0) is not one.

    A candidate z is accepted when z + z == z. Types without '+' get T(0)
    unchecked. For str, T(0) is '0' and the zero is T() == ''.

    Raises:
        ElementTypeError: If T(0) cannot be built, or neither T(0) nor T()
            is an additive identity
    """
    zero = _construct(element_type, (0,), 'zero')
    if not supports_add(element_type) or _is_additive_identity(zero):
        return zero

    try:
        default = _construct(element_type, (), 'default value')
    except ElementTypeError:
        default = None
    if default is not None and _is_additive_identity(default):
        return default

    raise ElementTypeError(
        f"element type {element_type.__name__} has no zero: neither "
        f"{element_type.__name__}(0) nor {element_type.__name__}() satisfies z + z == z",
        element_type=element_type,
    )


def one_of(element_type: type) -> Any:
    """T(1), the multiplicative identity."""
    return _construct(element_type, (1,), 'one')


def combine(
    op: Callable[[Any, Any], Any],
    symbol: str,
    left: Any,
    right: Any,
    element_type: type,
    operation: str,
) -> Any:
    """
    Apply a binary operator and check the result is still an element_type.

    Raises:
        ElementTypeError: If the operator fails with TypeError or leaves
            the element type (e.g. bool + bool -> int)
    """
    try:
        value = op(left, right)
    except TypeError as e:
        raise ElementTypeError(
            f"{operation}: {element_type.__name__} {symbol} "
            f"{element_type.__name__} failed: {e}",
            element_type=element_type,
            operation=operation,
        ) from e
    if not isinstance(value, element_type):
        raise ElementTypeError(
            f"{operation}: {element_type.__name__} {symbol} {element_type.__name__} "
            f"produced {type(value).__name__}, operation is not closed",
            element_type=element_type,
            operation=operation,
        )
    return value


def _is_additive_identity(value: Any) -> bool:
    try:
        return bool(value + value == value)
    except TypeError:
        return False


def _construct(element_type: type, args: tuple, what: str) -> Any:
    try:
        value = element_type(*args)
    except (TypeError, ValueError) as e:
        raise ElementTypeError(
            f"element type {element_type.__name__} has no {what}: {e}",
            element_type=element_type,
        ) from e
    if not isinstance(value, element_type):
        raise ElementTypeError(
            f"element type {element_type.__name__}: {what} is "
            f"{type(value).__name__}, not {element_type.__name__}",
            element_type=element_type,
        )
    return value
