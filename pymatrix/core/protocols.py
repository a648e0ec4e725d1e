"""
Element protocols for PyMatrix.

A matrix is generic over its element type. Instead of a fixed numeric
tower, each operation requires the element type to provide a minimal
capability set, expressed as structural protocols:

    - default value: ``T()`` (padding), ``T(0)`` and ``T(1)`` (identities)
    - closed addition: ``T + T -> T`` (add, multiply accumulation)
    - closed multiplication: ``T * T -> T`` (multiply, hadamard)

We use Protocol (structural typing) rather than ABC (nominal typing) so
int, float, Fraction, Decimal, numpy scalars and user-defined types all
qualify without registration.
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class SupportsAdd(Protocol):
    """Element type with a binary ``+``."""

    def __add__(self, other): ...


@runtime_checkable
class SupportsMul(Protocol):
    """Element type with a binary ``*``."""

    def __mul__(self, other): ...


def supports_add(element_type: type) -> bool:
    """True if instances of element_type define ``__add__``."""
    return isinstance(element_type, type) and issubclass(element_type, SupportsAdd)


def supports_mul(element_type: type) -> bool:
    """True if instances of element_type define ``__mul__``."""
    return isinstance(element_type, type) and issubclass(element_type, SupportsMul)
