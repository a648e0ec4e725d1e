"""
Core infrastructure for PyMatrix.

This module provides the shared abstractions used by the dense matrix
implementation.

Key components:
    exceptions: Exception hierarchy
    protocols: Structural element-type protocols (SupportsAdd, SupportsMul)
    capabilities: Capability string constants
    validation: Input validators
"""

from pymatrix.core.protocols import SupportsAdd, SupportsMul
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeOverflowError,
    DimensionMismatchError,
    ElementTypeError,
)

__all__ = [
    # Protocols
    "SupportsAdd",
    "SupportsMul",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeOverflowError",
    "DimensionMismatchError",
    "ElementTypeError",
]
