"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Failures are always raised before a result
matrix is built, so no partially computed value ever reaches the caller.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a shape argument is invalid or when input data does not
    have the expected number of dimensions.
    """
    pass


class ShapeOverflowError(ValidationError):
    """
    More elements were supplied than the declared shape can hold.

    Attributes:
        n_elements: Number of elements supplied
        rows: Declared number of rows
        columns: Declared number of columns
        capacity: rows * columns
    """

    def __init__(
        self,
        message: str,
        n_elements: int | None = None,
        rows: int | None = None,
        columns: int | None = None,
    ):
        super().__init__(message)
        self.n_elements = n_elements
        self.rows = rows
        self.columns = columns
        self.capacity = rows * columns if rows is not None and columns is not None else None


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation ('add', 'multiply', 'hadamard')
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class ElementTypeError(ValidationError):
    """
    Element type cannot take part in the requested operation.

    Raised when an element type lacks a required capability (addition,
    multiplication), when operands hold different element types, when an
    element is not an instance of the matrix element type, or when an
    operation is not closed over the element type.

    Attributes:
        element_type: The offending element type, if known
        operation: Name of the operation, if any
    """

    def __init__(
        self,
        message: str,
        element_type: type | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.element_type = element_type
        self.operation = operation
