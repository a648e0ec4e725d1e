"""
Capability string constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pymatrix.core.capabilities import CAPABILITY_MULTIPLY

    if A.supports(CAPABILITY_MULTIPLY):
        C = A @ B
"""

# Element type defines closed addition
CAPABILITY_ADD = 'add'

# Element type defines closed addition and multiplication (dot products)
CAPABILITY_MULTIPLY = 'multiply'

# Element type defines closed multiplication
CAPABILITY_HADAMARD = 'hadamard'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ADD,
    CAPABILITY_MULTIPLY,
    CAPABILITY_HADAMARD,
})

__all__ = [
    'CAPABILITY_ADD',
    'CAPABILITY_MULTIPLY',
    'CAPABILITY_HADAMARD',
    'ALL_CAPABILITIES',
]
