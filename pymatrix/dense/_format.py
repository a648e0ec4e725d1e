"""
Boxed text rendering for matrices.

    ┌     ┐
    │ 1 2 │
    │ 3 4 │
    └     ┘

Every cell is right-justified to the width of the longest element and
followed by one space. Borders are as wide as the cell area.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix

TOP_LEFT = '┌ '
TOP_RIGHT = '┐'
BOTTOM_LEFT = '└ '
BOTTOM_RIGHT = '┘'
LEFT_EDGE = '│ '
RIGHT_EDGE = '│'


def format_matrix(
    matrix: 'Matrix',
    formatter: Callable[[Any], str] = str,
) -> str:
    """
    Render a matrix as an aligned, box-drawn block of text.

    Parameters
    ----------
    matrix : Matrix
    formatter : callable
        Element to text. Default str.

    Returns
    -------
    str
        rows + 2 lines joined by newlines, no trailing newline. A matrix
        with no rows renders as its two border lines.
    """
    texts = [[formatter(value) for value in matrix.row(r)] for r in range(matrix.rows)]
    width = max((len(text) for row in texts for text in row), default=0)

    padding = ' ' * ((width + 1) * matrix.columns)
    lines = [TOP_LEFT + padding + TOP_RIGHT]
    for row in texts:
        cells = ''.join(text.rjust(width) + ' ' for text in row)
        lines.append(LEFT_EDGE + cells + RIGHT_EDGE)
    lines.append(BOTTOM_LEFT + padding + BOTTOM_RIGHT)

    return '\n'.join(lines)
