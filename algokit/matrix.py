"""Element-wise addition and multiplication of list-of-lists matrices."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def matrix_sum(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape to be added")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the product ``a x b``; columns of ``a`` must equal rows of ``b``."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if a and cols_a != rows_b:
        raise ValueError(
            "the number of columns in the first matrix must equal "
            "the number of rows in the second"
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns] for row in a
    ]