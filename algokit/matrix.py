"""Matrix construction and in-place matrix transforms."""

from __future__ import annotations


def pascals_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(num_rows):
        if i == 0:
            rows.append([1])
            continue
        above = rows[-1]
        rows.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return rows


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    for i in range(size):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = set()
    zero_cols = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)

    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0