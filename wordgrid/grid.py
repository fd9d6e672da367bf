from __future__ import annotations

from typing import Sequence

Position = tuple[int, int]

# Row-major order: up-left, up, up-right, left, right, down-left, down, down-right
DIRECTIONS: tuple[Position, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class InvalidGrid(ValueError):
    """The grid is empty, ragged, or holds something other than single letters."""


def validate_grid(grid: Sequence[Sequence[str]]) -> bool:
    """Check that `grid` is a non-empty rectangle of single alphabetic characters.

    Rows may be lists of one-letter strings or plain strings. Raises
    InvalidGrid describing the first problem found; returns True otherwise.
    """
    if not grid:
        raise InvalidGrid("grid is empty")

    cols = None
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple, str)):
            raise InvalidGrid(f"row {r} is not a sequence of letters")
        if cols is None:
            cols = len(row)
            if cols == 0:
                raise InvalidGrid("grid has no columns")
        elif len(row) != cols:
            raise InvalidGrid(f"row {r} has {len(row)} cells, expected {cols}")
        for c, cell in enumerate(row):
            if not isinstance(cell, str) or len(cell) != 1 or not cell.isalpha():
                raise InvalidGrid(f"cell ({r}, {c}) must be a single letter, got {cell!r}")

    return True


def grid_shape(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def neighbors(pos: Position, rows: int, cols: int) -> list[Position]:
    r, c = pos
    adj = []
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            adj.append((nr, nc))
    return adj


def is_adjacent(a: Position, b: Position) -> bool:
    return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1
