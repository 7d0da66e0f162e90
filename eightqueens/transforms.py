"""Square-matrix transforms and the symmetry group of the square.

Every function accepts an N×N grid given as a sequence of sequences (lists,
tuples, strings) and returns a brand-new ``list`` of ``list`` without touching
its input. Element types are arbitrary: the same helpers rotate chess boards
made of ``"Q"``/``"."`` markers and plain integer matrices.

Conventions
-----------
- ``grid[i][j]`` is row ``i``, column ``j``; row 0 is the top of the board.
- ``rotate`` turns the grid 90° clockwise.
- ``flip_vertical`` mirrors across the vertical axis (each row reversed).
- ``flip_horizontal`` mirrors across the horizontal axis (row order reversed).
- ``flip_main_diagonal`` is the transpose; ``flip_anti_diagonal`` mirrors
    across the top-right/bottom-left diagonal.

Together with the identity and the two other rotations these form the
8-element dihedral group D4, exposed as ``SYMMETRIES`` in a fixed order.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

Grid = List[List[T]]
Transform = Callable[[Sequence[Sequence[T]]], List[List[T]]]


def _require_square(grid: Sequence[Sequence[T]]) -> int:
    """Return N for an N×N grid, raising ``ValueError`` otherwise."""
    n = len(grid)
    for index, row in enumerate(grid):
        try:
            width = len(row)
        except TypeError:
            raise ValueError(
                f"Grid must be square: row {index} is {type(row).__name__!r}, not a sequence"
            ) from None
        if width != n:
            raise ValueError(
                f"Grid must be square: row {index} has {width} elements, expected {n}"
            )
    return n


def identity(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Return an element-wise copy of ``grid``."""
    _require_square(grid)
    return [list(row) for row in grid]


def rotate(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Rotate a square grid 90° clockwise.

    ``out[i][j] = grid[N-1-j][i]``. Four successive rotations give back a grid
    equal to the input.

    Raises
    ------
    ValueError
        If ``grid`` is not square.
    """
    n = _require_square(grid)
    return [[grid[n - 1 - j][i] for j in range(n)] for i in range(n)]


def flip_vertical(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Mirror across the vertical axis: ``out[i][j] = grid[i][N-1-j]``."""
    _require_square(grid)
    return [list(row)[::-1] for row in grid]


def flip_horizontal(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Mirror across the horizontal axis: ``out[i][j] = grid[N-1-i][j]``."""
    _require_square(grid)
    return [list(row) for row in reversed(grid)]


def flip_main_diagonal(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Transpose along the top-left/bottom-right diagonal."""
    n = _require_square(grid)
    return [[grid[j][i] for j in range(n)] for i in range(n)]


def flip_anti_diagonal(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Transpose along the top-right/bottom-left diagonal."""
    n = _require_square(grid)
    return [[grid[n - 1 - j][n - 1 - i] for j in range(n)] for i in range(n)]


def _rotate180(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    return rotate(rotate(grid))


def _rotate270(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    return rotate(rotate(rotate(grid)))


# Fixed enumeration of the dihedral group of the square. Order matters only
# for reporting (stabilizer names, orbit listing).
SYMMETRIES: Tuple[Tuple[str, Transform], ...] = (
    ("identity", identity),
    ("rotate90", rotate),
    ("rotate180", _rotate180),
    ("rotate270", _rotate270),
    ("flip_vertical", flip_vertical),
    ("flip_horizontal", flip_horizontal),
    ("flip_main_diagonal", flip_main_diagonal),
    ("flip_anti_diagonal", flip_anti_diagonal),
)


def orbit(grid: Sequence[Sequence[T]]) -> List[List[List[T]]]:
    """Return the 8 images of ``grid`` under ``SYMMETRIES``, in table order.

    Images are not deduplicated: a board with a self-symmetry shows up more
    than once.
    """
    return [transform(grid) for _, transform in SYMMETRIES]
