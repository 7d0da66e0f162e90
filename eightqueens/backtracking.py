"""Exhaustive backtracking enumeration of the eight queens puzzle.

This module implements an iterative (non-recursive) depth-first search that
lists every placement of ``BOARD_SIZE`` non-attacking queens and provides
three entry points:

- find_all_queen_placements(): every solution as a board (grid of markers).
- find_all_placements(): every solution in compact form, ``placement[row] = col``.
- find_all_placements_with_stats(): the compact solutions together with the
    search effort, as a ``SearchStats`` record.

Implementation overview
-----------------------
- State representation: ``positions[r] = c`` means a queen on row r, column c;
    ``-1`` means the row is still unassigned. Together with the current row
    pointer this array is the explicit decision stack of the search.
- Constraint tracking: three boolean arrays give O(1) checks for column and
    diagonal availability: ``col_used[c]``, ``diag1_used[r-c+offset]``,
    ``diag2_used[r+c]``, where ``offset = size - 1`` maps negative indices to
    [0..].
- Search order: rows are filled top to bottom, columns tried left to right.
    On a full placement the solution is recorded and the last queen is lifted
    so the search continues; exhausted rows release the queen of the previous
    row and resume from its next column.

Determinism
-----------
The output order is the DFS discovery order and is identical across runs:
solutions come out in lexicographic order of their placements, starting with
``(0, 4, 7, 5, 2, 6, 1, 3)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import List, Tuple

from .utils import Board, Placement, placement_to_board

BOARD_SIZE = 8


@dataclass(frozen=True)
class SearchStats:
    """Outcome of one exhaustive search."""

    solutions: List[Placement]
    nodes_explored: int
    elapsed_seconds: float


def _enumerate(size: int) -> Tuple[List[Placement], int]:
    """Run the full search and return ``(solutions, nodes_explored)``.

    Nodes explored counts every candidate cell examined, including cells
    rejected by the column/diagonal checks.
    """
    offset = size - 1
    positions = [-1] * size
    col_used = [False] * size
    diag1_used = [False] * (2 * size - 1)
    diag2_used = [False] * (2 * size - 1)

    solutions: List[Placement] = []
    explored = 0
    row = 0
    col = 0

    def release(r: int) -> int:
        c = positions[r]
        positions[r] = -1
        col_used[c] = False
        diag1_used[r - c + offset] = False
        diag2_used[r + c] = False
        return c

    while row >= 0:
        placed = False
        while col < size:
            explored += 1
            diag1_index = row - col + offset
            diag2_index = row + col
            if not col_used[col] and not diag1_used[diag1_index] and not diag2_used[diag2_index]:
                # Occupy the column and both diagonals.
                positions[row] = col
                col_used[col] = True
                diag1_used[diag1_index] = True
                diag2_used[diag2_index] = True
                placed = True
                break
            col += 1

        if placed:
            if row == size - 1:
                solutions.append(tuple(positions))
                # Lift the last queen and keep scanning the same row.
                col = release(row) + 1
                continue
            row += 1
            col = 0
            continue

        # Row exhausted; undo the previous decision.
        row -= 1
        if row >= 0:
            col = release(row) + 1

    return solutions, explored


def find_all_placements_with_stats() -> SearchStats:
    """Enumerate every solution and report the search effort.

    Returns
    -------
    SearchStats
        ``solutions`` in DFS order, ``nodes_explored`` (candidate cells
        examined) and ``elapsed_seconds`` (wall clock via ``perf_counter``).
    """
    start = perf_counter()
    solutions, explored = _enumerate(BOARD_SIZE)
    return SearchStats(solutions, explored, perf_counter() - start)


def find_all_placements() -> List[Placement]:
    """Enumerate every solution as a tuple of column indices, one per row."""
    solutions, _ = _enumerate(BOARD_SIZE)
    return solutions


def find_all_queen_placements() -> List[Board]:
    """Enumerate every eight queens solution as a board.

    Each board is a tuple of 8 row tuples holding ``"Q"`` where a queen sits
    and ``"."`` elsewhere. The list has exactly 92 entries, in DFS order.
    """
    return [placement_to_board(placement) for placement in find_all_placements()]
