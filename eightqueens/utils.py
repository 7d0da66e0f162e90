"""Utility helpers for the eight queens project.

This module provides the low-level primitives shared by the solver, the
symmetry engine and the reporting layer: conversion between the two board
encodings, conflict counting and validity checks.

Representation
--------------
- Placement: a 1D sequence where ``placement[row] = col``.
- Board: a square grid of markers, ``QUEEN`` on occupied cells and ``EMPTY``
    elsewhere, stored as a tuple of row tuples once emitted by the solver.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple

QUEEN = "Q"
EMPTY = "."

Board = Tuple[Tuple[str, ...], ...]
Placement = Tuple[int, ...]


def placement_to_board(placement: Sequence[int]) -> Board:
    """Materialize a column assignment into an immutable grid of markers."""
    n = len(placement)
    return tuple(
        tuple(QUEEN if column == col else EMPTY for column in range(n))
        for col in placement
    )


def board_to_placement(board: Sequence[Sequence[str]]) -> Placement:
    """Return ``placement[row] = col`` for a grid holding one queen per row.

    Raises
    ------
    ValueError
        If some row does not contain exactly one queen.
    """
    placement = []
    for row_index, row in enumerate(board):
        columns = [col for col, cell in enumerate(row) if cell == QUEEN]
        if len(columns) != 1:
            raise ValueError(f"Row {row_index} holds {len(columns)} queens, expected exactly 1")
        placement.append(columns[0])
    return tuple(placement)


def normalize(grid: Sequence[Sequence[object]]) -> Tuple[Tuple[object, ...], ...]:
    """Convert any grid of markers to a hashable tuple of tuples.

    Boards coming out of the solver are tuples, transforms return lists; both
    compare equal once normalized.
    """
    return tuple(tuple(row) for row in grid)


def _line_occupancy(placement: Sequence[int]) -> Counter[Tuple[str, int]]:
    """Count queens per attack line.

    Keys are ``("col", c)``, ``("diag", row - col)`` and ``("anti", row + col)``;
    rows need no entry since the encoding holds one queen per row.
    """
    occupancy: Counter[Tuple[str, int]] = Counter()
    for row, col in enumerate(placement):
        occupancy["col", col] += 1
        occupancy["diag", row - col] += 1
        occupancy["anti", row + col] += 1
    return occupancy


def conflicts(placement: Sequence[int]) -> int:
    """Number of attacking queen pairs, in O(N).

    A line holding k queens contributes k*(k-1)/2 pairs.
    """
    return sum(k * (k - 1) // 2 for k in _line_occupancy(placement).values())


def is_valid_solution(placement: Sequence[int]) -> bool:
    """Return True if the placement is a valid N-Queens solution.

    Contract
    - Input: sequence of length N where placement[row] = col (0-based)
    - Valid if: every col is an int in [0, N) and no line holds two queens
    """
    n = len(placement)
    if n == 0:
        return False
    if not all(isinstance(col, int) and 0 <= col < n for col in placement):
        return False
    return max(_line_occupancy(placement).values()) == 1

def is_valid_board(board: Sequence[Sequence[str]]) -> bool:
    """Return True if ``board`` is a square grid holding a valid solution."""
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        return False
    if any(cell not in (QUEEN, EMPTY) for row in board for cell in row):
        return False
    try:
        placement = board_to_placement(board)
    except ValueError:
        return False
    return is_valid_solution(placement)


def render_board(board: Sequence[Sequence[str]], queen: str = QUEEN, empty: str = EMPTY) -> str:
    """Render a board as space-separated rows, one line per row."""
    return "\n".join(
        " ".join(queen if cell == QUEEN else empty for cell in row) for row in board
    )
