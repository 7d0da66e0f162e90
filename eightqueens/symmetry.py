"""Partition of solutions into classes under the symmetries of the square.

Two boards are equivalent when one is obtained from the other by one of the
8 transforms in ``eightqueens.transforms.SYMMETRIES``. Because that table is
closed under composition, comparing a board's full orbit against the members
of existing classes is enough to yield a proper partition.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .transforms import SYMMETRIES, orbit
from .utils import Board, normalize


def group_similar_boards(solutions: Sequence[Board]) -> List[List[Board]]:
    """Group boards into equivalence classes under rotations and reflections.

    Parameters
    ----------
    solutions : sequence of Board
        Boards to partition, typically the output of
        ``find_all_queen_placements()``.

    Returns
    -------
    list[list[Board]]
        Classes in order of first appearance. Each class holds the original
        board objects (no copies) in input order. Every input board appears in
        exactly one class.
    """
    classes: List[List[Board]] = []
    # Normalized member -> index of the class holding it.
    owner: Dict[Tuple[Tuple[object, ...], ...], int] = {}

    for board in solutions:
        target = None
        for image in orbit(board):
            index = owner.get(normalize(image))
            if index is not None:
                target = index
                break

        if target is None:
            target = len(classes)
            classes.append([])
        classes[target].append(board)
        owner.setdefault(normalize(board), target)

    return classes


def canonical_form(board: Sequence[Sequence[str]]) -> Tuple[Tuple[str, ...], ...]:
    """Return the lexicographically smallest normalized member of the orbit."""
    return min(normalize(image) for image in orbit(board))


def stabilizer(board: Sequence[Sequence[str]]) -> List[str]:
    """Names of the symmetries that map ``board`` onto itself.

    Always contains ``"identity"``. The class of a board has
    ``8 // len(stabilizer(board))`` members.
    """
    reference = normalize(board)
    return [name for name, transform in SYMMETRIES if normalize(transform(board)) == reference]


def class_sizes(classes: Sequence[Sequence[Board]]) -> List[int]:
    """Return the number of members of each class, in class order."""
    return [len(members) for members in classes]
