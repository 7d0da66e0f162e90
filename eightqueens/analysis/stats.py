"""Typed result shapes and summary helpers for the symmetry classes.

Defines ``TypedDict`` structures describing each equivalence class and
provides helpers to aggregate them, either as plain dictionaries or as a
pandas ``DataFrame`` with one row per board.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, TypedDict

import pandas as pd

from eightqueens.symmetry import canonical_form, stabilizer
from eightqueens.utils import Board, Placement, board_to_placement


class ClassSummary(TypedDict):
    index: int
    size: int
    representative: Placement
    canonical: Placement
    stabilizer: List[str]


class SolutionSummary(TypedDict):
    total_solutions: int
    distinct_classes: int
    class_sizes: List[int]
    size_distribution: Dict[int, int]


def summarize_classes(classes: Sequence[Sequence[Board]]) -> List[ClassSummary]:
    """Describe every class by its first member, canonical form and symmetries.

    The representative is the first member in solver order; the canonical
    placement is the lexicographically smallest image under the group.
    """
    summaries: List[ClassSummary] = []
    for index, members in enumerate(classes):
        first = members[0]
        summaries.append(
            {
                "index": index,
                "size": len(members),
                "representative": board_to_placement(first),
                "canonical": board_to_placement(canonical_form(first)),
                "stabilizer": stabilizer(first),
            }
        )
    return summaries


def class_size_distribution(classes: Sequence[Sequence[Board]]) -> Dict[int, int]:
    """Map class size -> number of classes of that size (ascending sizes)."""
    counts = Counter(len(members) for members in classes)
    return dict(sorted(counts.items()))


def summarize_solutions(solutions: Sequence[Board], classes: Sequence[Sequence[Board]]) -> SolutionSummary:
    """Headline numbers printed by the CLI."""
    return {
        "total_solutions": len(solutions),
        "distinct_classes": len(classes),
        "class_sizes": [len(members) for members in classes],
        "size_distribution": class_size_distribution(classes),
    }


def classes_to_frame(classes: Sequence[Sequence[Board]]) -> pd.DataFrame:
    """Build a DataFrame with one row per board.

    Columns: ``class_index``, ``class_size``, ``member_index`` (position within
    its class), ``placement`` (digits, one column index per row) and
    ``is_representative``.
    """
    rows = []
    for class_index, members in enumerate(classes):
        for member_index, board in enumerate(members):
            rows.append(
                {
                    "class_index": class_index,
                    "class_size": len(members),
                    "member_index": member_index,
                    "placement": "".join(str(col) for col in board_to_placement(board)),
                    "is_representative": member_index == 0,
                }
            )
    return pd.DataFrame(
        rows,
        columns=["class_index", "class_size", "member_index", "placement", "is_representative"],
    )
