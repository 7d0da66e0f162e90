"""CSV export utilities for solutions and symmetry classes.

These helpers materialize the full solution list and the per-board class
membership for spreadsheet inspection. Filenames carry the optional suffix
configured in ``settings`` (run tag and/or datestamp).
"""
from __future__ import annotations

import csv
import os
from typing import Sequence

from . import settings
from .stats import classes_to_frame, summarize_classes
from eightqueens.utils import Board, board_to_placement


def save_solutions_to_csv(solutions: Sequence[Board], out_dir: str) -> str:
    """Write one row per solution in discovery order.

    Columns: ``solution_index``, ``placement`` (digits) and ``row_0`` ..
    ``row_7`` holding each row's queen column. Returns the written path.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"solutions{settings.filename_suffix()}.csv")
    size = len(solutions[0]) if solutions else 0

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["solution_index", "placement"] + [f"row_{r}" for r in range(size)])
        for index, board in enumerate(solutions):
            placement = board_to_placement(board)
            writer.writerow([index, "".join(str(c) for c in placement)] + list(placement))

    print(f"Solutions saved to {filename}")
    return filename


def save_classes_to_csv(classes: Sequence[Sequence[Board]], out_dir: str) -> str:
    """Write the class membership of every board (one row per board)."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"classes{settings.filename_suffix()}.csv")
    classes_to_frame(classes).to_csv(filename, index=False)
    print(f"Class membership saved to {filename}")
    return filename


def save_class_summary_to_csv(classes: Sequence[Sequence[Board]], out_dir: str) -> str:
    """Write one row per class: size, representative, canonical form, symmetries."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"class_summary{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["class_index", "class_size", "representative", "canonical", "stabilizer"])
        for entry in summarize_classes(classes):
            writer.writerow([
                entry["index"],
                entry["size"],
                "".join(str(c) for c in entry["representative"]),
                "".join(str(c) for c in entry["canonical"]),
                "+".join(entry["stabilizer"]),
            ])

    print(f"Class summary saved to {filename}")
    return filename
