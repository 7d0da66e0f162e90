"""Visualization utilities for the symmetry classes.

Outputs
-------
- class_sizes.png: bar chart of the number of boards per class, one bar per
    class in order of first appearance.
- class_representatives.png: grid of small boards, the first member of each
    class, annotated with class index and size.

Charts are written as PNG files into ``out_dir`` with the filename suffix
configured in ``eightqueens.analysis.settings``. Functions return the path of
the file written.
"""
from __future__ import annotations

import math
import os
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402

from . import settings  # noqa: E402
from eightqueens.utils import QUEEN, Board  # noqa: E402


def plot_class_sizes(classes: Sequence[Sequence[Board]], out_dir: str) -> str:
    """Bar chart of class sizes.

    Parameters
    ----------
    classes : sequence of classes
        Output of ``group_similar_boards``.
    out_dir : str
        Destination directory; created if missing.

    Returns
    -------
    str
        Path of the PNG written.
    """
    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")

    labels = [str(i) for i in range(len(classes))]
    sizes = [len(members) for members in classes]

    plt.figure(figsize=(10, 5))
    ax = sns.barplot(x=labels, y=sizes, color="steelblue")
    ax.set_xlabel("Class index")
    ax.set_ylabel("Boards in class")
    ax.set_title(f"Eight queens: {sum(sizes)} solutions in {len(classes)} symmetry classes")
    for position, size in enumerate(sizes):
        ax.text(position, size + 0.1, str(size), ha="center", va="bottom")

    fname = os.path.join(out_dir, f"class_sizes{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Chart saved to {fname}")
    return fname


def _board_pattern(n: int) -> np.ndarray:
    """Checkerboard of 0/1 values, light square in the top-left corner."""
    return np.indices((n, n)).sum(axis=0) % 2


def plot_class_representatives(classes: Sequence[Sequence[Board]], out_dir: str, columns: int = 4) -> str:
    """Draw the first board of each class on a grid of subplots."""
    os.makedirs(out_dir, exist_ok=True)
    count = max(1, len(classes))
    cols = max(1, min(columns, count))
    rows = math.ceil(count / cols)

    fig, axes = plt.subplots(rows, cols, figsize=(2.6 * cols, 2.8 * rows), squeeze=False)
    for index, ax in enumerate(axes.flat):
        ax.set_xticks([])
        ax.set_yticks([])
        if index >= len(classes):
            ax.axis("off")
            continue
        board = classes[index][0]
        n = len(board)
        ax.imshow(_board_pattern(n), cmap="Greys", vmin=0, vmax=3)
        for r, row in enumerate(board):
            for c, cell in enumerate(row):
                if cell == QUEEN:
                    ax.text(c, r, settings.QUEEN, ha="center", va="center", fontsize=12, color="darkred")
        ax.set_title(f"#{index} (size {len(classes[index])})", fontsize=9)

    fig.tight_layout()
    fname = os.path.join(out_dir, f"class_representatives{settings.filename_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Chart saved to {fname}")
    return fname
