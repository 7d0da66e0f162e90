"""Command-line interface for the eight queens enumeration.

This module wires together configuration loading, the solver, the symmetry
grouping and the optional CSV/chart outputs. It intentionally isolates I/O,
argument parsing, and console rendering from the core algorithmic modules so
that the rest of the codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import json
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from . import settings
from .reporting import save_class_summary_to_csv, save_classes_to_csv, save_solutions_to_csv
from .stats import summarize_solutions
from config_manager import ConfigManager
from eightqueens.backtracking import find_all_placements_with_stats, find_all_queen_placements
from eightqueens.symmetry import group_similar_boards
from eightqueens.transforms import flip_horizontal, flip_vertical, rotate
from eightqueens.utils import is_valid_board, render_board

DEMO_MATRIX: List[List[int]] = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


# ------------- Rendering ----------------------------------------------------

def format_matrix(matrix: Sequence[Sequence[object]]) -> str:
    """Space-separated rows followed by a blank line."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix) + "\n"


def print_transform_demo() -> None:
    """Show the three public transforms on the 3×3 demo matrix."""
    print("Original:")
    print(format_matrix(DEMO_MATRIX))
    print("Rotated 90° CW:")
    print(format_matrix(rotate(DEMO_MATRIX)))
    print("Vertical flip:")
    print(format_matrix(flip_vertical(DEMO_MATRIX)))
    print("Horizontal flip:")
    print(format_matrix(flip_horizontal(DEMO_MATRIX)))


def run_report(write_csv: bool = False, plot: bool = False, out_dir: Optional[str] = None) -> None:
    """Enumerate, group and print the headline results.

    Optional CSV and chart outputs go to ``out_dir`` (``settings.OUT_DIR`` by
    default).
    """
    solutions = find_all_queen_placements()
    print(f"8-Queens found: {len(solutions)}")
    if solutions:
        print(render_board(solutions[0], settings.QUEEN, settings.EMPTY))
    print()

    print_transform_demo()

    classes = group_similar_boards(solutions)
    summary = summarize_solutions(solutions, classes)
    print(f"Total solutions  : {summary['total_solutions']}")
    print(f"Distinct classes : {summary['distinct_classes']}")
    print("Class sizes      : " + " ".join(str(size) for size in summary["class_sizes"]))

    target = out_dir or settings.OUT_DIR
    if write_csv:
        save_solutions_to_csv(solutions, target)
        save_classes_to_csv(classes, target)
        save_class_summary_to_csv(classes, target)
    if plot:
        # Imported lazily so plain runs do not pay the matplotlib start-up cost.
        from .plots import plot_class_representatives, plot_class_sizes

        plot_class_sizes(classes, target)
        plot_class_representatives(classes, target)


# ------------- Configuration ------------------------------------------------

def parse_setting_overrides(set_args: Optional[List[str]]) -> List[Tuple[str, str, Any]]:
    """Normalize ``--set SECTION.KEY=VALUE`` inputs into ``(section, key, value)``.

    Values are decoded as JSON when possible (``true``, ``3``, ``"x"``) and
    kept as plain strings otherwise. Raises ``ValueError`` on malformed entries.
    """
    overrides: List[Tuple[str, str, Any]] = []
    for entry in set_args or []:
        target, sep, raw = entry.partition("=")
        section, dot, key = target.strip().partition(".")
        if not sep or not dot or not section or not key:
            raise ValueError(f"Invalid setting '{entry}'. Expected SECTION.KEY=VALUE")
        try:
            value = json.loads(raw)
        except ValueError:
            value = raw
        overrides.append((section, key, value))
    return overrides


def apply_configuration(config_path: str, overrides: Optional[List[Tuple[str, str, Any]]] = None) -> ConfigManager:
    """Load configuration and push its values into ``settings``.

    ``overrides`` are persisted to the file first, so the saved configuration
    and the active settings agree. Raises ``FileNotFoundError`` when the file
    does not exist.
    """
    config_mgr = ConfigManager(config_path)
    for section, key, value in overrides or []:
        config_mgr.update_setting(section, key, value)
    if overrides:
        print(f"Configuration updated: {config_mgr.config_path}")
    output = config_mgr.get_output_settings()
    render = config_mgr.get_render_settings()
    settings.set_output_options(
        out_dir=output.get("out_dir"),
        run_tag=output.get("run_tag"),
        date_in_filenames=output.get("date_in_filenames"),
        queen=render.get("queen"),
        empty=render.get("empty"),
    )
    return config_mgr


# ------------- Quick regression ---------------------------------------------

def run_quick_regression_tests() -> None:
    """Run fast end-to-end checks and raise ``AssertionError`` on failure."""
    print("Running quick regression tests...")

    stats = find_all_placements_with_stats()
    if len(stats.solutions) != 92:
        raise AssertionError(f"Expected 92 solutions, found {len(stats.solutions)}.")
    print(f"  Backtracking: {len(stats.solutions)} solutions, {stats.nodes_explored} nodes in {stats.elapsed_seconds:.4f}s")

    boards = find_all_queen_placements()
    if not all(is_valid_board(board) for board in boards):
        raise AssertionError("Solver emitted an invalid board.")
    if len(set(boards)) != len(boards):
        raise AssertionError("Solver emitted duplicate boards.")

    if rotate(DEMO_MATRIX) != [[7, 4, 1], [8, 5, 2], [9, 6, 3]]:
        raise AssertionError("rotate() produced an unexpected 3x3 result.")
    if flip_vertical(DEMO_MATRIX) != [[3, 2, 1], [6, 5, 4], [9, 8, 7]]:
        raise AssertionError("flip_vertical() produced an unexpected 3x3 result.")
    if flip_horizontal(DEMO_MATRIX) != [[7, 8, 9], [4, 5, 6], [1, 2, 3]]:
        raise AssertionError("flip_horizontal() produced an unexpected 3x3 result.")
    print("  Transforms: 3x3 demo matches")

    classes = group_similar_boards(boards)
    sizes = sorted(len(members) for members in classes)
    if sizes != [4] + [8] * 11:
        raise AssertionError(f"Unexpected class sizes: {sizes}")
    print(f"  Grouping: {len(classes)} classes")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(save_classes_to_csv(classes, tmpdir))
        if not path.exists() or path.stat().st_size == 0:
            raise AssertionError("Class CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Enumerate eight queens solutions and their symmetry classes.")
    parser.add_argument("--csv", action="store_true", help="Write solutions, class membership and class summary CSV files.")
    parser.add_argument("--plot", action="store_true", help="Write class size and representative charts (PNG).")
    parser.add_argument("--out-dir", default=None, help="Output directory for CSV/PNG files (default: settings or config).")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file (optional).")
    parser.add_argument(
        "--set",
        action="append",
        metavar="SECTION.KEY=VALUE",
        help="Update a configuration value and save it to --config (repeatable).",
    )
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and run the report."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    if args.set and not args.config:
        parser.error("--set requires --config")

    if args.config:
        try:
            apply_configuration(args.config, parse_setting_overrides(args.set))
        except FileNotFoundError as exc:
            print(f"Configuration file not found: {exc}")
            raise SystemExit(1) from exc
        except ValueError as exc:
            print(f"Configuration error: {exc}")
            raise SystemExit(1) from exc

    try:
        run_report(write_csv=args.csv, plot=args.plot, out_dir=args.out_dir)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
