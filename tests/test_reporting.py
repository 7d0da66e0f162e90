"""Tests for class summaries, CSV exports and charts."""

import csv
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightqueens.analysis import settings
from eightqueens.analysis.reporting import (
    save_class_summary_to_csv,
    save_classes_to_csv,
    save_solutions_to_csv,
)
from eightqueens.analysis.stats import (
    class_size_distribution,
    classes_to_frame,
    summarize_classes,
    summarize_solutions,
)
from eightqueens.backtracking import find_all_queen_placements
from eightqueens.symmetry import group_similar_boards
from eightqueens.utils import is_valid_solution


class _Fixture(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.boards = find_all_queen_placements()
        cls.classes = group_similar_boards(cls.boards)


class StatsTests(_Fixture):
    def test_size_distribution(self):
        self.assertEqual(class_size_distribution(self.classes), {4: 1, 8: 11})

    def test_summarize_solutions(self):
        summary = summarize_solutions(self.boards, self.classes)
        self.assertEqual(summary["total_solutions"], 92)
        self.assertEqual(summary["distinct_classes"], 12)
        self.assertEqual(len(summary["class_sizes"]), 12)

    def test_summarize_classes(self):
        summaries = summarize_classes(self.classes)
        self.assertEqual([s["index"] for s in summaries], list(range(12)))
        self.assertEqual(summaries[0]["representative"], (0, 4, 7, 5, 2, 6, 1, 3))
        for entry in summaries:
            self.assertEqual(entry["size"], 8 // len(entry["stabilizer"]))
            self.assertTrue(is_valid_solution(entry["canonical"]))
        self.assertEqual(len({entry["canonical"] for entry in summaries}), 12)

    def test_frame(self):
        frame = classes_to_frame(self.classes)
        self.assertEqual(len(frame), 92)
        self.assertEqual(frame["class_index"].nunique(), 12)
        self.assertEqual(int(frame["is_representative"].sum()), 12)
        self.assertEqual(frame.iloc[0]["placement"], "04752613")


class CsvTests(_Fixture):
    def setUp(self):
        self._tag, self._date = settings.RUN_TAG, settings.DATE_IN_FILENAMES
        settings.RUN_TAG, settings.DATE_IN_FILENAMES = None, False

    def tearDown(self):
        settings.RUN_TAG, settings.DATE_IN_FILENAMES = self._tag, self._date

    def test_solutions_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_solutions_to_csv(self.boards, tmpdir)
            self.assertEqual(Path(path).name, "solutions.csv")
            with open(path, newline="") as f:
                rows = list(csv.reader(f))
        self.assertEqual(rows[0][:3], ["solution_index", "placement", "row_0"])
        self.assertEqual(len(rows), 93)
        self.assertEqual(rows[1][1], "04752613")

    def test_classes_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_classes_to_csv(self.classes, tmpdir)
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), 92)
        self.assertEqual({row["class_size"] for row in rows}, {"4", "8"})

    def test_class_summary_csv_with_run_tag(self):
        settings.RUN_TAG = "demo"
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_class_summary_to_csv(self.classes, tmpdir)
            self.assertEqual(Path(path).name, "class_summary_demo.csv")
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), 12)
        self.assertEqual(sum(int(row["class_size"]) for row in rows), 92)


class PlotTests(_Fixture):
    def test_charts_are_written(self):
        from eightqueens.analysis.plots import plot_class_representatives, plot_class_sizes

        with tempfile.TemporaryDirectory() as tmpdir:
            sizes_png = Path(plot_class_sizes(self.classes, tmpdir))
            boards_png = Path(plot_class_representatives(self.classes, tmpdir))
            self.assertTrue(sizes_png.exists() and sizes_png.stat().st_size > 0)
            self.assertTrue(boards_png.exists() and boards_png.stat().st_size > 0)


if __name__ == "__main__":
    unittest.main()
