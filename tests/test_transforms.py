"""Tests for the square-matrix transforms and the symmetry table."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightqueens.transforms import (
    SYMMETRIES,
    flip_anti_diagonal,
    flip_horizontal,
    flip_main_diagonal,
    flip_vertical,
    identity,
    orbit,
    rotate,
)

MATRIX = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


class ThreeByThreeTests(unittest.TestCase):
    """Known outputs on the 3x3 demo matrix."""

    def test_rotate_clockwise(self):
        self.assertEqual(rotate(MATRIX), [[7, 4, 1], [8, 5, 2], [9, 6, 3]])

    def test_flip_vertical(self):
        self.assertEqual(flip_vertical(MATRIX), [[3, 2, 1], [6, 5, 4], [9, 8, 7]])

    def test_flip_horizontal(self):
        self.assertEqual(flip_horizontal(MATRIX), [[7, 8, 9], [4, 5, 6], [1, 2, 3]])

    def test_flip_main_diagonal(self):
        self.assertEqual(flip_main_diagonal(MATRIX), [[1, 4, 7], [2, 5, 8], [3, 6, 9]])

    def test_flip_anti_diagonal(self):
        self.assertEqual(flip_anti_diagonal(MATRIX), [[9, 6, 3], [8, 5, 2], [7, 4, 1]])

    def test_rotation_and_flip_do_not_commute(self):
        self.assertNotEqual(rotate(flip_vertical(MATRIX)), flip_vertical(rotate(MATRIX)))

    def test_input_is_not_mutated(self):
        original = [row[:] for row in MATRIX]
        for _, transform in SYMMETRIES:
            transform(MATRIX)
        self.assertEqual(MATRIX, original)

    def test_result_is_a_new_grid(self):
        copy = identity(MATRIX)
        self.assertEqual(copy, MATRIX)
        self.assertIsNot(copy[0], MATRIX[0])


class LawTests(unittest.TestCase):
    """Group laws on a few shapes and element types."""

    GRIDS = [
        [],
        [["x"]],
        [[1, 2], [3, 4]],
        [[c + 4 * r for c in range(4)] for r in range(4)],
        ("ab", "cd"),
    ]

    def test_four_rotations_are_identity(self):
        for grid in self.GRIDS:
            with self.subTest(grid=grid):
                self.assertEqual(rotate(rotate(rotate(rotate(grid)))), identity(grid))

    def test_flips_are_involutions(self):
        for grid in self.GRIDS:
            for flip in (flip_vertical, flip_horizontal, flip_main_diagonal, flip_anti_diagonal):
                with self.subTest(grid=grid, flip=flip.__name__):
                    self.assertEqual(flip(flip(grid)), identity(grid))

    def test_diagonal_flips_from_rotation_and_axis_flip(self):
        grid = self.GRIDS[3]
        self.assertEqual(flip_main_diagonal(grid), flip_vertical(rotate(grid)))
        self.assertEqual(flip_anti_diagonal(grid), flip_horizontal(rotate(grid)))

    def test_orbit_of_asymmetric_grid_has_eight_distinct_images(self):
        images = orbit(self.GRIDS[3])
        self.assertEqual(len(images), 8)
        self.assertEqual(len({tuple(map(tuple, image)) for image in images}), 8)

    def test_symmetry_names(self):
        self.assertEqual(
            [name for name, _ in SYMMETRIES],
            [
                "identity",
                "rotate90",
                "rotate180",
                "rotate270",
                "flip_vertical",
                "flip_horizontal",
                "flip_main_diagonal",
                "flip_anti_diagonal",
            ],
        )


class NonSquareTests(unittest.TestCase):
    """Non-square grids are rejected with ValueError."""

    def test_rectangular_grid_rejected(self):
        for _, transform in SYMMETRIES:
            with self.subTest(transform=transform.__name__):
                with self.assertRaises(ValueError):
                    transform([[1, 2, 3], [4, 5, 6]])

    def test_ragged_grid_rejected(self):
        with self.assertRaises(ValueError):
            rotate([[1, 2], [3]])

    def test_flat_sequence_rejected(self):
        for grid in ([1], [1, 2], [[1, 2], 3]):
            for _, transform in SYMMETRIES:
                with self.subTest(grid=grid, transform=transform.__name__):
                    with self.assertRaises(ValueError):
                        transform(grid)


if __name__ == "__main__":
    unittest.main()
