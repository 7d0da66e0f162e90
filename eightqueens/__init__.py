"""Eight queens enumeration and symmetry classification."""

from .backtracking import (
    BOARD_SIZE,
    SearchStats,
    find_all_placements,
    find_all_placements_with_stats,
    find_all_queen_placements,
)
from .symmetry import canonical_form, class_sizes, group_similar_boards, stabilizer
from .transforms import (
    SYMMETRIES,
    flip_anti_diagonal,
    flip_horizontal,
    flip_main_diagonal,
    flip_vertical,
    orbit,
    rotate,
)
from .utils import board_to_placement, conflicts, is_valid_board, is_valid_solution, placement_to_board

__all__ = [
    "BOARD_SIZE",
    "SearchStats",
    "find_all_queen_placements",
    "find_all_placements",
    "find_all_placements_with_stats",
    "group_similar_boards",
    "canonical_form",
    "stabilizer",
    "class_sizes",
    "SYMMETRIES",
    "rotate",
    "flip_vertical",
    "flip_horizontal",
    "flip_main_diagonal",
    "flip_anti_diagonal",
    "orbit",
    "placement_to_board",
    "board_to_placement",
    "conflicts",
    "is_valid_solution",
    "is_valid_board",
]
