"""
Reporting and presentation package for the eight queens enumeration.

This package contains:
- settings: output locations, markers and filename policy
- stats: typed class summaries and pandas export
- reporting: CSV writers
- plots: matplotlib/seaborn charts (imported on demand)
- cli: top-level entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    ClassSummary,
    SolutionSummary,
    class_size_distribution,
    classes_to_frame,
    summarize_classes,
    summarize_solutions,
)

__all__ = [
    # types
    "ClassSummary",
    "SolutionSummary",
    # utils
    "summarize_classes",
    "summarize_solutions",
    "class_size_distribution",
    "classes_to_frame",
    # settings module
    "settings",
]
