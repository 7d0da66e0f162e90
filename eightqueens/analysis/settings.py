"""Global settings for the eight queens reporting pipeline.

This module centralizes tunable constants used by the CLI, the CSV writers
and the plotting helpers. Values can be overridden at runtime via the
configuration loader in `eightqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

# Markers used when rendering boards as text
QUEEN: str = "Q"
EMPTY: str = "."

# Output directory for CSV and charts
OUT_DIR: str = "results_eightqueens"

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_output_options(
        out_dir: Optional[str] = None,
        run_tag: Optional[str] = None,
        date_in_filenames: Optional[bool] = None,
        queen: Optional[str] = None,
        empty: Optional[str] = None,
) -> None:
        """Override output and rendering settings.

        Parameters left as None keep their current value. Prints a concise
        summary so the active output location is explicit at run start.
        """
        global OUT_DIR, RUN_TAG, DATE_IN_FILENAMES, QUEEN, EMPTY
        if out_dir is not None:
                OUT_DIR = out_dir
        if run_tag is not None:
                RUN_TAG = run_tag or None
        if date_in_filenames is not None:
                DATE_IN_FILENAMES = bool(date_in_filenames)
        if queen is not None:
                QUEEN = queen
        if empty is not None:
                EMPTY = empty

        print("Output settings configured:")
        print(f"   - Directory: {OUT_DIR}")
        print(f"   - Run tag: {RUN_TAG}" if RUN_TAG else "   - Run tag: none")
        print(f"   - Datestamp: {'on' if DATE_IN_FILENAMES else 'off'}")


def filename_suffix() -> str:
        """Return ``_<tag>_<runid>`` according to the naming policy, or ``""``."""
        parts = []
        if RUN_TAG:
                parts.append(str(RUN_TAG))
        if DATE_IN_FILENAMES and RUN_ID:
                parts.append(str(RUN_ID))
        return ("_" + "_".join(parts)) if parts else ""
