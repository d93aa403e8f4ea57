"""Global configuration constants for the monitor display layer."""
from __future__ import annotations

REPORT_TITLE = "Tiling Monitor Report"

# Display numbers with a fixed locale, never the runtime one.
INVARIANT_LOCALE = "C"
LOCALE_CONVENTIONS = {
    "C": {"decimal_point": ".", "thousands_sep": ","},
}

PLACEHOLDER = "-"
INTEGER_DECIMALS = 0
PERCENT_DECIMALS = 1
PERCENT_SCALE = 100.0
PERCENT_SUFFIX = " %"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

CONTRIBUTION_COLUMNS = ["helper_id", "updated", "solved", "solved_share"]
COUNT_COLUMNS = ["updated", "solved"]
SHARE_COLUMNS = ["solved_share"]
PROGRESS_LABELS = {"solved": "Solved tiles", "total": "Total tiles", "progress": "Progress"}
