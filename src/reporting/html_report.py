"""Generate formatted tables and HTML report artifacts."""
from __future__ import annotations

from html import escape

import pandas as pd

from src.analytics.metrics import solved_fraction
from src.config import COUNT_COLUMNS, PROGRESS_LABELS, REPORT_TITLE, SHARE_COLUMNS
from src.logging_utils import get_logger
from src.ui_components.formatting import integer_str, percent_str

logger = get_logger(__name__)


def format_contribution_table(df: pd.DataFrame) -> pd.DataFrame:
    out = df.astype(object).copy()
    for col in COUNT_COLUMNS:
        if col in out.columns:
            out[col] = out[col].map(integer_str)
    for col in SHARE_COLUMNS:
        if col in out.columns:
            out[col] = out[col].map(percent_str)
    logger.info("Formatted contribution table with %d helpers", len(out))
    return out


def progress_summary(solved_tiles: int, total_tiles: int) -> dict[str, str]:
    return {
        "solved": integer_str(solved_tiles),
        "total": integer_str(total_tiles),
        "progress": percent_str(solved_fraction(solved_tiles, total_tiles)),
    }


def table_to_html(df: pd.DataFrame, title: str) -> str:
    return f"<h3>{escape(title)}</h3>" + df.to_html(index=False, border=0)


def progress_to_html(solved_tiles: int, total_tiles: int) -> str:
    summary = progress_summary(solved_tiles, total_tiles)
    df = pd.DataFrame([{PROGRESS_LABELS[key]: value for key, value in summary.items()}])
    return table_to_html(df, "Solve progress")


def build_report_html(sections: list[tuple[str, str]]) -> str:
    """Assemble report sections; titles are escaped, content is trusted markup."""
    body = "\n".join(
        [f"<section><h2>{escape(title)}</h2><div>{content}</div></section>" for title, content in sections]
    )
    logger.info("Built report with %d sections", len(sections))
    return f"""
    <html>
    <head>
      <style>
        body {{font-family: Arial, sans-serif; margin: 24px;}}
        h1, h2 {{color: #1E3A8A;}}
        table {{border-collapse: collapse; width: 100%;}}
        th, td {{border: 1px solid #ddd; padding: 8px; text-align: right;}}
        th {{background: #f3f4f6;}}
      </style>
    </head>
    <body>
      <h1>{escape(REPORT_TITLE)}</h1>
      {body}
    </body>
    </html>
    """
