"""Helper contribution and solve progress metrics."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from src.config import CONTRIBUTION_COLUMNS


def helper_sort_key(helper_id: Any) -> Tuple[int, int, str]:
    """Order numeric ids by value, ahead of any non-numeric ones."""
    text = str(helper_id)
    if text.isdigit():
        return 0, int(text), text
    return 1, 0, text


def helper_contributions(updated: Mapping[Any, int], solved: Mapping[Any, int]) -> pd.DataFrame:
    helpers = sorted(set(updated) | set(solved), key=helper_sort_key)
    if not helpers:
        return pd.DataFrame(columns=CONTRIBUTION_COLUMNS)
    df = pd.DataFrame(
        {
            "helper_id": [str(h) for h in helpers],
            "updated": [int(updated.get(h, 0)) for h in helpers],
            "solved": [int(solved.get(h, 0)) for h in helpers],
            "order": range(len(helpers)),
        }
    )
    if (df[["updated", "solved"]] < 0).any().any():
        raise ValueError("Contribution counts cannot be negative")
    total = df["solved"].sum()
    df["solved_share"] = np.where(total > 0, df["solved"] / max(total, 1), 0.0)
    df = df.sort_values(["solved", "order"], ascending=[False, True])
    return df.reset_index(drop=True)[CONTRIBUTION_COLUMNS]


def max_counts(df: pd.DataFrame) -> Tuple[int, int]:
    """Largest updated and solved counts, floored at 1 for bar scaling."""
    if df.empty:
        return 1, 1
    return max(int(df["updated"].max()), 1), max(int(df["solved"].max()), 1)


def solved_fraction(solved_tiles: int, total_tiles: int) -> Optional[float]:
    if solved_tiles < 0 or total_tiles < 0:
        raise ValueError("Tile counts cannot be negative")
    if solved_tiles > total_tiles:
        raise ValueError(f"Solved tiles ({solved_tiles}) exceed total tiles ({total_tiles})")
    if total_tiles == 0:
        return None
    return solved_tiles / total_tiles
