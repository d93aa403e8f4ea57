import pandas as pd
import pytest

from src.analytics.metrics import helper_contributions, max_counts, solved_fraction
from src.reporting.html_report import (
    build_report_html,
    format_contribution_table,
    progress_to_html,
    progress_summary,
    table_to_html,
)


def test_helper_contributions_merges_and_shares():
    df = helper_contributions({"a": 10, "b": 2500}, {"a": 1, "b": 3, "c": 4})
    assert df["helper_id"].tolist() == ["c", "b", "a"]
    assert df["updated"].tolist() == [0, 2500, 10]
    assert df["solved_share"].tolist() == pytest.approx([0.5, 0.375, 0.125])


def test_helper_contributions_without_solutions():
    df = helper_contributions({"a": 5}, {})
    assert df["solved_share"].tolist() == [0.0]
    assert max_counts(df) == (5, 1)


def test_helper_contributions_rejects_negative_counts():
    with pytest.raises(ValueError):
        helper_contributions({"a": -1}, {})


def test_max_counts_empty():
    assert max_counts(helper_contributions({}, {})) == (1, 1)


def test_solved_fraction():
    assert solved_fraction(3, 12) == 0.25
    assert solved_fraction(0, 0) is None
    with pytest.raises(ValueError):
        solved_fraction(5, 4)


def test_format_contribution_table():
    df = helper_contributions({"a": 1500}, {"a": 2, "b": 0})
    out = format_contribution_table(df)
    assert out.to_dict("records") == [
        {"helper_id": "a", "updated": "1,500", "solved": "2", "solved_share": "100.0 %"},
        {"helper_id": "b", "updated": "0", "solved": "0", "solved_share": "-"},
    ]


def test_format_contribution_table_with_missing_counts():
    df = pd.DataFrame({"helper_id": ["x"], "updated": [None], "solved_share": [None]})
    out = format_contribution_table(df)
    assert out.loc[0, "updated"] == "-"
    assert out.loc[0, "solved_share"] == "-"


def test_progress_summary():
    assert progress_summary(1234, 4936) == {"solved": "1,234", "total": "4,936", "progress": "25.0 %"}
    assert progress_summary(0, 0)["progress"] == "-"
    assert progress_summary(0, 10)["progress"] == "-"


def test_report_html_contains_formatted_table():
    table = format_contribution_table(helper_contributions({"a": 1234567}, {"a": 1}))
    html = build_report_html([("Helpers", table_to_html(table, "Contributions"))])
    assert "<h1>Tiling Monitor Report</h1>" in html
    assert "1,234,567" in html
    assert "100.0 %" in html


def test_helper_contributions_orders_numeric_ids_by_value():
    df = helper_contributions({"10": 1, "9": 1, 2: 1, "x": 1}, {})
    assert df["helper_id"].tolist() == ["2", "9", "10", "x"]


def test_helper_contributions_ties_keep_numeric_order():
    df = helper_contributions({}, {"10": 2, "9": 2, "100": 5})
    assert df["helper_id"].tolist() == ["100", "9", "10"]


def test_report_titles_are_escaped():
    html = build_report_html([("<b>Helpers</b>", table_to_html(pd.DataFrame({"a": [1]}), "A & B"))])
    assert "<h2>&lt;b&gt;Helpers&lt;/b&gt;</h2>" in html
    assert "<h3>A &amp; B</h3>" in html


def test_progress_to_html():
    html = progress_to_html(2500, 10000)
    assert "<h3>Solve progress</h3>" in html
    assert "Solved tiles" in html
    assert "2,500" in html
    assert "10,000" in html
    assert "25.0 %" in html
