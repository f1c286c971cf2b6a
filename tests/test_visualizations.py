"""Unit tests for report charts."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from analysis.reports.static_figures import save_aggregate_bar_figure
from analysis.reports.visualizations import create_aggregate_bar_chart


def _counts() -> pd.Series:
    counts = pd.Series([4, 1, 2], index=pd.Index(["Settlement", "Judgment", np.nan], name="paytype"), name="count")
    return counts


def test_bar_chart_annotates_values_and_rotates_labels() -> None:
    """Bars carry their value and categories are tilted."""
    fig = create_aggregate_bar_chart(_counts(), title="Reports by Pay Type")

    assert len(fig.data) == 1
    bar = fig.data[0]
    assert list(bar.x) == ["Settlement", "Judgment", "Not Reported"]
    assert list(bar.text) == ["4", "1", "2"]
    assert fig.layout.xaxis.tickangle == -45
    assert fig.layout.xaxis.title.text == "paytype"
    assert fig.layout.yaxis.title.text == "count"


def test_bar_chart_marks_missing_means() -> None:
    """Missing means are labelled n/a rather than zero."""
    means = pd.Series([20781.89, np.nan], index=["Settlement", "Other"], name="mean_payment")

    fig = create_aggregate_bar_chart(means, title="Mean Payment", value_prefix="$")

    assert list(fig.data[0].text) == ["$20,782", "n/a"]


def test_bar_chart_of_empty_aggregate_has_no_bars() -> None:
    """An empty aggregate renders an empty chart."""
    fig = create_aggregate_bar_chart(pd.Series([], dtype="float64"), title="Nothing")

    assert len(fig.data) == 0
    assert fig.layout.title.text == "Nothing"


def test_static_figure_written(tmp_path: Path) -> None:
    """PNG export writes the file."""
    path = save_aggregate_bar_figure(_counts(), tmp_path / "counts.png", title="Reports")

    assert path == tmp_path / "counts.png"
    assert path.exists()
    assert path.stat().st_size > 0


def test_static_figure_skips_empty_aggregate(tmp_path: Path) -> None:
    """Nothing is written for an empty aggregate."""
    path = save_aggregate_bar_figure(pd.Series([], dtype="float64"), tmp_path / "empty.png", title="Empty")

    assert path is None
    assert not (tmp_path / "empty.png").exists()
