"""Unit tests for column name normalization."""

from __future__ import annotations

import pandas as pd
import pytest

from data_engineering.clean import (
    ColumnNameCollisionError,
    normalize_column_name,
    normalize_column_names,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("TOTALPMT", "totalpmt"),
        ("Pay Type", "pay_type"),
        ("  Origin--Year ", "origin_year"),
        ("Payment ($)", "payment"),
        ("payer_relationship", "payer_relationship"),
    ],
)
def test_normalize_column_name(name: str, expected: str) -> None:
    """Names become lowercase with single underscores."""
    assert normalize_column_name(name) == expected


def test_normalize_column_names_renames_every_column(raw_reports) -> None:
    """Distinct source names stay distinct."""
    renamed = normalize_column_names(raw_reports)

    assert list(renamed.columns) == [
        "seqno", "workstat", "algnnatr", "origyear", "payment", "totalpmt", "paytype", "pyrrltns",
    ]
    assert renamed.columns.is_unique


def test_normalize_column_names_raises_on_collision() -> None:
    """Two names that normalize alike are reported, not merged."""
    df = pd.DataFrame({"Pay Type": ["S"], "pay_type": ["J"], "ORIGYEAR": [2012]})

    with pytest.raises(ColumnNameCollisionError) as excinfo:
        normalize_column_names(df)

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.collisions == {"pay_type": ["Pay Type", "pay_type"]}
