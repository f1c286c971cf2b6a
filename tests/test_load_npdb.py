"""Unit tests for the NPDB loader."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from data_engineering.load import load_npdb


def test_load_npdb_preserves_rows_and_columns(raw_reports) -> None:
    """Loader should keep source row and column order."""
    assert len(raw_reports) == 11
    assert list(raw_reports.columns) == [
        "SEQNO", "WORKSTAT", "ALGNNATR", "ORIGYEAR", "PAYMENT", "TOTALPMT", "PAYTYPE", "PYRRLTNS",
    ]
    assert raw_reports["SEQNO"].tolist() == list(range(1, 12))


def test_load_npdb_reads_coded_columns_as_text(raw_reports) -> None:
    """Allegation nature and payer relationship must stay strings."""
    assert raw_reports["ALGNNATR"].tolist()[:3] == ["1", "1", "10"]
    assert raw_reports.loc[3, "PYRRLTNS"] == "2"
    assert raw_reports.loc[10, "PYRRLTNS"] == "1"


def test_load_npdb_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing file is fatal."""
    with pytest.raises(FileNotFoundError):
        load_npdb(tmp_path / "absent.csv", verbose=False)


def test_load_npdb_raises_for_missing_columns(tmp_path: Path) -> None:
    """Files without the report columns are rejected."""
    path = tmp_path / "partial.csv"
    path.write_text("ALGNNATR,ORIGYEAR\n1,2012\n")

    with pytest.raises(ValueError, match="PAYMENT"):
        load_npdb(path, verbose=False)


def test_load_npdb_raises_for_malformed_rows(tmp_path: Path) -> None:
    """Rows with extra fields stop the load instead of being skipped."""
    path = tmp_path / "malformed.csv"
    path.write_text(
        "ALGNNATR,ORIGYEAR,PAYMENT,TOTALPMT,PAYTYPE,PYRRLTNS\n"
        "1,2012,100,100,S,P\n"
        "1,2013,100,100,S,P,extra,fields\n"
    )

    with pytest.raises(pd.errors.ParserError):
        load_npdb(path, verbose=False)
