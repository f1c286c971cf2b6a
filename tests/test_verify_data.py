"""Unit tests for input verification."""

from __future__ import annotations

from pathlib import Path

from scripts.verify_data import verify_data


def test_verify_data_accepts_sample(npdb_sample_path: Path) -> None:
    assert verify_data(npdb_sample_path) is True


def test_verify_data_rejects_missing_file(tmp_path: Path) -> None:
    assert verify_data(tmp_path / "absent.csv") is False


def test_verify_data_rejects_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "partial.csv"
    path.write_text("ALGNNATR,ORIGYEAR\n1,2012\n")

    assert verify_data(path) is False
