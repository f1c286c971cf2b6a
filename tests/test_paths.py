"""Unit tests for project path configuration."""

from __future__ import annotations

from pathlib import Path

from config import paths


def test_ensure_directories_creates_only_used_locations(monkeypatch, tmp_path: Path) -> None:
    """Only the raw input and output directories are created."""
    monkeypatch.setattr(paths, "BRONZE", tmp_path / "data" / "bronze")
    monkeypatch.setattr(paths, "BRONZE_NPDB", tmp_path / "data" / "bronze" / "npdb")
    monkeypatch.setattr(paths, "OUTPUTS_ROOT", tmp_path / "outputs")
    monkeypatch.setattr(paths, "VISUALIZATIONS", tmp_path / "outputs" / "visualizations")
    monkeypatch.setattr(paths, "REPORTS", tmp_path / "outputs" / "reports")

    paths.ensure_directories()

    assert (tmp_path / "data" / "bronze" / "npdb").is_dir()
    assert (tmp_path / "outputs" / "reports").is_dir()
    assert (tmp_path / "outputs" / "visualizations").is_dir()
    assert sorted(p.name for p in (tmp_path / "data").iterdir()) == ["bronze"]


def test_default_input_lives_in_bronze_layer() -> None:
    assert paths.DEFAULT_NPDB_FILE.parent == paths.BRONZE_NPDB
    assert not hasattr(paths, "SILVER")
    assert not hasattr(paths, "GOLD")
