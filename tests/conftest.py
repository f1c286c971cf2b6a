"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
FIXTURES = Path(__file__).resolve().parent / "fixtures"


def pytest_sessionstart() -> None:
    """Add project root to sys.path for test imports."""
    if str(PROJECT_ROOT) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def npdb_sample_path() -> Path:
    """Eleven-row extract in NPDB Public Use File layout."""
    return FIXTURES / "npdb_sample.csv"


@pytest.fixture
def raw_reports(npdb_sample_path):
    """Sample extract loaded with the project loader."""
    from data_engineering.load import load_npdb

    return load_npdb(npdb_sample_path, verbose=False)


@pytest.fixture
def analysis_table(npdb_sample_path):
    """Cleaned, filtered, Unknown-excluded table and its build summary."""
    from data_engineering.datasets.build_diagnosis_dataset import build_diagnosis_dataset

    return build_diagnosis_dataset(npdb_sample_path, verbose=False)
