"""Unit tests for currency parsing."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from data_engineering.clean import normalize_currency, normalize_currency_columns, parse_currency


def test_parse_currency_strips_symbol_and_separators() -> None:
    """Formatted amounts parse to their numeric value."""
    assert parse_currency("$12,345.67") == pytest.approx(12345.67)
    assert parse_currency("$1,000,000") == pytest.approx(1_000_000.0)


@pytest.mark.parametrize("value", ["", "pending", "$", "--", "1.2.3", None, np.nan, pd.NA])
def test_parse_currency_returns_nan_for_unparsable_values(value) -> None:
    """Malformed values become missing instead of raising."""
    assert math.isnan(parse_currency(value))


def test_parse_currency_keeps_numbers() -> None:
    """Numbers pass through unchanged."""
    assert parse_currency(2500) == 2500.0
    assert parse_currency(12345.67) == 12345.67


def test_normalize_currency_is_idempotent() -> None:
    """Normalizing normalized data changes nothing."""
    series = pd.Series(["$12,345.67", "", "$500", "n/a"])

    once = normalize_currency(series)
    twice = normalize_currency(once)

    pd.testing.assert_series_equal(once, twice)
    assert once.tolist()[0] == pytest.approx(12345.67)
    assert once.isna().tolist() == [False, True, False, True]


def test_normalize_currency_handles_mixed_object_columns() -> None:
    """Object columns holding numbers and text parse element by element."""
    series = pd.Series([1500, "$2,000.50", None], dtype="object")

    parsed = normalize_currency(series)

    assert parsed.dtype == "float64"
    assert parsed.tolist()[:2] == [1500.0, 2000.5]
    assert math.isnan(parsed.tolist()[2])


def test_normalize_currency_columns_returns_copy(raw_reports) -> None:
    """Only the returned frame carries parsed amounts."""
    parsed = normalize_currency_columns(raw_reports, ["PAYMENT", "TOTALPMT"])

    assert raw_reports.loc[0, "PAYMENT"] == "$12,345.67"
    assert parsed.loc[0, "PAYMENT"] == pytest.approx(12345.67)
    assert parsed.loc[3, "TOTALPMT"] == pytest.approx(150000.0)
    assert math.isnan(parsed.loc[7, "PAYMENT"])
