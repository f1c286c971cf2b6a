"""
Currency parsing for NPDB payment columns

Payment amounts arrive as formatted text ("$12,345.67"). Anything outside
digits and the decimal point is stripped before parsing; values that still
don't parse become NaN.
"""

import re
import numpy as np
import pandas as pd
from typing import Any, Iterable

NON_NUMERIC = re.compile(r'[^0-9.]')


def parse_currency(value: Any) -> float:
    """
    Parse one currency-formatted value

    Args:
        value: Text such as "$1,250.00", a number, or a missing value

    Returns:
        Parsed float, or NaN if nothing numeric remains
    """
    if value is None:
        return np.nan
    if isinstance(value, (bool, np.bool_)):
        return np.nan
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    if pd.isna(value):
        return np.nan

    stripped = NON_NUMERIC.sub('', str(value))
    try:
        return float(stripped)
    except ValueError:
        return np.nan


def normalize_currency(series: pd.Series) -> pd.Series:
    """Parse a currency column to float64; numeric columns pass through unchanged"""
    if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
        return series.astype('float64')
    return series.map(parse_currency).astype('float64')


def normalize_currency_columns(df: pd.DataFrame, columns: Iterable[str],
                               verbose: bool = False) -> pd.DataFrame:
    """
    Parse several currency columns

    Args:
        df: Report table
        columns: Columns to parse
        verbose: Print how many values became missing

    Returns:
        Copy of df with the columns converted to float64
    """
    df = df.copy()
    for col in columns:
        before_missing = df[col].isna().sum()
        df[col] = normalize_currency(df[col])

        if verbose:
            unparsed = df[col].isna().sum() - before_missing
            print(f'  ✓ {col}: {df[col].notna().sum():,} amounts parsed')
            if unparsed > 0:
                print(f'  ⚠️  {col}: {unparsed:,} values could not be parsed (set to missing)')

    return df
