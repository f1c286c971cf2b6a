"""
Row filters for the NPDB report subset
"""

import pandas as pd
from typing import Iterable

from config.npdb import (
    ALLEGATION_NATURE, ORIGIN_YEAR, PAY_TYPE,
    DIAGNOSIS_CODE, MIN_ORIGIN_YEAR, UNKNOWN_PAY_TYPES
)


def filter_reports(df: pd.DataFrame,
                   allegation_col: str = ALLEGATION_NATURE,
                   allegation_code: str = DIAGNOSIS_CODE,
                   year_col: str = ORIGIN_YEAR,
                   min_year: int = MIN_ORIGIN_YEAR) -> pd.DataFrame:
    """
    Keep reports with the given allegation nature that originated in or after min_year

    Rows keep their original relative order. Years that cannot be read as
    numbers never pass the year predicate; the surviving years are returned
    as integers even when blanks elsewhere made the column float.

    Args:
        df: Report table
        allegation_col: Allegation nature column
        allegation_code: Code to keep (compared as text)
        year_col: Origin year column
        min_year: Inclusive lower bound on origin year

    Returns:
        New DataFrame holding only the matching rows
    """
    same_allegation = df[allegation_col].astype('string') == str(allegation_code)
    recent = pd.to_numeric(df[year_col], errors='coerce') >= min_year

    mask = (same_allegation & recent).fillna(False).astype(bool)
    filtered = df.loc[mask].copy()
    filtered[year_col] = pd.to_numeric(filtered[year_col]).astype('int64')
    return filtered


def exclude_pay_types(df: pd.DataFrame,
                      column: str = PAY_TYPE,
                      excluded: Iterable[str] = UNKNOWN_PAY_TYPES) -> pd.DataFrame:
    """Drop rows whose pay type is one of `excluded` (codes or labels)"""
    keep = ~df[column].isin(list(excluded))
    return df.loc[keep].copy()
