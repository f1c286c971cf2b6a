"""
Categorical recoding for NPDB pay type and payer relationship codes

Payer relationship is recoded in two ordered steps: legacy numeric codes
are first rewritten to their letter codes, then all letter codes are
expanded to labels. Codes missing from a table pass through unchanged.
"""

import pandas as pd
from typing import Mapping

from config.npdb import (
    PAY_TYPE, PAYER_RELATIONSHIP,
    PAY_TYPE_LABELS, LEGACY_PAYER_CODES, PAYER_RELATIONSHIP_LABELS
)


def recode(series: pd.Series, mapping: Mapping) -> pd.Series:
    """Replace values found in mapping; leave everything else (including NaN) as is"""
    known = series.isin(list(mapping.keys()))
    return series.where(~known, series.map(mapping))


def recode_pay_type(series: pd.Series) -> pd.Series:
    """B/J/O/S/U -> descriptive labels"""
    return recode(series, PAY_TYPE_LABELS)


def recode_payer_relationship(series: pd.Series) -> pd.Series:
    """Legacy 1-4 -> P/G/S/M, then letter codes -> descriptive labels"""
    letters = recode(series, LEGACY_PAYER_CODES)
    return recode(letters, PAYER_RELATIONSHIP_LABELS)


def recode_reports(df: pd.DataFrame,
                   pay_type_col: str = PAY_TYPE,
                   payer_col: str = PAYER_RELATIONSHIP,
                   verbose: bool = False) -> pd.DataFrame:
    """
    Apply both code tables to a report table

    Args:
        df: Report table
        pay_type_col: Pay type column
        payer_col: Payer relationship column
        verbose: Print codes that had no label

    Returns:
        Copy of df with labelled categorical columns
    """
    df = df.copy()
    df[pay_type_col] = recode_pay_type(df[pay_type_col])
    df[payer_col] = recode_payer_relationship(df[payer_col])

    if verbose:
        for col, labels in [(pay_type_col, PAY_TYPE_LABELS.values()),
                            (payer_col, PAYER_RELATIONSHIP_LABELS.values())]:
            values = df[col].dropna()
            unlabelled = sorted(set(values[~values.isin(list(labels))].astype(str)))
            if unlabelled:
                print(f'  ⚠️  {col}: codes kept as-is (no label): {", ".join(unlabelled)}')
        print(f'  ✓ Recoded {pay_type_col} and {payer_col}')

    return df
