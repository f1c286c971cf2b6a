"""
Group counts, group means, and payment summaries for the report
"""

import numpy as np
import pandas as pd
from typing import Iterable, Optional, Sequence


def count_by(df: pd.DataFrame, by: str, groups: Optional[Sequence] = None) -> pd.Series:
    """
    Number of reports per group

    Missing group values form their own group, so the counts always add up
    to len(df) unless `groups` restricts the keys.

    Args:
        df: Report table
        by: Grouping column
        groups: Fixed list of group keys (absent groups count 0)

    Returns:
        Series indexed by group key (sorted), named 'count'
    """
    counts = df.groupby(by, dropna=False, sort=True).size()
    if groups is not None:
        counts = counts.reindex(list(groups), fill_value=0)

    counts.index.name = by
    return counts.astype('int64').rename('count')


def mean_by(df: pd.DataFrame, by: str, value: str,
            groups: Optional[Sequence] = None) -> pd.Series:
    """
    Mean of `value` per group over non-missing observations only

    A group with no observed values, or a key in `groups` with no rows,
    gets NaN rather than 0.

    Args:
        df: Report table
        by: Grouping column
        value: Numeric column to average
        groups: Fixed list of group keys

    Returns:
        Series indexed by group key (sorted), named 'mean_<value>'
    """
    values = pd.to_numeric(df[value], errors='coerce')
    means = values.groupby(df[by], dropna=False, sort=True).mean()
    if groups is not None:
        means = means.reindex(list(groups))

    means.index.name = by
    return means.astype('float64').rename(f'mean_{value}')


def summarize_payments(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Summary statistics for monetary columns

    Returns:
        DataFrame with one row per column: reported, mean, median, min, max, total
    """
    rows = {}
    for col in columns:
        values = pd.to_numeric(df[col], errors='coerce').dropna()
        rows[col] = {
            'reported': int(len(values)),
            'mean': values.mean() if len(values) else np.nan,
            'median': values.median() if len(values) else np.nan,
            'min': values.min() if len(values) else np.nan,
            'max': values.max() if len(values) else np.nan,
            'total': values.sum() if len(values) else np.nan,
        }

    return pd.DataFrame.from_dict(
        rows, orient='index',
        columns=['reported', 'mean', 'median', 'min', 'max', 'total']
    )
