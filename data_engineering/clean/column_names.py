"""
Column name normalization (lowercase, underscore-separated)
"""

import re
import pandas as pd
from collections import defaultdict

SEPARATORS = re.compile(r'[^0-9a-z]+')


class ColumnNameCollisionError(ValueError):
    """Two source columns normalize to the same name"""

    def __init__(self, collisions):
        self.collisions = collisions
        details = '; '.join(
            f'{target!r} <- {sources}' for target, sources in sorted(collisions.items())
        )
        super().__init__(f'Column names collide after normalization: {details}')


def normalize_column_name(name) -> str:
    """'Pay Type' -> 'pay_type', 'TOTALPMT' -> 'totalpmt'"""
    return SEPARATORS.sub('_', str(name).lower()).strip('_')


def normalize_column_names(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename every column to its normalized form

    Raises:
        ColumnNameCollisionError: If distinct columns map to the same name
    """
    sources = defaultdict(list)
    for col in df.columns:
        sources[normalize_column_name(col)].append(col)

    collisions = {target: cols for target, cols in sources.items() if len(cols) > 1}
    if collisions:
        raise ColumnNameCollisionError(collisions)

    return df.rename(columns={col: normalize_column_name(col) for col in df.columns})
