"""
NPDB Public Use File loader

Reads the comma-separated NPDB extract into a DataFrame with the coded
columns forced to text.
"""

import pandas as pd
from pathlib import Path
from typing import Optional, Union

from config.npdb import REQUIRED_COLUMNS, TEXT_COLUMNS


def load_npdb(file_path: Union[str, Path], nrows: Optional[int] = None,
              verbose: bool = True) -> pd.DataFrame:
    """
    Load the NPDB Public Use File

    Args:
        file_path: Path to the CSV extract
        nrows: Number of rows to read (None for all data)
        verbose: Print progress

    Returns:
        DataFrame with source column and row order preserved

    Raises:
        FileNotFoundError: If the file does not exist
        pandas.errors.ParserError: If a row does not match the header layout
        ValueError: If a required column is missing
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f'NPDB file not found: {file_path}')

    if verbose:
        print(f'Reading {file_path}...')

    df = pd.read_csv(file_path, dtype=TEXT_COLUMNS, nrows=nrows, low_memory=False)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f'NPDB file {file_path.name} is missing columns: {missing}')

    if verbose:
        print(f'  ✓ Loaded {len(df):,} reports ({df.shape[1]} columns)')

    return df
