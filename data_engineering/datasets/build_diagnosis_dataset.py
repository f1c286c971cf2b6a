#!/usr/bin/env python3
"""
Diagnosis-Related Report Dataset Builder

Builds the analysis table for the NPDB malpractice report. The table lives in
memory only; nothing is written back to disk.

Steps:
1. Load the NPDB Public Use File (coded columns as text)
2. Keep diagnosis-related reports originating in or after the minimum year
3. Parse payment amounts from currency text
4. Normalize column names
5. Recode pay type and payer relationship
6. Exclude Unknown pay type
7. Validate the result

Usage:
  python data_engineering/datasets/build_diagnosis_dataset.py
  python data_engineering/datasets/build_diagnosis_dataset.py --data path/to/NPDB_PUF.csv --min-year 2012
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd

# Import paths from config
sys.path.append(str(Path(__file__).parent.parent.parent))
from config.paths import DEFAULT_NPDB_FILE
from config.npdb import (
    ALLEGATION_NATURE, ORIGIN_YEAR, PAY_TYPE, PAYER_RELATIONSHIP,
    MONEY_COLUMNS, DIAGNOSIS_CODE, MIN_ORIGIN_YEAR, UNKNOWN_PAY_TYPES
)
from data_engineering.load import load_npdb
from data_engineering.clean import (
    filter_reports,
    exclude_pay_types,
    normalize_currency_columns,
    normalize_column_name,
    normalize_column_names,
    recode_reports
)
from data_engineering.utils.validation import validate_diagnosis_dataset


@dataclass
class BuildSummary:
    """Row counts at each step, used by the report narrative"""
    source_file: str
    allegation_code: str
    min_year: int
    loaded_rows: int = 0
    filtered_rows: int = 0
    unknown_pay_type_rows: int = 0
    final_rows: int = 0
    unparsed_payments: dict = field(default_factory=dict)


def positive_int(value):
    """argparse type for row counts; rejects zero and negatives"""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {value}')
    return number


def print_step(number, title):
    """Print a formatted step header"""
    print(f'\n{"="*80}')
    print(f'STEP {number}: {title}')
    print(f'{"="*80}')


def build_diagnosis_dataset(data_file=DEFAULT_NPDB_FILE,
                            allegation_code: str = DIAGNOSIS_CODE,
                            min_year: int = MIN_ORIGIN_YEAR,
                            nrows: Optional[int] = None,
                            validate: bool = True,
                            verbose: bool = True):
    """
    Run the load and cleaning steps end to end

    Args:
        data_file: NPDB Public Use File
        allegation_code: Allegation nature code to keep
        min_year: Minimum origin year
        nrows: Read only the first n rows
        validate: Run pandera schema validation on the result
        verbose: Print progress

    Returns:
        (analysis table, BuildSummary)
    """
    summary = BuildSummary(source_file=str(data_file),
                           allegation_code=str(allegation_code),
                           min_year=min_year)

    if verbose:
        print_step(1, 'LOADING NPDB REPORTS')
    raw = load_npdb(data_file, nrows=nrows, verbose=verbose)
    summary.loaded_rows = len(raw)

    if verbose:
        print_step(2, 'FILTERING TO SUBSET OF INTEREST')
    df = filter_reports(raw, ALLEGATION_NATURE, allegation_code, ORIGIN_YEAR, min_year)
    summary.filtered_rows = len(df)
    if verbose:
        print(f'  {ALLEGATION_NATURE} == {allegation_code!r} and {ORIGIN_YEAR} >= {min_year}')
        print(f'  ✓ Kept {len(df):,} of {len(raw):,} reports')

    if verbose:
        print_step(3, 'PARSING PAYMENT AMOUNTS')
    before = {col: int(df[col].isna().sum()) for col in MONEY_COLUMNS}
    df = normalize_currency_columns(df, MONEY_COLUMNS, verbose=verbose)
    summary.unparsed_payments = {
        normalize_column_name(col): int(df[col].isna().sum()) - before[col]
        for col in MONEY_COLUMNS
    }

    if verbose:
        print_step(4, 'NORMALIZING COLUMN NAMES')
    df = normalize_column_names(df)
    if verbose:
        print(f'  ✓ Columns: {", ".join(df.columns)}')

    if verbose:
        print_step(5, 'RECODING PAY TYPE AND PAYER RELATIONSHIP')
    pay_type_col = normalize_column_name(PAY_TYPE)
    df = recode_reports(
        df,
        pay_type_col=pay_type_col,
        payer_col=normalize_column_name(PAYER_RELATIONSHIP),
        verbose=verbose
    )

    if verbose:
        print_step(6, 'EXCLUDING UNKNOWN PAY TYPE')
    analysis_df = exclude_pay_types(df, pay_type_col, UNKNOWN_PAY_TYPES)
    summary.unknown_pay_type_rows = len(df) - len(analysis_df)
    summary.final_rows = len(analysis_df)
    if verbose:
        print(f'  ✓ Removed {summary.unknown_pay_type_rows:,} Unknown pay type reports')
        print(f'  ✓ {summary.final_rows:,} reports remain for analysis')

    if validate:
        validate_diagnosis_dataset(analysis_df, allegation_code, min_year, verbose=verbose)

    return analysis_df, summary


def main():
    parser = argparse.ArgumentParser(description='Build the diagnosis-related NPDB analysis table')
    parser.add_argument('--data', type=Path, default=DEFAULT_NPDB_FILE,
                        help='NPDB Public Use File (CSV)')
    parser.add_argument('--min-year', type=int, default=MIN_ORIGIN_YEAR,
                        help='Minimum origin year (inclusive)')
    parser.add_argument('--allegation-code', default=DIAGNOSIS_CODE,
                        help='Allegation nature code to keep')
    parser.add_argument('--sample', type=positive_int, default=None,
                        help='Read only the first N rows (for testing)')

    args = parser.parse_args()

    try:
        df, summary = build_diagnosis_dataset(
            args.data,
            allegation_code=args.allegation_code,
            min_year=args.min_year,
            nrows=args.sample
        )
    except (FileNotFoundError, ValueError, pd.errors.ParserError) as e:
        print(f'\n✗ Build failed: {e}')
        sys.exit(1)

    print(f'\n✓ Analysis table ready: {summary.final_rows:,} reports')
    print(df.head())


if __name__ == '__main__':
    main()
