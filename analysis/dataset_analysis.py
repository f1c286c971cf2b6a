#!/usr/bin/env python3
"""
Dataset Analysis - Raw NPDB Overview

Prints a data-quality overview of the NPDB Public Use File before any
filtering:
- Basic statistics and missing values
- Code distributions (allegation nature, pay type, payer relationship)
- Origin year range
- How many payment values parse as amounts

Usage:
  python -m analysis.dataset_analysis
  python -m analysis.dataset_analysis --data path/to/NPDB_PUF.csv
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))
from config.paths import DEFAULT_NPDB_FILE
from config.npdb import (
    ALLEGATION_NATURE, ORIGIN_YEAR, PAY_TYPE, PAYER_RELATIONSHIP,
    MONEY_COLUMNS, LEGACY_PAYER_CODES
)
from data_engineering.load import load_npdb
from data_engineering.clean.currency import normalize_currency


def basic_stats(df):
    """Print shape and missing values"""
    print(f"\n{'='*70}")
    print("BASIC STATISTICS")
    print(f"{'='*70}")

    print(f"\nDataset shape: {df.shape}")

    print("\nMissing values:")
    missing = df.isnull().sum()
    missing_pct = (missing / len(df) * 100).round(2) if len(df) else missing
    missing_df = pd.DataFrame({
        'Missing': missing[missing > 0],
        'Percent': missing_pct[missing > 0]
    }).sort_values('Percent', ascending=False)

    if len(missing_df) > 0:
        print(missing_df.head(10))
    else:
        print("  No missing values!")

    return missing_df


def code_distributions(df, top_n=10):
    """Print the most frequent codes of each coded column"""
    print(f"\n{'='*70}")
    print("CODE DISTRIBUTIONS")
    print(f"{'='*70}")

    distributions = {}
    for col in [ALLEGATION_NATURE, PAY_TYPE, PAYER_RELATIONSHIP]:
        counts = df[col].value_counts(dropna=False)
        distributions[col] = counts
        print(f"\n{col} ({counts.size} distinct):")
        for code, n in counts.head(top_n).items():
            print(f"  {str(code):>6s}  {n:>10,}")

    legacy = df[PAYER_RELATIONSHIP].isin(list(LEGACY_PAYER_CODES.keys())).sum()
    print(f"\nLegacy numeric payer codes: {legacy:,}")

    return distributions


def year_range(df):
    """Print the origin year span"""
    years = pd.to_numeric(df[ORIGIN_YEAR], errors='coerce')
    print(f"\n{'='*70}")
    print("ORIGIN YEAR")
    print(f"{'='*70}")
    if years.notna().any():
        print(f"\n  {int(years.min())} to {int(years.max())}")
    unreadable = int(years.isna().sum())
    if unreadable:
        print(f"  ⚠️  {unreadable:,} rows without a readable year")
    return years


def payment_parse_rates(df):
    """Print how many payment values parse as amounts"""
    print(f"\n{'='*70}")
    print("PAYMENT PARSING")
    print(f"{'='*70}")

    rates = {}
    for col in MONEY_COLUMNS:
        parsed = normalize_currency(df[col])
        present = df[col].notna().sum()
        ok = parsed.notna().sum()
        rates[col] = ok / present if present else float('nan')
        print(f"\n  {col}: {ok:,} of {present:,} non-empty values parsed")

    return rates


def analyze_dataset(data_file):
    """Run full overview on the raw file"""
    print(f"\n{'#'*70}")
    print("# DATASET ANALYSIS: NPDB PUBLIC USE FILE")
    print(f"{'#'*70}")

    df = load_npdb(data_file)

    basic_stats(df)
    code_distributions(df)
    year_range(df)
    payment_parse_rates(df)

    print(f"\n{'='*70}")
    print("✓ Analysis complete")
    print(f"{'='*70}\n")


def main():
    parser = argparse.ArgumentParser(description="Overview of the raw NPDB file")
    parser.add_argument('--data', type=Path, default=DEFAULT_NPDB_FILE,
                        help='NPDB Public Use File (CSV)')

    args = parser.parse_args()

    try:
        analyze_dataset(args.data)
    except (FileNotFoundError, ValueError, pd.errors.ParserError) as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
