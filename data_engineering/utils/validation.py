#!/usr/bin/env python3
"""
Data Quality and Schema Validation

Uses pandera to validate the cleaned diagnosis-related report table for:
- Schema compliance (allegation code, origin year bound, payment ranges)
- Unknown pay type leakage into the analysis table
- Data quality checks (missing values)

Usage:
    from data_engineering.utils.validation import validate_diagnosis_dataset

    # Validate before aggregating
    validate_diagnosis_dataset(df)
"""

import pandera as pa
from pandera import Column, Check
import pandas as pd

from config.npdb import (
    ALLEGATION_NATURE, ORIGIN_YEAR, PAYMENT, TOTAL_PAYMENT,
    PAY_TYPE, PAYER_RELATIONSHIP,
    DIAGNOSIS_CODE, MIN_ORIGIN_YEAR, UNKNOWN_PAY_TYPES
)
from data_engineering.clean.column_names import normalize_column_name


# ============================================================================
# DIAGNOSIS DATASET SCHEMA
# ============================================================================

def build_diagnosis_schema(allegation_code: str = DIAGNOSIS_CODE,
                           min_year: int = MIN_ORIGIN_YEAR) -> pa.DataFrameSchema:
    """
    Schema for the cleaned table (normalized column names, labelled codes)

    Args:
        allegation_code: The only allowed allegation nature code
        min_year: Lowest allowed origin year

    Returns:
        pandera DataFrameSchema
    """
    n = normalize_column_name

    return pa.DataFrameSchema(
        {
            n(ALLEGATION_NATURE): Column(
                str,
                Check.isin([str(allegation_code)]),
                nullable=False,
                description='Allegation nature code of the analysed subset'
            ),
            n(ORIGIN_YEAR): Column(
                int,
                Check.greater_than_or_equal_to(min_year),
                nullable=False,
                coerce=True
            ),

            # Money (missing means no payment reported)
            n(PAYMENT): Column(float, Check.greater_than_or_equal_to(0), nullable=True),
            n(TOTAL_PAYMENT): Column(float, Check.greater_than_or_equal_to(0), nullable=True),

            # Labelled categoricals
            n(PAY_TYPE): Column(
                str,
                Check.notin(list(UNKNOWN_PAY_TYPES)),
                nullable=True
            ),
            n(PAYER_RELATIONSHIP): Column(str, nullable=True),
        },
        strict=False,  # Allow extra columns not defined here
        description='Diagnosis-related NPDB report schema'
    )


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_diagnosis_dataset(df: pd.DataFrame,
                               allegation_code: str = DIAGNOSIS_CODE,
                               min_year: int = MIN_ORIGIN_YEAR,
                               verbose: bool = True) -> bool:
    """
    Validate the cleaned diagnosis-related dataset

    Args:
        df: DataFrame to validate
        allegation_code: Expected allegation nature code
        min_year: Expected minimum origin year
        verbose: Print progress

    Returns:
        True if validation passes

    Raises:
        pandera.errors.SchemaErrors: If validation fails
    """
    if verbose:
        print(f'\n{"="*70}')
        print('Validating diagnosis-related dataset')
        print(f'{"="*70}')

    schema = build_diagnosis_schema(allegation_code, min_year)

    try:
        schema.validate(df, lazy=True)
        if verbose:
            print('  ✓ Schema validation passed')
    except pa.errors.SchemaErrors as err:
        print('  ❌ Schema validation failed:')
        print(err.failure_cases)
        raise

    if verbose:
        check_data_quality(df)
        print('  ✓ All validations passed\n')
    return True


def check_data_quality(df: pd.DataFrame, threshold: float = 50.0) -> pd.Series:
    """
    Report columns whose missing-value percentage exceeds threshold

    Returns:
        Missing percentage per flagged column
    """
    if len(df) == 0:
        print('  ⚠️  Dataset is empty')
        return pd.Series(dtype='float64')

    missing_pct = (df.isnull().sum() / len(df) * 100).sort_values(ascending=False)
    high_missing = missing_pct[missing_pct > threshold]
    if len(high_missing) > 0:
        print(f'  ⚠️  High missing values (>{threshold:.0f}%):')
        for col, pct in high_missing.items():
            print(f'     - {col}: {pct:.1f}%')

    return high_missing
