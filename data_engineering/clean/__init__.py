"""
Data Cleaning Module

Stages applied to the raw NPDB table, in pipeline order:
1. filters - diagnosis-related subset, Unknown pay type exclusion
2. currency - payment text to numbers
3. column_names - lowercase/underscore column identifiers
4. recode - code tables for pay type and payer relationship
"""

from .filters import filter_reports, exclude_pay_types
from .currency import parse_currency, normalize_currency, normalize_currency_columns
from .column_names import (
    ColumnNameCollisionError,
    normalize_column_name,
    normalize_column_names
)
from .recode import (
    recode,
    recode_pay_type,
    recode_payer_relationship,
    recode_reports
)

__all__ = [
    'filter_reports',
    'exclude_pay_types',
    'parse_currency',
    'normalize_currency',
    'normalize_currency_columns',
    'ColumnNameCollisionError',
    'normalize_column_name',
    'normalize_column_names',
    'recode',
    'recode_pay_type',
    'recode_payer_relationship',
    'recode_reports',
]
