"""
Configuration for the NPDB diagnosis-related malpractice report
Source columns, code tables, thresholds, and chart settings
"""

# ==============================================================================
# SOURCE SCHEMA (NPDB Public Use File headers)
# ==============================================================================

ALLEGATION_NATURE = 'ALGNNATR'
ORIGIN_YEAR = 'ORIGYEAR'
PAYMENT = 'PAYMENT'
TOTAL_PAYMENT = 'TOTALPMT'
PAY_TYPE = 'PAYTYPE'
PAYER_RELATIONSHIP = 'PYRRLTNS'

REQUIRED_COLUMNS = [
    ALLEGATION_NATURE,
    ORIGIN_YEAR,
    PAYMENT,
    TOTAL_PAYMENT,
    PAY_TYPE,
    PAYER_RELATIONSHIP,
]

# Coded columns pandas would otherwise infer as numbers (or as mixed types)
TEXT_COLUMNS = {
    ALLEGATION_NATURE: str,
    PAYER_RELATIONSHIP: str,
}

MONEY_COLUMNS = [PAYMENT, TOTAL_PAYMENT]

# ==============================================================================
# SUBSET OF INTEREST
# ==============================================================================

DIAGNOSIS_CODE = '1'  # ALGNNATR: Diagnosis Related
MIN_ORIGIN_YEAR = 2010

# ==============================================================================
# CODE TABLES
# ==============================================================================

PAY_TYPE_LABELS = {
    'B': 'Before Settlement',
    'J': 'Judgment',
    'O': 'Other',
    'S': 'Settlement',
    'U': 'Unknown',
}

# 'U' covers both "no payment" and pre-1995 electronic "Before" reports
UNKNOWN_PAY_TYPES = ('U', 'Unknown')

# Pre-letter numeric payer codes, remapped before labelling
LEGACY_PAYER_CODES = {
    '1': 'P',
    '2': 'G',
    '3': 'S',
    '4': 'M',
}

PAYER_RELATIONSHIP_LABELS = {
    'P': 'Primary Insurer',
    'G': 'Insurance Guaranty Fund',
    'S': 'Self-Insured Organization',
    'M': 'State Patient Compensation Fund',
    'E': 'Excess Insurer',
    'O': 'Government Secondary Payer',
}

# ==============================================================================
# CHARTS
# ==============================================================================

# Chart Color Palette
CHART_COLORS = [
    '#3498db',  # Blue
    '#e74c3c',  # Red
    '#2ecc71',  # Green
    '#f39c12',  # Orange
    '#9b59b6',  # Purple
    '#1abc9c',  # Turquoise
    '#34495e',  # Dark gray
    '#e67e22',  # Carrot
]

# Plotly Chart Theme
PLOTLY_THEME = 'plotly_white'

MISSING_GROUP_LABEL = 'Not Reported'
