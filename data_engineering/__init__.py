"""
Data Engineering Module for the NPDB Malpractice Report

This module contains all data engineering code organized by pipeline stage:
1. load/ - Read the raw NPDB Public Use File
2. clean/ - Filtering, currency parsing, column names, code recoding
3. utils/ - Schema validation
4. datasets/ - Analysis-ready table assembly

Usage:
    from data_engineering.datasets.build_diagnosis_dataset import build_diagnosis_dataset
    from data_engineering.clean import recode_payer_relationship
"""

__version__ = "1.0.0"
