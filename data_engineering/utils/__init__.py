"""
Data Engineering Utilities

- validation: pandera schema and data quality checks
"""
