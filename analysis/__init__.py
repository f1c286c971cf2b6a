"""
Analysis Module

Aggregation, exploration, and reporting

Modules:
- aggregates: group counts, group means, payment summaries
- dataset_analysis: overview of the raw NPDB file
- reports: charts and the HTML report
"""

__version__ = "1.0.0"
