"""
Report Module

- visualizations: plotly bar charts for grouped aggregates
- static_figures: PNG versions of the same charts
- diagnosis_report: narrative HTML report and CLI
"""
