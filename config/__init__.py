"""
Configuration Module

- paths: data and output locations
- npdb: NPDB column names, code tables, and chart settings
"""
