"""
Data Load Module

Readers for raw (Bronze) source files:
- NPDB Public Use File (malpractice payment reports)
"""

from .load_npdb import load_npdb

__all__ = ['load_npdb']
