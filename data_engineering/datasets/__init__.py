"""
Dataset Assembly Module

- build_diagnosis_dataset: in-memory analysis table for the malpractice report
"""
