"""
Command-line scripts: input verification and pipeline orchestration
"""
