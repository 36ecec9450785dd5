"""Expression data loading and querying.

This package provides functions for reading differential expression result
files into pandas DataFrames and for selecting records from them:
- io: loading and cleaning of the results file
- utils: read-only queries over the loaded table
"""
