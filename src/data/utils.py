"""Utility functions to query loaded expression tables.

The loaded table is shared, read-only state: every function here returns a new
object and never modifies its input.
"""

from typing import List, Optional

import pandas as pd

from data.io import SYMBOL_COL


def filter_by_symbol(expr_df: pd.DataFrame, symbol: Optional[str]) -> pd.DataFrame:
    """Select expression records for a gene symbol.

    Matching is exact and case-sensitive. Symbols are not unique across
    experiments, so every matching record is returned.

    Args:
        expr_df: Expression table as returned by data.io.load_expression_data.
        symbol: Gene symbol to keep. None or an empty string means no
            selection was made.

    Returns:
        pd.DataFrame: A copy of the matching records, the whole table if there
            is no selection, or an empty table with the same columns if the
            symbol is unknown.

    Example:
        >>> filter_by_symbol(df, "DRD2")
        # Returns all DRD2 records, one per experiment/comparison
    """
    if not symbol:
        return expr_df.copy()

    return expr_df[expr_df[SYMBOL_COL] == symbol].copy()


def gene_symbols(expr_df: pd.DataFrame) -> List[str]:
    """Distinct, non-empty gene symbols in order of first appearance."""
    symbols = expr_df[SYMBOL_COL].dropna()
    return [s for s in symbols.drop_duplicates() if s != ""]
