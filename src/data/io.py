import logging
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

GENE_COL: str = "Gene"
SYMBOL_COL: str = "Symbol"
LFC_COL: str = "log2foldchange"
PADJ_COL: str = "Adjustedpvalue"

EXPRESSION_COLUMNS: Iterable[str] = (
    GENE_COL,
    SYMBOL_COL,
    "Species",
    "Experiment_accession",
    "Comparison",
    LFC_COL,
    PADJ_COL,
)
NUMERIC_COLUMNS: Iterable[str] = (LFC_COL, PADJ_COL)


def to_numeric_or_nan(values: pd.Series) -> pd.Series:
    """Parse a column as floats, mapping anything unparseable to NaN.

    Text such as "NA", empty strings and non-finite values ("inf") all become
    NaN, so downstream code only ever sees finite floats or the missing marker.

    Args:
        values: Column to convert.

    Returns:
        pd.Series: Float column with the same index.
    """
    numeric = pd.to_numeric(values, errors="coerce").astype(float)
    return numeric.replace([np.inf, -np.inf], np.nan)


def load_expression_data(csv_path: Path, sep: str = ",") -> pd.DataFrame:
    """Load a differential expression results file.

    The header of the file is discarded and replaced by the canonical column
    names in EXPRESSION_COLUMNS, since the source headers are long and full of
    blank spaces. The first data row is dropped, as source files carry a stale
    copy of the old column names there.

    Args:
        csv_path: Path to the delimited text file, first row being a header.
        sep: Column delimiter.

    Returns:
        pd.DataFrame: One row per expression record with a fresh integer index.
            Fold-change and adjusted p-value columns are floats, with NaN for
            missing or unparseable values.

    Raises:
        FileNotFoundError: If csv_path does not exist.
        ValueError: If the header or any row does not have exactly as many
            fields as EXPRESSION_COLUMNS.
    """
    csv_path = Path(csv_path)
    if not csv_path.is_file():
        raise FileNotFoundError(f"Expression data file not found: {csv_path}")

    # 1. Header is only used to check the number of columns
    n_cols = len(pd.read_csv(csv_path, sep=sep, nrows=0).columns)
    if n_cols != len(EXPRESSION_COLUMNS):
        raise ValueError(
            f"{csv_path.name} has {n_cols} columns, expected "
            f"{len(EXPRESSION_COLUMNS)} ({', '.join(EXPRESSION_COLUMNS)})."
        )

    # 2. Read rows positionally and as text, numeric parsing happens below
    try:
        df = pd.read_csv(
            csv_path,
            sep=sep,
            header=None,
            skiprows=1,
            dtype=str,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=list(EXPRESSION_COLUMNS), dtype=str)
    except pd.errors.ParserError as e:
        raise ValueError(
            f"{csv_path.name} has rows with more than {n_cols} fields: {e}"
        ) from e

    if len(df.columns) != len(EXPRESSION_COLUMNS):
        raise ValueError(
            f"{csv_path.name} has rows with {len(df.columns)} fields, expected "
            f"{len(EXPRESSION_COLUMNS)}."
        )
    short_rows = df.isna().any(axis=1)
    if short_rows.any():
        raise ValueError(
            f"{csv_path.name} has {short_rows.sum()} rows with fewer than "
            f"{len(EXPRESSION_COLUMNS)} fields (line {short_rows.idxmax() + 2})."
        )
    df.columns = list(EXPRESSION_COLUMNS)

    # 3. Remove the stale header row
    df = df.iloc[1:].copy()
    for col in df.columns:
        df[col] = df[col].str.strip()

    # 4. Coerce numeric columns
    for col in NUMERIC_COLUMNS:
        df[col] = to_numeric_or_nan(df[col])

    # 5. Every record must be identifiable
    missing_ids = df[GENE_COL] == ""
    if missing_ids.any():
        logging.warning(
            f"[{csv_path.name}] Dropping {missing_ids.sum()} rows without a gene "
            "identifier."
        )
        df = df[~missing_ids]

    logging.info(f"[{csv_path.name}] Loaded {len(df)} expression records.")

    return df.reset_index(drop=True)
