import math
from pathlib import Path

import pandas as pd
import pytest
from data.io import (
    EXPRESSION_COLUMNS,
    GENE_COL,
    LFC_COL,
    PADJ_COL,
    SYMBOL_COL,
    load_expression_data,
)

TEST_DATA_DIR = Path(__file__).parent / "data"
SAMPLE_CSV = TEST_DATA_DIR / "schizo_genes_sample.csv"

HEADER = "Gene,Symbol,Species,Experiment accession,Comparison,log2FC,padj\n"
STALE_ROW = "Gene,Symbol,Species,Experiment_accession,Comparison,lfc,padj\n"


def write_csv(path: Path, rows) -> Path:
    path.write_text(HEADER + STALE_ROW + "".join(rows))
    return path


def test_load_sample_replaces_header_and_drops_stale_row():
    df = load_expression_data(SAMPLE_CSV)

    assert list(df.columns) == list(EXPRESSION_COLUMNS)
    assert len(df) == 6
    assert df[SYMBOL_COL].tolist() == [
        "DRD2",
        "DRD2",
        "SLC17A6",
        "BDNF",
        "GRIN2A",
        "SLC32A1",
    ]
    assert df.index.tolist() == list(range(6))


def test_loaded_records_satisfy_invariants():
    df = load_expression_data(SAMPLE_CSV)

    assert (df[GENE_COL].str.len() > 0).all()
    for col in (LFC_COL, PADJ_COL):
        assert pd.api.types.is_float_dtype(df[col])
        assert all(math.isnan(v) or math.isfinite(v) for v in df[col])


def test_unparseable_numbers_become_missing():
    df = load_expression_data(SAMPLE_CSV).set_index(SYMBOL_COL)

    # "NA" and empty string
    assert math.isnan(df.loc["BDNF", LFC_COL])
    assert math.isnan(df.loc["GRIN2A", LFC_COL])
    assert math.isnan(df.loc["GRIN2A", PADJ_COL])
    # non-finite
    assert math.isnan(df.loc["SLC32A1", PADJ_COL])
    assert df.loc["SLC17A6", LFC_COL] == pytest.approx(-2.3)


def test_two_records_scenario(tmp_path):
    csv_path = write_csv(
        tmp_path / "genes.csv",
        [
            "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001\n",
            "ENSG0002,B,Homo sapiens,E-1,x vs y,-0.5,0.5\n",
        ],
    )

    df = load_expression_data(csv_path)

    assert len(df) == 2
    assert df[SYMBOL_COL].tolist() == ["A", "B"]


def test_text_in_numeric_column_does_not_raise(tmp_path):
    csv_path = write_csv(
        tmp_path / "genes.csv",
        ["ENSG0001,A,Homo sapiens,E-1,x vs y,abc,0.01\n"],
    )

    df = load_expression_data(csv_path)

    assert math.isnan(df.loc[0, LFC_COL])
    assert df.loc[0, LFC_COL] != 0


def test_loading_is_idempotent():
    pd.testing.assert_frame_equal(
        load_expression_data(SAMPLE_CSV), load_expression_data(SAMPLE_CSV)
    )


def test_rows_without_gene_id_are_dropped(tmp_path):
    csv_path = write_csv(
        tmp_path / "genes.csv",
        [
            "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001\n",
            " ,B,Homo sapiens,E-1,x vs y,-0.5,0.5\n",
        ],
    )

    df = load_expression_data(csv_path)

    assert df[GENE_COL].tolist() == ["ENSG0001"]


def test_tab_separated_file(tmp_path):
    csv_path = tmp_path / "genes.tsv"
    csv_path.write_text(
        (HEADER + STALE_ROW).replace(",", "\t")
        + "ENSG0001\tA\tHomo sapiens\tE-1\tx vs y\t1.5\t0.001\n"
    )

    df = load_expression_data(csv_path, sep="\t")

    assert df.loc[0, SYMBOL_COL] == "A"
    assert df.loc[0, PADJ_COL] == pytest.approx(0.001)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_expression_data(tmp_path / "missing.csv")


def test_column_count_mismatch_raises(tmp_path):
    csv_path = tmp_path / "genes.csv"
    csv_path.write_text(
        "Gene,Symbol,Species,Experiment accession,Comparison,log2FC,padj,extra\n"
        "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001,1\n"
    )

    with pytest.raises(ValueError, match="expected 7"):
        load_expression_data(csv_path)


def test_too_few_columns_raises(tmp_path):
    csv_path = tmp_path / "genes.csv"
    csv_path.write_text("Gene,Symbol\nENSG0001,A\n")

    with pytest.raises(ValueError, match="has 2 columns"):
        load_expression_data(csv_path)


def test_rows_wider_than_header_raise(tmp_path):
    csv_path = write_csv(
        tmp_path / "genes.csv",
        [
            "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001,EXTRA\n",
            "ENSG0002,B,Homo sapiens,E-1,x vs y,-0.5,0.5\n",
        ],
    )

    with pytest.raises(ValueError, match="more than 7 fields"):
        load_expression_data(csv_path)


def test_all_rows_wider_than_header_raise(tmp_path):
    csv_path = tmp_path / "genes.csv"
    csv_path.write_text(
        HEADER
        + STALE_ROW.replace("\n", ",extra\n")
        + "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001,EXTRA\n"
    )

    with pytest.raises(ValueError, match="8 fields"):
        load_expression_data(csv_path)


def test_short_rows_raise(tmp_path):
    csv_path = write_csv(
        tmp_path / "genes.csv",
        [
            "ENSG0001,A,Homo sapiens,E-1,x vs y,1.5,0.001\n",
            "ENSG0002,B\n",
        ],
    )

    with pytest.raises(ValueError, match="fewer than 7 fields"):
        load_expression_data(csv_path)


def test_header_and_stale_row_only(tmp_path):
    df = load_expression_data(write_csv(tmp_path / "genes.csv", []))

    assert df.empty
    assert list(df.columns) == list(EXPRESSION_COLUMNS)
