from pathlib import Path

import pandas as pd
import pytest
from dashboard.app import (
    ALL_GENES_LABEL,
    build_ui,
    create_app,
    image_data,
    load_dataset_or_exit,
    render_selection,
    selection_label,
    selector_choices,
    temp_image_path,
)
from dashboard.config import TITLE, DashboardSettings
from data.io import SYMBOL_COL, load_expression_data
from shiny import App

TEST_DATA_DIR = Path(__file__).parent / "data"


def test_selection_label():
    assert selection_label("DRD2") == "DRD2"
    assert selection_label("") == "all genes"
    assert selection_label(None) == "all genes"


def test_selector_choices_start_with_all_genes():
    choices = selector_choices(["DRD2", "BDNF"])

    assert list(choices) == ["", "DRD2", "BDNF"]
    assert choices[""] == ALL_GENES_LABEL
    assert choices["BDNF"] == "BDNF"


def test_build_ui_has_selector_and_outputs():
    html = str(build_ui(["DRD2", "BDNF"]))

    assert TITLE in html
    assert "gene_selector" in html
    assert "Select Gene" in html
    assert "volcano_plot" in html
    assert "dot_plot" in html
    assert "references" in html


def test_create_app():
    settings = DashboardSettings(data_path=TEST_DATA_DIR / "schizo_genes_sample.csv")
    expr_df = load_dataset_or_exit(settings)

    app = create_app(expr_df, RecordingRenderer())

    assert isinstance(app, App)


def test_missing_dataset_exits(tmp_path):
    settings = DashboardSettings(data_path=tmp_path / "missing.csv")

    with pytest.raises(SystemExit) as exc_info:
        load_dataset_or_exit(settings)

    assert exc_info.value.code == 1


def test_malformed_dataset_exits(tmp_path):
    csv_path = tmp_path / "genes.csv"
    csv_path.write_text("Gene,Symbol\nENSG0001,A\n")

    with pytest.raises(SystemExit):
        load_dataset_or_exit(DashboardSettings(data_path=csv_path))


def test_temp_image_path_is_png():
    path = temp_image_path()
    try:
        assert path.suffix == ".png"
        assert path.exists()
        assert image_data(path, "plot")["src"] == str(path)
    finally:
        path.unlink()


class RecordingRenderer:
    """Saves empty files and remembers the records it was asked to draw."""

    def __init__(self):
        self.calls = []

    def volcano(self, expr_df, save_path, label):
        self.calls.append(("volcano", expr_df, label))
        save_path.write_bytes(b"")

    def go_dotplot(self, expr_df, save_path, label, csv_path=None):
        self.calls.append(("go_dotplot", expr_df, label))
        save_path.write_bytes(b"")


class FailingRenderer:
    def volcano(self, expr_df, save_path, label):
        raise RuntimeError("renderer crashed")


@pytest.fixture
def expr_df():
    return load_expression_data(TEST_DATA_DIR / "schizo_genes_sample.csv")


@pytest.mark.parametrize("kind", ["volcano", "go_dotplot"])
def test_empty_selection_renders_full_table(expr_df, kind):
    renderer = RecordingRenderer()

    img = render_selection(expr_df, renderer, "", kind)
    Path(img["src"]).unlink()

    [(called, drawn_df, label)] = renderer.calls
    assert called == kind
    assert label == "all genes"
    pd.testing.assert_frame_equal(drawn_df, expr_df)
    assert img["alt"].endswith(": all genes")


def test_selected_symbol_renders_matching_records(expr_df):
    renderer = RecordingRenderer()

    img = render_selection(expr_df, renderer, "SLC17A6", "volcano")
    Path(img["src"]).unlink()

    [(_, drawn_df, label)] = renderer.calls
    assert label == "SLC17A6"
    assert drawn_df[SYMBOL_COL].tolist() == ["SLC17A6"]


def test_duplicated_symbol_renders_every_record(expr_df):
    renderer = RecordingRenderer()

    img = render_selection(expr_df, renderer, "DRD2", "go_dotplot")
    Path(img["src"]).unlink()

    [(_, drawn_df, _)] = renderer.calls
    assert drawn_df[SYMBOL_COL].tolist() == ["DRD2", "DRD2"]


def test_unknown_symbol_renders_empty_table(expr_df):
    renderer = RecordingRenderer()

    img = render_selection(expr_df, renderer, "NOT_A_GENE", "volcano")

    [(_, drawn_df, _)] = renderer.calls
    assert drawn_df.empty
    assert list(drawn_df.columns) == list(expr_df.columns)
    assert Path(img["src"]).exists()
    Path(img["src"]).unlink()


def test_failed_render_removes_temp_file(expr_df, monkeypatch, tmp_path):
    image_path = tmp_path / "plot.png"

    def touched_path():
        image_path.touch()
        return image_path

    monkeypatch.setattr("dashboard.app.temp_image_path", touched_path)

    with pytest.raises(RuntimeError, match="renderer crashed"):
        render_selection(expr_df, FailingRenderer(), "", "volcano")

    assert not image_path.exists()
