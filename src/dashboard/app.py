"""Shiny dashboard of differential expression results.

The page holds one gene selector, a volcano plot, a GO dot plot and a block of
references. Each plot has a single render function that reads the current
selection (empty meaning all genes) and is re-run whenever it changes.
"""

import logging
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

import pandas as pd
from shiny import App, Inputs, Outputs, Session, reactive, render, ui

from dashboard.config import TITLE, DashboardSettings
from dashboard.references import format_references
from data.io import load_expression_data
from data.utils import filter_by_symbol, gene_symbols

ALL_GENES_LABEL: str = "All genes"
PLOT_NAMES: Dict[str, str] = {"volcano": "Volcano plot", "go_dotplot": "GO dot plot"}


def selection_label(symbol: Optional[str]) -> str:
    return symbol or ALL_GENES_LABEL.lower()


def selector_choices(symbols: Iterable[str]) -> Dict[str, str]:
    """Selector choices, the empty value standing for no selection."""
    choices = {"": ALL_GENES_LABEL}
    choices.update({s: s for s in symbols})
    return choices


def load_dataset_or_exit(settings: DashboardSettings) -> pd.DataFrame:
    """
    Load the expression table, exiting if it cannot be used.

    Raises:
        SystemExit: If the file is missing or malformed.
    """
    try:
        return load_expression_data(settings.data_path, sep=settings.sep)
    except (FileNotFoundError, ValueError) as e:
        logging.error(f"Could not load expression data: {e}")
        raise SystemExit(1) from e


def build_ui(symbols: Iterable[str]) -> ui.Tag:
    return ui.page_fluid(
        ui.panel_title(TITLE),
        ui.layout_sidebar(
            ui.sidebar(
                ui.input_selectize(
                    "gene_selector",
                    "Select Gene",
                    choices=selector_choices(symbols),
                    selected="",
                    multiple=False,
                    options={
                        "placeholder": "Select a gene...",
                        "allowEmptyOption": True,
                    },
                ),
            ),
            ui.output_image("volcano_plot", height="auto"),
            ui.output_image("dot_plot", height="auto"),
            ui.output_text_verbatim("references"),
        ),
    )


def temp_image_path() -> Path:
    with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as tmp_file:
        return Path(tmp_file.name)


def image_data(path: Path, alt: str) -> Dict[str, Any]:
    return {"src": str(path), "width": "100%", "alt": alt}


def render_selection(
    expr_df: pd.DataFrame, renderer: Any, symbol: Optional[str], kind: str
) -> Dict[str, Any]:
    """
    Render one plot of the records matching the selected symbol.

    Args:
        expr_df: Loaded expression table, only ever read.
        renderer: Object with the plotting method named by kind.
        symbol: Selected gene symbol, empty or None meaning all genes.
        kind: Either "volcano" or "go_dotplot".

    Returns:
        Dict[str, Any]: Image data pointing to a temporary PNG file, which the
            caller is responsible for deleting.
    """
    label = selection_label(symbol)
    logging.info(f"[{label}] Rendering {PLOT_NAMES[kind]}.")

    path = temp_image_path()
    try:
        getattr(renderer, kind)(filter_by_symbol(expr_df, symbol), path, label)
    except Exception:
        path.unlink(missing_ok=True)
        raise
    return image_data(path, f"{PLOT_NAMES[kind]}: {label}")


def make_server(
    expr_df: pd.DataFrame, renderer: Any
) -> Callable[[Inputs, Outputs, Session], None]:
    """
    Server function rendering both plots for the current selection.

    Args:
        expr_df: Loaded expression table, only ever read.
        renderer: Object with `volcano(df, path, label)` and
            `go_dotplot(df, path, label)` methods saving plots to path,
            e.g. components.plots.PlotRenderer.
    """

    def server(input: Inputs, output: Outputs, session: Session) -> None:
        @reactive.calc
        def selected_symbol() -> str:
            return input.gene_selector() or ""

        @render.image(delete_file=True)
        def volcano_plot():
            return render_selection(expr_df, renderer, selected_symbol(), "volcano")

        @render.image(delete_file=True)
        def dot_plot():
            return render_selection(
                expr_df, renderer, selected_symbol(), "go_dotplot"
            )

        @render.text
        def references():
            return format_references()

    return server


def create_app(expr_df: pd.DataFrame, renderer: Any) -> App:
    return App(build_ui(gene_symbols(expr_df)), make_server(expr_df, renderer))
