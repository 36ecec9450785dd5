import logging
from typing import Optional, Sequence

import pandas as pd
from rich import traceback
from rpy2.rinterface_lib.callbacks import logger as rpy2_logger
from shiny import run_app

from components.functional_analysis.orgdb import OrgDB
from components.plots import PlotRenderer
from dashboard.app import create_app, load_dataset_or_exit, selection_label
from dashboard.config import DashboardSettings, parse_args
from data.utils import filter_by_symbol


def setup_logging(level: str) -> None:
    _ = traceback.install()
    rpy2_logger.setLevel(logging.ERROR)
    logging.basicConfig(force=True)
    logging.getLogger().setLevel(level)


def build_renderer(settings: DashboardSettings) -> PlotRenderer:
    return PlotRenderer(
        org_db=OrgDB(species=settings.species, package=settings.org_db_package),
        key_type=settings.key_type,
        ont=settings.ont,
        pvalue_cutoff=settings.pvalue_cutoff,
        qvalue_cutoff=settings.qvalue_cutoff,
        volcano_p_cutoff=settings.volcano_p_cutoff,
        volcano_fc_cutoff=settings.volcano_fc_cutoff,
        show_category=settings.show_category,
        dotplot_font_size=settings.dotplot_font_size,
        width=settings.plot_width,
        height=settings.plot_height,
        dpi=settings.plot_dpi,
    )


def export_plots(
    settings: DashboardSettings, expr_df: pd.DataFrame, renderer: PlotRenderer
) -> None:
    """
    Save the plots of one selection to settings.export_dir.

    Writes `<name>_volcano.pdf`, `<name>_go_dotplot.pdf` and, when terms were
    found, `<name>_go_enrichment.csv`, name being the gene symbol or "all".
    """
    export_dir = settings.export_dir
    export_dir.mkdir(exist_ok=True, parents=True)

    subset_df = filter_by_symbol(expr_df, settings.gene)
    label = selection_label(settings.gene)
    name = settings.gene or "all"
    if subset_df.empty:
        logging.warning(f"[{label}] No records match the selection.")

    renderer.volcano(subset_df, export_dir.joinpath(f"{name}_volcano.pdf"), label)
    renderer.go_dotplot(
        subset_df,
        export_dir.joinpath(f"{name}_go_dotplot.pdf"),
        label,
        csv_path=export_dir.joinpath(f"{name}_go_enrichment.csv"),
    )
    logging.info(f"[{label}] Plots saved to {export_dir}.")


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = parse_args(argv)
    setup_logging(settings.log_level)

    expr_df = load_dataset_or_exit(settings)
    renderer = build_renderer(settings)

    if settings.export_dir is not None:
        export_plots(settings, expr_df, renderer)
        return

    run_app(create_app(expr_df, renderer), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
