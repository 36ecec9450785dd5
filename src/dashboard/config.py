"""Dashboard settings and command line parsing."""

import argparse
from pathlib import Path
from typing import Literal, Optional, Sequence

from pydantic import Field, ValidationError
from pydantic.dataclasses import dataclass

DEFAULT_DATA_PATH: Path = Path("data/schizo_genes.csv")
TITLE: str = "Differential Gene Expression Analysis for Schizophrenia"


@dataclass
class DashboardSettings:
    """
    Settings of the dashboard and of the external plotting/enrichment calls.

    Args:
        data_path: Differential expression results file.
        sep: Column delimiter of data_path.
        species: Species name, used when the organism package is missing.
        org_db_package: Bioconductor organism annotation package.
        key_type: Type of the identifiers in the Gene column.
        ont: GO ontology used for enrichment.
        pvalue_cutoff: Enrichment p-value cutoff.
        qvalue_cutoff: Enrichment q-value cutoff.
        volcano_p_cutoff: Volcano plot significance threshold.
        volcano_fc_cutoff: Volcano plot absolute log2 fold-change threshold.
        show_category: Number of GO terms shown in the dot plot.
        dotplot_font_size: Base font size of the dot plot.
        plot_width: Plot width in inches.
        plot_height: Plot height in inches.
        plot_dpi: Plot resolution.
        host: Address the web server binds to.
        port: Port the web server listens on.
        log_level: Logging level name.
        export_dir: If set, plots are written here instead of serving the app.
        gene: Gene symbol used in export mode, None means all genes.
    """

    data_path: Path = DEFAULT_DATA_PATH
    sep: str = ","
    species: str = "Homo sapiens"
    org_db_package: Optional[str] = "org.Hs.eg.db"
    key_type: str = "ENSEMBL"
    ont: Literal["BP", "MF", "CC", "ALL"] = "MF"
    pvalue_cutoff: float = Field(default=0.2, gt=0, le=1)
    qvalue_cutoff: float = Field(default=0.2, gt=0, le=1)
    volcano_p_cutoff: float = Field(default=1e-4, gt=0, le=1)
    volcano_fc_cutoff: float = Field(default=1.0, ge=0)
    show_category: int = Field(default=15, gt=0)
    dotplot_font_size: int = Field(default=8, gt=0)
    plot_width: float = Field(default=10, gt=0)
    plot_height: float = Field(default=7, gt=0)
    plot_dpi: int = Field(default=100, gt=0)
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=0, le=65535)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    export_dir: Optional[Path] = None
    gene: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument(
        "--data-path",
        type=str,
        help="Differential expression results file",
        nargs="?",
        default=str(DEFAULT_DATA_PATH),
    )
    parser.add_argument(
        "--sep",
        type=str,
        help="Column delimiter of the results file",
        nargs="?",
        default=",",
    )
    parser.add_argument(
        "--species",
        type=str,
        help="Species name, used to query AnnotationHub",
        nargs="?",
        default="Homo sapiens",
    )
    parser.add_argument(
        "--org-db-package",
        type=str,
        help="Organism annotation package",
        nargs="?",
        default="org.Hs.eg.db",
    )
    parser.add_argument(
        "--ont",
        type=str,
        help="GO ontology used for enrichment",
        choices=("BP", "MF", "CC", "ALL"),
        default="MF",
    )
    parser.add_argument(
        "--show-category",
        type=int,
        help="Number of GO terms shown in the dot plot",
        nargs="?",
        default=15,
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Address the web server binds to",
        nargs="?",
        default="127.0.0.1",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port the web server listens on",
        nargs="?",
        default=8000,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
    )
    parser.add_argument(
        "--export-dir",
        type=str,
        help="Write plots and enrichment table to this directory and exit",
        default=None,
    )
    parser.add_argument(
        "--gene",
        type=str,
        help="Gene symbol to export (all genes if omitted)",
        default=None,
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> DashboardSettings:
    """
    Build dashboard settings from command line arguments.

    Args:
        argv: Arguments to parse, sys.argv[1:] if None.

    Returns:
        DashboardSettings: Validated settings.

    Raises:
        SystemExit: If arguments are unknown or values are out of range.
    """
    parser = build_parser()
    user_args = vars(parser.parse_args(argv))
    try:
        return DashboardSettings(
            data_path=Path(user_args["data_path"]),
            sep=user_args["sep"],
            species=user_args["species"],
            org_db_package=user_args["org_db_package"] or None,
            ont=user_args["ont"],
            show_category=user_args["show_category"],
            host=user_args["host"],
            port=user_args["port"],
            log_level=user_args["log_level"],
            export_dir=(
                Path(user_args["export_dir"]) if user_args["export_dir"] else None
            ),
            gene=user_args["gene"] or None,
        )
    except ValidationError as e:
        parser.error(str(e))
