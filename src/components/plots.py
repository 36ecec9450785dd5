"""Rendering of expression (sub)tables into dashboard plots.

Both plots are delegated to R collaborators: EnhancedVolcano for the volcano
plot and clusterProfiler/enrichplot for the GO dot plot. Empty inputs, empty
enrichment results and R errors never propagate: a blank plot with an
explanatory title is saved instead.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from pydantic.dataclasses import dataclass
from rpy2 import robjects as ro
from rpy2.rinterface_lib.embedded import RRuntimeError

from components.functional_analysis.go import GOora
from components.functional_analysis.orgdb import OrgDB
from data.io import GENE_COL, LFC_COL, PADJ_COL, SYMBOL_COL
from r_wrappers.utils import pd_df_to_rpy2_df
from r_wrappers.visualization import empty_plot, volcano_plot


class Config:
    """Configuration class for Pydantic dataclasses.

    This class enables the use of arbitrary types in dataclasses
    decorated with @dataclass(config=Config).
    """

    arbitrary_types_allowed = True


@dataclass(config=Config)
class PlotRenderer:
    """
    Saves the volcano and GO dot plots of an expression table to files.

    Args:
        org_db: Organism database used for GO enrichment.
        key_type: Type of the identifiers in the Gene column.
        ont: GO ontology used for enrichment.
        pvalue_cutoff: Enrichment p-value cutoff.
        qvalue_cutoff: Enrichment q-value cutoff.
        volcano_p_cutoff: Volcano plot significance threshold.
        volcano_fc_cutoff: Volcano plot absolute log2 fold-change threshold.
        show_category: Number of GO terms shown in the dot plot.
        dotplot_font_size: Base font size of the dot plot.
        width: Plot width in inches.
        height: Plot height in inches.
        dpi: Plot resolution.
    """

    org_db: OrgDB
    key_type: str = "ENSEMBL"
    ont: str = "MF"
    pvalue_cutoff: float = 0.2
    qvalue_cutoff: float = 0.2
    volcano_p_cutoff: float = 1e-4
    volcano_fc_cutoff: float = 1.0
    show_category: int = 15
    dotplot_font_size: int = 8
    width: float = 10
    height: float = 7
    dpi: int = 100

    @property
    def plot_kwargs(self) -> Dict[str, float]:
        return dict(width=self.width, height=self.height, dpi=self.dpi)

    def empty(self, title: str, save_path: Path) -> None:
        empty_plot(title, save_path, **self.plot_kwargs)

    def volcano(self, expr_df: pd.DataFrame, save_path: Path, label: str) -> None:
        """
        Volcano plot of log2 fold-change versus adjusted p-value.

        Args:
            expr_df: Expression records to draw, may be empty.
            save_path: Path of the image file, format taken from its suffix.
            label: Description of the selection, shown in the title.
        """
        title = f"Volcano plot: {label}"
        if expr_df.empty:
            self.empty(f"{title} (no records)", save_path)
            return

        toptable = (
            expr_df[[SYMBOL_COL, LFC_COL, PADJ_COL]]
            .astype({SYMBOL_COL: object})
            .reset_index(drop=True)
        )
        try:
            volcano_plot(
                pd_df_to_rpy2_df(toptable),
                lab=ro.StrVector(expr_df[SYMBOL_COL].tolist()),
                x=LFC_COL,
                y=PADJ_COL,
                save_path=save_path,
                pCutoff=self.volcano_p_cutoff,
                FCcutoff=self.volcano_fc_cutoff,
                title=title,
                **self.plot_kwargs,
            )
        except RRuntimeError as e:
            logging.warning(f"[{label}] Error plotting volcano plot: \n\t{e}")
            self.empty(f"{title} (could not be drawn)", save_path)

    def enrichment(self, expr_df: pd.DataFrame, label: str) -> Optional[GOora]:
        """
        GO over-representation analysis of the genes in an expression table.

        Returns:
            GOora: The analysis, or None if R failed to compute it.
        """
        try:
            return GOora(
                org_db=self.org_db,
                name=label,
                genes=expr_df[GENE_COL].tolist(),
                func_kwargs=dict(
                    keyType=self.key_type,
                    ont=self.ont,
                    pvalueCutoff=self.pvalue_cutoff,
                    qvalueCutoff=self.qvalue_cutoff,
                ),
            )
        except RRuntimeError as e:
            logging.warning(f"[{label}] Error computing GO enrichment: \n\t{e}")
            return None

    def go_dotplot(
        self,
        expr_df: pd.DataFrame,
        save_path: Path,
        label: str,
        csv_path: Optional[Path] = None,
    ) -> None:
        """
        Dot plot of the top enriched GO terms.

        Args:
            expr_df: Expression records whose genes are tested, may be empty.
            save_path: Path of the image file, format taken from its suffix.
            label: Description of the selection, shown in the title.
            csv_path: If given, the enrichment table is also saved there.
        """
        title = f"GO {self.ont} enrichment: {label}"
        enrichment = self.enrichment(expr_df, label)

        if enrichment is not None and csv_path is not None:
            enrichment.save_csv(csv_path)

        drawn = enrichment is not None and enrichment.dotplot(
            save_path,
            showCategory=self.show_category,
            title=title,
            **{"font.size": self.dotplot_font_size},
            **self.plot_kwargs,
        )
        if not drawn:
            self.empty(f"{title} (no enriched terms)", save_path)
