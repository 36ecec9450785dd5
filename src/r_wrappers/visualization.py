"""
Wrappers for R visualization packages.

This module provides Python wrappers for the R packages used to draw
differential expression results. All functions have pythonic inputs and
outputs and save the generated plot to a file.

Note that the arguments in python use "_" instead of ".".
rpy2 does this transformation automatically.

Example:
    R --> data.category
    Python --> data_category

Attributes:
    r_enhanced_volcano: The imported EnhancedVolcano R package.
    r_ggplot2: The imported ggplot2 R package.
    r_empty_plot: R function building a blank ggplot with a title.
"""

from pathlib import Path
from typing import Any

from rpy2 import robjects as ro
from rpy2.robjects.packages import importr

r_enhanced_volcano = importr("EnhancedVolcano")
r_ggplot2 = importr("ggplot2")
r_empty_plot = ro.r(
    "function(title){"
    "ggplot2::ggplot() + ggplot2::theme_void() + ggplot2::ggtitle(title)"
    "}"
)


def volcano_plot(
    data: ro.DataFrame,
    lab: Any,
    x: str,
    y: str,
    save_path: Path,
    width: int = 10,
    height: int = 10,
    dpi: int = 100,
    **kwargs,
) -> None:
    """
    Creates an enhanced volcano plot of differential expression results.

    A volcano plot displays statistical significance versus magnitude of change.
    The EnhancedVolcano package provides publication-ready volcano plots with
    customizable features.

    Args:
        data: A data frame of test statistics. Requires at least:
            - A column for log2 fold changes
            - A column for nominal or adjusted p-values
        lab: A character vector with one label per row of data.
        x: Column name in data containing log2 fold changes.
        y: Column name in data containing nominal or adjusted p-values.
        save_path: Path where to save the generated plot.
        width: Width of saved figure in inches.
        height: Height of saved figure in inches.
        dpi: Resolution of raster outputs.
        **kwargs: Additional arguments to pass to EnhancedVolcano function.
            Common parameters include:
            - pCutoff: Significance threshold on y.
            - FCcutoff: Absolute fold-change threshold on x.
            - title: Plot title.

   References:
        - http://bioconductor.org/packages/release/bioc/vignettes/EnhancedVolcano/inst/doc/EnhancedVolcano.html
        - https://rdrr.io/bioc/EnhancedVolcano/man/EnhancedVolcano.html
    """
    plot = r_enhanced_volcano.EnhancedVolcano(
        toptable=data, lab=lab, x=x, y=y, **kwargs
    )
    r_ggplot2.ggsave(str(save_path), plot, width=width, height=height, dpi=dpi)


def empty_plot(
    title: str,
    save_path: Path,
    width: int = 10,
    height: int = 10,
    dpi: int = 100,
) -> None:
    """
    Saves a blank plot carrying only a title.

    Used in place of a real plot when there is nothing to draw, e.g. no records
    match the selection or no enriched terms were found.

    Args:
        title: Text shown at the top of the blank plot.
        save_path: Path where to save the generated plot.
        width: Width of saved figure in inches.
        height: Height of saved figure in inches.
        dpi: Resolution of raster outputs.
    """
    r_ggplot2.ggsave(
        str(save_path), r_empty_plot(title), width=width, height=height, dpi=dpi
    )
