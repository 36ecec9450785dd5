"""
Wrappers for R package enrichplot

All functions have pythonic inputs and outputs.

Note that the arguments in python use "_" instead of ".".
rpy2 does this transformation for us.

Example:
R --> data.category
Python --> data_category
"""

from pathlib import Path
from typing import Any

import rpy2.robjects as ro
from rpy2.robjects.conversion import localconverter
from rpy2.robjects.packages import importr

r_enrichplot = importr("enrichplot")
r_ggplot2 = importr("ggplot2")


def dotplot(
    enrich_result: Any,
    save_path: Path,
    width: int = 10,
    height: int = 10,
    dpi: int = 100,
    **kwargs: Any,
) -> None:
    """Create a dotplot visualization of enrichment results.

    This function creates a dotplot from enrichment results (ORA or GSEA),
    showing enriched terms with their statistical significance and gene counts.

    Args:
        enrich_result: An enrichResult or gseaResult object from clusterProfiler or similar tools.
        save_path: Path where the plot will be saved.
        width: Width of the saved figure in inches.
        height: Height of the saved figure in inches.
        dpi: Resolution of raster outputs.
        **kwargs: Additional arguments to pass to dotplot.
            Common parameters include:
            - showCategory: Number of categories to show (default: 10).
            - font.size: Base font size.
            - title: Plot title.

    Returns:
        None: The function saves the plot to the specified path but doesn't return anything.

    References:
        https://rdrr.io/bioc/enrichplot/man/dotplot.html
    """
    with localconverter(ro.default_converter):
        plot = r_enrichplot.dotplot(enrich_result, **kwargs)
        r_ggplot2.ggsave(str(save_path), plot, width=width, height=height, dpi=dpi)
