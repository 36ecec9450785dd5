"""
Wrappers for R package clusterProfiler

All functions have pythonic inputs and outputs.

Note that the arguments in python use "_" instead of ".".
rpy2 does this transformation for us.

Example:
R --> data.category
Python --> data_category
"""

from typing import Any

from rpy2 import robjects as ro
from rpy2.robjects.packages import importr

from components.functional_analysis.orgdb import OrgDB

r_cluster_profiler = importr("clusterProfiler")


def enrich_go(gene_names: ro.StrVector, org_db: OrgDB, **kwargs: Any) -> Any:
    """Perform Gene Ontology enrichment analysis on a gene set.

    This function performs over-representation analysis to identify enriched
    GO terms for a given set of genes, with FDR control for multiple testing.

    Args:
        gene_names: A vector of gene identifiers.
        org_db: An organism database object containing GO annotations.
        **kwargs: Additional arguments to pass to the enrichGO function.
            Common parameters include:
            - ont: GO ontology, one of "BP" (Biological Process), "MF" (Molecular Function),
              or "CC" (Cellular Component), or "ALL" for all ontologies.
            - pvalueCutoff: P-value cutoff (default: 0.05).
            - pAdjustMethod: Method for multiple testing correction (default: "BH").
            - keyType: Type of gene identifier provided.
            - qvalueCutoff: q-value cutoff (default: 0.2).

    Returns:
        Any: An enrichResult object containing enriched GO terms, or R NULL
            when none of the genes could be mapped to GO annotations.

    References:
        https://rdrr.io/bioc/clusterProfiler/man/enrichGO.html
    """
    return r_cluster_profiler.enrichGO(gene=gene_names, OrgDb=org_db.db, **kwargs)
