import logging
from typing import Any, Dict, List

import rpy2.robjects as ro
from pydantic import Field
from pydantic.dataclasses import dataclass

from components.functional_analysis.base import FunctionalAnalysisBase
from r_wrappers.cluster_profiler import enrich_go


class Config:
    """Configuration class for Pydantic dataclasses.

    This class enables the use of arbitrary types in dataclasses
    decorated with @dataclass(config=Config).
    """

    arbitrary_types_allowed = True


@dataclass(config=Config)
class GOora(FunctionalAnalysisBase):
    """
    Over-representation analysis for Gene Ontology terms.

    This class implements Over-Representation Analysis (ORA) for Gene Ontology (GO) terms.
    It identifies enriched GO terms in a set of genes of interest against the
    organism's annotated genes.

    Args:
        org_db: Organism database object for annotation.
        name: Label used in log messages.
        genes: Identifiers of the genes of interest. Duplicates are ignored.
        func_kwargs: Additional arguments for the GO enrichment function.
            Common options include:
            - ont: GO ontology to analyze ("BP", "MF", "CC", or "ALL").
            - keyType: Type of the identifiers in genes, e.g. "ENSEMBL".
            - pvalueCutoff: P-value cutoff for significance.
            - qvalueCutoff: Q-value cutoff for significance.

    Attributes:
        func_result: The enrichment analysis result from clusterProfiler.
        func_result_df: DataFrame representation of the enrichment result.
    """

    genes: List[str] = Field(default_factory=list)
    func_kwargs: Dict[str, Any] = Field(default_factory=dict)

    def __post_init__(self) -> None:
        """
        Initialize the Gene Ontology over-representation analysis.

        Calls the enrichment function and then calls the parent's __post_init__
        to process the results.
        """
        # 1. Get functional result
        genes = list(dict.fromkeys(g for g in self.genes if g))
        if genes:
            self.func_result = enrich_go(
                ro.StrVector(genes), org_db=self.org_db, **self.func_kwargs
            )
        else:
            logging.warning(f"[{self.name}] No genes given, skipping enrichment.")
            self.func_result = None
        super().__post_init__()
