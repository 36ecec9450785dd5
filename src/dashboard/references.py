from typing import Iterable

REFERENCES: Iterable[str] = (
    "Hu, J., Xu, J., Pang, L., Zhao, H., Li, F., Deng, Y., Liu, L., Lan, Y., "
    "Zhang, X., Zhao, T., Xu, C., Xu, C., Xiao, Y., & Li, X. (2016). "
    "Systematically characterizing dysfunctional long intergenic non-coding RNAs "
    "in multiple brain regions of major psychosis. Oncotarget, 7(44), 71087-71098. "
    "[DOI: 10.18632/oncotarget.12122]",
    "Blighe, K., Rana, S., Turkes, E., Ostendorf, B., Grioni, A., Lewis, M. (2021). "
    "EnhancedVolcano (Version 1.12.0). Bioconductor. "
    "[DOI: 10.18129/B9.bioc.EnhancedVolcano]",
    "Yu, G., Wang, L., Hu, E., Luo, X., Chen, M., Dall'Olio, G., Wei, W., Gao, C. "
    "(2021). clusterProfiler (Version 3.20.1). Bioconductor. "
    "[DOI: 10.18129/B9.bioc.clusterProfiler]",
)


def format_references(references: Iterable[str] = REFERENCES) -> str:
    """Numbered references block, one citation per line."""
    lines = ["References:"]
    lines.extend(f"{i}. {ref}" for i, ref in enumerate(references, start=1))
    return "\n".join(lines)
