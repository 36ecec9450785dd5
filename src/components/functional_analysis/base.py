import logging
from pathlib import Path
from typing import Any

from pydantic.dataclasses import dataclass
from rpy2.rinterface_lib.embedded import RRuntimeError

from components.functional_analysis.orgdb import OrgDB
from r_wrappers.enrich_plot import dotplot
from r_wrappers.utils import is_null, rpy2_df_to_pd_df


class Config:
    """Configuration class for Pydantic dataclasses.

    This class enables the use of arbitrary types in dataclasses
    decorated with @dataclass(config=Config).
    """

    arbitrary_types_allowed = True


@dataclass(config=Config)
class FunctionalAnalysisBase:
    """
    Base class for functional analyses of gene lists.

    Child classes compute `func_result` before calling this class'
    __post_init__, which turns it into a DataFrame. A result that R reports
    as NULL (no gene could be mapped) or that has no rows is considered empty,
    which is not an error: saving and plotting are skipped with a warning.

    Args:
        org_db: Organism database object containing annotation data.
        name: Label used in log messages.

    Attributes:
        func_result: Raw functional analysis result from R, None if empty.
        func_result_df: DataFrame representation of the functional analysis result.
    """

    org_db: OrgDB
    name: str = "functional_analysis"

    def __post_init__(self) -> None:
        """
        Post-initialization processing.

        Converts functional analysis results to a DataFrame.
        Should be called by child classes after their initialization.
        """
        self.func_result_df = None
        if self.func_result is None or is_null(self.func_result):
            self.func_result = None
            return

        try:
            self.func_result_df = rpy2_df_to_pd_df(self.func_result)
        except RRuntimeError as e:
            logging.warning(e)

    @property
    def is_empty(self) -> bool:
        return self.func_result_df is None or self.func_result_df.empty

    def save_csv(self, save_path: Path) -> bool:
        """
        Save functional analysis result as CSV file.

        Args:
            save_path: Path of the CSV file.

        Returns:
            bool: Whether the file was written.
        """
        if not self.is_empty:
            save_path.parent.mkdir(exist_ok=True, parents=True)
            self.func_result_df.to_csv(save_path)
            return True

        logging.warning(
            f"[{self.name}] Could not save CSV. Functional result is None or empty."
        )
        return False

    def dotplot(self, save_path: Path, **kwargs: Any) -> bool:
        """
        Create a dot plot visualizing enriched terms.

        Similar to bar plot with the capability to encode another score as dot size.

        Args:
            save_path: Path where the plot will be saved.
            **kwargs: Additional arguments passed to the R dotplot function.
                Common options include:
                - showCategory: Number of categories to show (default: 10)
                - x: Value for x-axis, either "Count" or "GeneRatio"

        Returns:
            bool: Whether the plot was drawn.
        """
        if not self.is_empty:
            try:
                dotplot(self.func_result, save_path, **kwargs)
                return True
            except RRuntimeError as e:
                logging.warning(f"[{self.name}] Error plotting dotplot: \n\t{e}")
        else:
            logging.warning(
                f"[{self.name}] Could not plot dotplot. "
                "Functional result is None or empty."
            )
        return False
