from typing import Any

import pandas as pd
import rpy2.robjects as ro
from rpy2.robjects import pandas2ri
from rpy2.robjects.conversion import localconverter

r_is_null = ro.r("is.null")


def rpy2_df_to_pd_df(rpy2_df: Any) -> pd.DataFrame:
    """
    Converts a rpy2 DataFrame object to a pandas Dataframe object.

    (docs in https://rpy2.github.io/doc/latest/html/pandas.html)
    """
    # 0. Ensure rpy2 object is (or is convertible to) an R dataframe
    with localconverter(ro.default_converter):
        rpy2_df = ro.r("as.data.frame")(rpy2_df)

    with localconverter(ro.default_converter + pandas2ri.converter):
        pd_from_r_df = ro.conversion.rpy2py(rpy2_df)

    return pd_from_r_df


def pd_df_to_rpy2_df(pd_df: pd.DataFrame) -> ro.DataFrame:
    """
    Converts a pandas DataFrame object to a rpy2 Dataframe object.

        (docs in https://rpy2.github.io/doc/latest/html/pandas.html)
    """

    with localconverter(ro.default_converter + pandas2ri.converter):
        r_from_pd_df = ro.conversion.py2rpy(pd_df)
    return r_from_pd_df


def is_null(obj: Any) -> bool:
    """
    Whether a given R object is NULL.
    """
    with localconverter(ro.default_converter):
        return bool(r_is_null(obj)[0])

