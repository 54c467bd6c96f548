"""Apply any registered score to the rows of a DataFrame."""
from __future__ import annotations

import inspect
import logging
from typing import Dict, Optional

import pandas as pd

from .registry import get_score

logger = logging.getLogger(__name__)


def compute_from_dataframe(
    df: pd.DataFrame,
    name: str,
    columns: Optional[Dict[str, str]] = None,
    output_column: Optional[str] = None,
    **options,
) -> pd.DataFrame:
    """
    Compute a risk score for every row of a DataFrame.

    Score inputs are taken from the column of the same name unless
    ``columns`` maps them elsewhere. Inputs without a column are passed as
    missing, so the score's own validation decides whether that is an error
    or a zero contribution.

    Args:
        df: Input DataFrame, one patient per row
        name: Registered score name (see ``list_scores``)
        columns: Score parameter -> column name overrides
        output_column: Name of the result column. Scores returning two
            columns use it as a prefix. Defaults to ``"<name>_risk"``
        **options: Selector arguments passed unchanged, e.g. ``risk="high"``
            or ``mmol=False``

    Returns:
        Copy of ``df`` with the result column(s) added

    Example:
        >>> compute_from_dataframe(df, "score2", risk="moderate")
    """
    scorer = get_score(name)
    columns = dict(columns or {})
    parameters = inspect.signature(scorer.compute_batch).parameters

    inputs = {}
    for param, spec in parameters.items():
        if param in options:
            continue
        column = columns.get(param, param)
        if column in df.columns:
            inputs[param] = df[column].to_numpy()
        elif spec.default is inspect.Parameter.empty:
            inputs[param] = None

    logger.debug("Scoring %d rows with %s (columns: %s)", len(df), scorer.name, sorted(inputs))
    result = scorer.compute_batch(**inputs, **options)

    result_df = df.copy()
    if isinstance(result, pd.DataFrame):
        prefix = output_column or scorer.name
        for column in result.columns:
            result_df[f"{prefix}_{column}"] = result[column].to_numpy()
    else:
        result_df[output_column or f"{scorer.name}_risk"] = result
    return result_df
