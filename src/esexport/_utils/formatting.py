"""Field coercion and DataFrame conversion utilities."""

import json
from typing import Any, Iterable, Sequence

import pandas as pd

from esexport.response import Hit

NIL = "<nil>"


def format_value(value: Any) -> str:
    """
    Render one source field value as text.
    
    Missing, null and empty values all render as "<nil>" so every
    column stays visible in tab-separated output. Floats are rounded
    to whole numbers, since JSON numbers decode as floats and most
    exported numeric fields are ids and counters.
    
    Example:
        format_value(1704067200.0)  # "1704067200"
        format_value(None)          # "<nil>"
    """
    if value is None:
        return NIL
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = f"{value:.0f}"
    elif isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False)
    else:
        text = str(value)
    return text or NIL


def records_to_dataframe(
    hits: Iterable[Hit],
    columns: Sequence[str],
) -> pd.DataFrame:
    """
    Convert a batch of hits to a DataFrame of formatted columns.
    
    Args:
        hits: Batch as handed to a consumer
        columns: Source fields to extract, in output order
        
    Returns:
        DataFrame with one string column per requested field
    """
    rows = [
        [format_value(hit.source.get(column)) for column in columns]
        for hit in hits
    ]
    return pd.DataFrame(rows, columns=list(columns), dtype=object)
