"""Drain record sequences into pandas DataFrames and Arrow tables."""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd
import pyarrow as pa

from .consumers import drain_all, take
from .interfaces import IteratorHandle

logger = logging.getLogger(__name__)


def _collect(handle: IteratorHandle, limit: Optional[int]) -> List[Dict[str, Any]]:
    if limit is None:
        return drain_all(handle)
    return take(handle, limit)


def to_frame(handle: IteratorHandle, limit: Optional[int] = None) -> pd.DataFrame:
    """
    Drain a sequence of record dicts into a DataFrame.

    Args:
        handle: Handle producing dicts with the same keys
        limit: Maximum number of records; required for unbounded sequences

    Returns:
        DataFrame with one row per record
    """
    records = _collect(handle, limit)
    df = pd.DataFrame.from_records(records)
    logger.debug(f"Created DataFrame with {len(df)} records")
    return df


def to_table(handle: IteratorHandle, limit: Optional[int] = None) -> pa.Table:
    """
    Drain a sequence of record dicts into a PyArrow table.

    Args:
        handle: Handle producing dicts with the same keys
        limit: Maximum number of records; required for unbounded sequences

    Returns:
        Table with one row per record
    """
    records = _collect(handle, limit)
    table = pa.Table.from_pylist(records)
    logger.debug(f"Created Arrow table with {table.num_rows} rows")
    return table
