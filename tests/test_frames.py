"""Tests for frames module."""

import pandas as pd
import pyarrow as pa
import pytest

from lazyseq.catalog import product_data
from lazyseq.sequence import MisuseError, iterator, to_frame, to_table


def test_to_frame_from_finite_records():
    """Test draining record dicts into a DataFrame."""
    records = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
    df = to_frame(iterator(records))

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 2
    assert list(df.columns) == ["id", "name"]
    assert df["name"].tolist() == ["Alice", "Bob"]


def test_to_frame_with_limit_on_infinite_source():
    """Test that a limit makes infinite record sequences safe to tabulate."""
    df = to_frame(product_data(7), limit=4)

    assert len(df) == 4
    assert list(df.columns) == ["id", "name", "price", "category", "timestamp"]
    assert df["id"].tolist() == ["PROD_1", "PROD_2", "PROD_3", "PROD_4"]


def test_to_frame_without_limit_refuses_unbounded():
    """Test that an unlimited drain of an infinite source is misuse."""
    with pytest.raises(MisuseError):
        to_frame(product_data(7))


def test_to_frame_empty():
    """Test that an empty sequence gives an empty DataFrame."""
    df = to_frame(iterator([]))
    assert df.empty


def test_to_table_from_records():
    """Test draining record dicts into an Arrow table."""
    table = to_table(iterator([{"a": 1}, {"a": 2}, {"a": 3}]), limit=2)

    assert isinstance(table, pa.Table)
    assert table.num_rows == 2
    assert table.column_names == ["a"]
    assert table.column("a").to_pylist() == [1, 2]
