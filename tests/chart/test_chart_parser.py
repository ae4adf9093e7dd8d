"""Unit tests for the tabular parser."""

import pytest

from csvchart.chart import parser
from csvchart.exceptions import EmptyTableError


def test_parse_table_splits_header_and_rows() -> None:
    """Line 0 becomes the labels; each further line becomes one series."""
    table = parser.parse_table(["January,February,March", "28,48,40", "65,59,80"])
    assert table.labels == ["January", "February", "March"]
    assert table.series == [["28", "48", "40"], ["65", "59", "80"]]


def test_parse_table_header_only() -> None:
    table = parser.parse_table(["a,b"])
    assert table.labels == ["a", "b"]
    assert table.series == []


def test_parse_table_keeps_ragged_rows_and_whitespace() -> None:
    """Rows of a different width and untrimmed cells pass through unchanged."""
    table = parser.parse_table(["a,b,c", "1", " 2 , x ,3,4"])
    assert table.series == [["1"], [" 2 ", " x ", "3", "4"]]
    assert len(table.series) == 2


def test_parse_table_empty_raises() -> None:
    with pytest.raises(EmptyTableError) as excinfo:
        parser.parse_table([])
    assert excinfo.value.code == "EMPTY_TABLE"


def test_parse_table_accepts_tuple() -> None:
    table = parser.parse_table(("x,y", "1,2"))
    assert table.series == [["1", "2"]]


def test_split_content() -> None:
    assert parser.split_content("a,b\n1,2") == ["a,b", "1,2"]
    assert parser.split_content("") == [""]
    assert parser.split_content("a\n") == ["a", ""]
