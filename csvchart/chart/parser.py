"""Tabular parser for comma-delimited chart data.

Turns a sequence of text lines into a header row of labels and a list of
series rows. The split is deliberately naive: one fixed delimiter, no quoting,
no trimming and no check that rows and labels have the same width. Whatever
the author wrote reaches the client-side chart script unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from csvchart.config import CELL_DELIMITER, LINE_SEPARATOR
from csvchart.exceptions import EmptyTableError


@dataclass(frozen=True)
class ParsedTable:
    """Labels from the header line and one list of cells per data line."""

    labels: list[str]
    series: list[list[str]]


def split_content(text: str) -> list[str]:
    r"""Split raw file content into lines on ``\n``.

    An empty string yields a single empty line, so an empty file still has a
    (blank) header row.

    Examples
    --------
    >>> split_content("a,b\n1,2")
    ['a,b', '1,2']
    >>> split_content("")
    ['']
    """
    return text.split(LINE_SEPARATOR)


def split_row(line: str) -> list[str]:
    """Split one line into cells on the fixed delimiter."""
    return line.split(CELL_DELIMITER)


def parse_table(lines: Sequence[str]) -> ParsedTable:
    """Parse a header line plus data lines into a ``ParsedTable``.

    Parameters
    ----------
    lines : Sequence[str]
        Line 0 is the header; each further line is one series.

    Returns
    -------
    ParsedTable
        ``labels`` from line 0 and ``len(lines) - 1`` series rows, in order.

    Raises
    ------
    EmptyTableError
        If ``lines`` is empty.

    Examples
    --------
    >>> table = parse_table(["January,February", "28,48", "65"])
    >>> table.labels
    ['January', 'February']
    >>> table.series
    [['28', '48'], ['65']]
    """
    if not lines:
        raise EmptyTableError()
    labels = split_row(lines[0])
    series = [split_row(line) for line in lines[1:]]
    return ParsedTable(labels=labels, series=series)
