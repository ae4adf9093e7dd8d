"""Chart core: tabular parsing, chart options and markup generation.

This package holds the host-independent part of the extension. Nothing here
knows about registries, readers or Markdown; the handlers in
``csvchart.extensions`` feed it lines and attributes and wrap what it returns.

- ``parser``: splits lines into labels and series.
- ``options``: ``ChartConfig`` built from an attribute bag.
- ``markup``: the chart fragment and the two placeholder fragments.
"""

from .markup import (
    empty_chart_html,
    render_chart,
    resolve_height,
    resolve_type,
    resolve_width,
    unreadable_file_html,
)
from .options import ChartConfig
from .parser import ParsedTable, parse_table, split_content, split_row

__all__ = [
    "ChartConfig",
    "ParsedTable",
    "empty_chart_html",
    "parse_table",
    "render_chart",
    "resolve_height",
    "resolve_type",
    "resolve_width",
    "split_content",
    "split_row",
    "unreadable_file_html",
]
