"""Chart markup generator.

Builds the HTML fragment consumed by the client-side chart script. The
script locates every value by attribute name, so the attribute set and the
order in which the attributes appear are fixed here, in ``render_chart``,
and nowhere else.

Output shape
------------
``<div class="openblock">`` wraps an optional ``<div class="title">`` and a
``<div class="ct-chart">`` carrying, in order: ``data-chart-height``,
``data-chart-width``, ``data-chart-type``, ``data-chart-colors``,
``data-chart-labels`` and one ``data-chart-series-N`` per data row.

Values are inserted verbatim; nothing is escaped or validated.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from csvchart.chart.options import ChartConfig
from csvchart.config import (
    CELL_DELIMITER,
    CHART_COLORS,
    CHART_TYPES,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_TYPE,
    DEFAULT_CHART_WIDTH,
    EMPTY_CHART_MESSAGE,
    UNREADABLE_FILE_MESSAGE_FORMAT,
)


def resolve_height(config: ChartConfig) -> str:
    """Return the configured height when it is a string, else the default."""
    height = config.height
    return height if isinstance(height, str) else DEFAULT_CHART_HEIGHT


def resolve_width(config: ChartConfig) -> str:
    """Return the configured width when it is a string, else the default."""
    width = config.width
    return width if isinstance(width, str) else DEFAULT_CHART_WIDTH


def resolve_type(config: ChartConfig) -> str:
    """Map ``bar``/``line`` to the chart class name; anything else is a line chart.

    Examples
    --------
    >>> resolve_type(ChartConfig(type="bar"))
    'Bar'
    >>> resolve_type(ChartConfig(type="pie"))
    'Line'
    """
    chart_type: Any = config.type
    if isinstance(chart_type, str):
        return CHART_TYPES.get(chart_type, DEFAULT_CHART_TYPE)
    return DEFAULT_CHART_TYPE


def series_attributes(series: Sequence[Sequence[str]]) -> list[str]:
    """Return one ``data-chart-series-N`` attribute per row, zero-indexed."""
    return [
        f'data-chart-series-{index}="{CELL_DELIMITER.join(row)}"'
        for index, row in enumerate(series)
    ]


def openblock(inner_html: str) -> str:
    """Wrap ``inner_html`` in the outer ``openblock`` container."""
    return f'<div class="openblock">{inner_html}</div>'


def render_chart(
    series: Sequence[Sequence[str]],
    labels: Sequence[str],
    config: ChartConfig | None = None,
) -> str:
    r"""Render the chart container for ``series`` plotted against ``labels``.

    Parameters
    ----------
    series : Sequence[Sequence[str]]
        Data rows, each a sequence of cell strings.
    labels : Sequence[str]
        Header cells shared by every series.
    config : ChartConfig or None, optional
        Author-supplied options; defaults apply for anything unset.

    Returns
    -------
    str
        The complete HTML fragment.

    Examples
    --------
    >>> html = render_chart([["1", "2"]], ["a", "b"])
    >>> html.startswith('<div class="openblock"><div class="ct-chart" data-chart-height="400"')
    True
    >>> html.endswith('data-chart-series-0="1,2"></div>\n</div>')
    True
    """
    config = config or ChartConfig()
    title = f'<div class="title">{config.title}</div>' if config.title else ""
    chart_height = f'data-chart-height="{resolve_height(config)}" '
    chart_width = f'data-chart-width="{resolve_width(config)}" '
    chart_type = f'data-chart-type="{resolve_type(config)}" '
    chart_colors = f'data-chart-colors="{CHART_COLORS}" '
    chart_labels = f'data-chart-labels="{CELL_DELIMITER.join(labels)}" '
    chart_series = " ".join(series_attributes(series))
    return openblock(
        f'{title}<div class="ct-chart" {chart_height}{chart_width}{chart_type}'
        f"{chart_colors}{chart_labels}{chart_series}></div>\n"
    )


def empty_chart_html() -> str:
    """Return the placeholder shown for a chart block without any content."""
    return openblock(EMPTY_CHART_MESSAGE)


def unreadable_file_html(target: str) -> str:
    """Return the placeholder naming a chart file that could not be read."""
    return openblock(UNREADABLE_FILE_MESSAGE_FORMAT.format(target=target))
