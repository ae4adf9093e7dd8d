"""Chart handlers: the block macro and the delimited block.

Both handlers are stateless and funnel into the same parse-then-render path.
They differ only in where the lines come from:

- ``ChartBlockMacro`` (``chart::sales.csv[bar]``) reads the target file
  through the host's asset reader.
- ``ChartBlock`` (``[chart,bar]`` over a ``....`` or ``----`` block) takes
  the block's raw lines from the host's line reader.

Failures never propagate: an unreadable file or an empty block becomes a
placeholder fragment and the rest of the document renders normally.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from csvchart.chart.markup import empty_chart_html, render_chart, unreadable_file_html
from csvchart.chart.options import ChartConfig
from csvchart.chart.parser import parse_table, split_content
from csvchart.config import (
    ASSET_ROLE,
    BLOCK_CONTENT_MODEL,
    BLOCK_CONTEXTS,
    HANDLER_NAME,
    POSITIONAL_ATTRIBUTES,
)
from csvchart.exceptions import EmptyTableError

from .base import AssetContext, LineReader, NamedContentHandler, PassthroughBlock

logger = logging.getLogger(__name__)


def generate_chart(lines: Sequence[str], attrs: dict[str, Any]) -> str:
    """Parse ``lines`` and render them with the options found in ``attrs``.

    Raises
    ------
    EmptyTableError
        If ``lines`` is empty.
    """
    table = parse_table(lines)
    config = ChartConfig.from_attributes(attrs)
    logger.debug(
        "Rendering chart with %d label(s) and %d series",
        len(table.labels),
        len(table.series),
    )
    return render_chart(table.series, table.labels, config)


class ChartBlockMacro(NamedContentHandler):
    """Block macro turning a CSV file reference into a chart."""

    name = HANDLER_NAME
    positional_attributes = POSITIONAL_ATTRIBUTES

    def process(
        self, parent: AssetContext, target: str, attrs: dict[str, Any]
    ) -> PassthroughBlock:
        """Read ``target`` through ``parent`` and render it as a chart.

        Parameters
        ----------
        parent : AssetContext
            Host node used to resolve and read the file.
        target : str
            File reference exactly as written in the document.
        attrs : dict[str, Any]
            Resolved attributes (``type``, ``width``, ``height``, ``title``).

        Returns
        -------
        PassthroughBlock
            The chart, or a placeholder naming ``target`` when the file
            cannot be read.
        """
        file_path = parent.normalize_asset_path(target, ASSET_ROLE)
        file_content = parent.read_asset(file_path, warn_on_failure=True, normalize=True)
        if isinstance(file_content, str):
            html = generate_chart(split_content(file_content), attrs)
            return self.create_block(parent, html, attrs)
        logger.debug("Chart file %s could not be read", target)
        return self.create_block(parent, unreadable_file_html(target), attrs)


class ChartBlock(NamedContentHandler):
    """Delimited block whose raw lines hold the chart data."""

    name = HANDLER_NAME
    positional_attributes = POSITIONAL_ATTRIBUTES
    contexts = BLOCK_CONTEXTS
    content_model = BLOCK_CONTENT_MODEL

    def process(
        self, parent: Any, reader: LineReader, attrs: dict[str, Any]
    ) -> PassthroughBlock:
        """Render the block's lines as a chart, or the empty placeholder."""
        lines = reader.get_lines()
        try:
            html = generate_chart(lines, attrs)
        except EmptyTableError:
            logger.debug("Chart block has no content")
            html = empty_chart_html()
        return self.create_block(parent, html, attrs)
