"""Chart options resolved from a handler attribute bag.

The host hands every handler a flat mapping of attributes in which numbers
are still plain strings. ``ChartConfig`` picks out the four keys the chart
markup understands and keeps their raw values; defaults are applied later by
the markup generator, so a ``ChartConfig`` always records exactly what the
author wrote.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ChartConfig:
    """Optional chart settings as supplied by the document author.

    Parameters
    ----------
    title : Any, optional
        Caption rendered above the chart when set.
    type : Any, optional
        ``"bar"`` or ``"line"``; other values render as a line chart.
    width : Any, optional
        Chart width; only string values are honoured.
    height : Any, optional
        Chart height; only string values are honoured.

    Examples
    --------
    >>> ChartConfig.from_attributes({"type": "bar", "width": "500", "id": "x"})
    ChartConfig(title=None, type='bar', width='500', height=None)
    """

    title: Any = None
    type: Any = None
    width: Any = None
    height: Any = None

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, Any] | None) -> ChartConfig:
        """Build a config from a named attribute mapping, ignoring unknown keys.

        No coercion happens here: ``"500"`` stays a string and a non-string
        value is carried through so the generator can fall back on its
        default.
        """
        if not attrs:
            return cls()
        return cls(
            title=attrs.get("title"),
            type=attrs.get("type"),
            width=attrs.get("width"),
            height=attrs.get("height"),
        )
