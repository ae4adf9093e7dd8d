"""Extension handlers and the registry hosts look them up in.

- ``base``: ``NamedContentHandler``, host capability protocols and
  ``PassthroughBlock``.
- ``handlers``: ``ChartBlockMacro`` and ``ChartBlock``.
- ``registry``: ``Registry`` and ``register``.
"""

from .base import AssetContext, LineReader, NamedContentHandler, PassthroughBlock
from .handlers import ChartBlock, ChartBlockMacro, generate_chart
from .registry import Registry, register

__all__ = [
    "AssetContext",
    "ChartBlock",
    "ChartBlockMacro",
    "LineReader",
    "NamedContentHandler",
    "PassthroughBlock",
    "Registry",
    "generate_chart",
    "register",
]
