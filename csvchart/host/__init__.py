"""Host bindings: attribute list parsing and the Python-Markdown extension."""

from .attrlist import AttributeList, parse_attribute_list
from .markdown_ext import ChartExtension, MarkdownAssetHost, makeExtension

__all__ = [
    "AttributeList",
    "ChartExtension",
    "MarkdownAssetHost",
    "makeExtension",
    "parse_attribute_list",
]
