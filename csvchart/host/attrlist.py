"""Attribute list parsing for the bracketed part of chart directives.

``chart::sales.csv[bar,500,title="Q1, Q2"]`` carries the attribute list
``bar,500,title="Q1, Q2"``. Entries are comma separated; ``name=value``
entries are named, everything else is positional. Quotes around a value are
dropped and protect any commas inside them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_NAMED_ENTRY = re.compile(r"^(?P<name>[A-Za-z_][\w-]*)\s*=\s*(?P<value>.*)$", re.DOTALL)
_QUOTES = ("'", '"')


@dataclass(frozen=True)
class AttributeList:
    """Positional values in order (``None`` for an empty slot) plus named values."""

    positional: list[str | None] = field(default_factory=list)
    named: dict[str, str] = field(default_factory=dict)


def _split_entries(text: str) -> list[str]:
    entries: list[str] = []
    buffer: list[str] = []
    quote: str | None = None
    for char in text:
        if quote is not None:
            buffer.append(char)
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
            buffer.append(char)
        elif char == ",":
            entries.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)
    entries.append("".join(buffer).strip())
    return entries


def unquote(value: str) -> str:
    """Strip one pair of matching single or double quotes from ``value``."""
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_attribute_list(text: str) -> AttributeList:
    """Parse the contents of a ``[...]`` attribute list.

    Parameters
    ----------
    text : str
        Text between the brackets, without the brackets.

    Returns
    -------
    AttributeList
        Positional and named attributes. Empty positional entries keep their
        slot as ``None`` so later values stay in position.

    Examples
    --------
    >>> parse_attribute_list('bar,,700,title="Q1, Q2"')
    AttributeList(positional=['bar', None, '700'], named={'title': 'Q1, Q2'})
    >>> parse_attribute_list("")
    AttributeList(positional=[], named={})
    """
    result = AttributeList()
    if not text.strip():
        return result
    for entry in _split_entries(text):
        match = _NAMED_ENTRY.match(entry)
        if match:
            result.named[match.group("name")] = unquote(match.group("value").strip())
        elif entry:
            result.positional.append(unquote(entry))
        else:
            result.positional.append(None)
    return result
