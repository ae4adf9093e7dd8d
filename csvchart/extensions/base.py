"""Handler base class and the host capabilities handlers rely on.

A host document engine discovers handlers through a registry, resolves each
invocation's attribute list with ``NamedContentHandler.resolve_attributes``
and then calls ``process``. Handlers only ever touch the host through the
protocols below, which keeps them usable from any engine that can supply a
path resolver, an asset reader and a line reader.

System Boundaries
-----------------
- ``AssetContext``: resolves and reads files named by a block macro target.
- ``LineReader``: yields the raw lines of a delimited block.
- ``PassthroughBlock``: the node handed back; its content is final HTML.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol

from csvchart.config import PASSTHROUGH_CONTEXT


class AssetContext(Protocol):
    """Host-side parent node able to locate and read document assets."""

    def normalize_asset_path(self, target: str, role: str) -> str: ...

    def read_asset(
        self, path: str, *, warn_on_failure: bool = False, normalize: bool = False
    ) -> str | None: ...


class LineReader(Protocol):
    """Host-side reader over the raw lines of a delimited block."""

    def get_lines(self) -> list[str]: ...


@dataclass(frozen=True)
class PassthroughBlock:
    """Content node whose ``content`` is emitted verbatim by the host.

    Parameters
    ----------
    content : str
        Pre-rendered HTML.
    attributes : dict[str, Any]
        The resolved attributes the block was produced from.
    context : str
        Node type understood by the host; always ``"pass"``.
    """

    content: str
    attributes: dict[str, Any] = field(default_factory=dict)
    context: str = PASSTHROUGH_CONTEXT


class NamedContentHandler:
    """Base class for handlers registered under a name.

    Subclasses set ``name`` and may declare ``positional_attributes``: the
    attribute names that unnamed values map onto, in order. Block handlers
    additionally set ``contexts`` (the delimited block kinds they accept) and
    ``content_model``.
    """

    name: ClassVar[str | None] = None
    positional_attributes: ClassVar[tuple[str, ...]] = ()
    contexts: ClassVar[tuple[str, ...]] = ()
    content_model: ClassVar[str | None] = None

    def identifier(self) -> str | None:
        """Return the name the handler is registered under."""
        return self.name

    def declared_positional_attributes(self) -> tuple[str, ...]:
        """Return the positional attribute names, in order."""
        return self.positional_attributes

    def resolve_attributes(
        self,
        positional: Sequence[str | None] = (),
        named: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Merge positional and named attributes into one mapping.

        Positional values are numbered from ``1`` (as the host reports them)
        and, where a declared name exists for that slot, also stored under
        that name. An empty slot (``None``) is skipped. Named attributes are
        applied last and win over positional ones.

        Examples
        --------
        >>> class Demo(NamedContentHandler):
        ...     name = "demo"
        ...     positional_attributes = ("type", "width")
        >>> Demo().resolve_attributes(["bar", "500"], {"width": "700"})
        {1: 'bar', 'type': 'bar', 2: '500', 'width': '700'}
        """
        attrs: dict[Any, Any] = {}
        for index, value in enumerate(positional):
            if value is None:
                continue
            attrs[index + 1] = value
            if index < len(self.positional_attributes):
                attrs[self.positional_attributes[index]] = value
        attrs.update(named or {})
        return attrs

    def create_block(
        self, parent: Any, content: str, attrs: Mapping[str, Any]
    ) -> PassthroughBlock:
        """Wrap ``content`` in a passthrough node for ``parent``."""
        return PassthroughBlock(content=content, attributes=dict(attrs))

    def process(self, parent: Any, source: Any, attrs: dict[str, Any]) -> PassthroughBlock:
        """Convert one invocation into a node; implemented by subclasses."""
        raise NotImplementedError
