"""Extension registry and the ``register`` entry point.

A ``Registry`` maps handler names to handler instances, separately for block
macros and delimited blocks. Hosts query it while scanning a document;
``register`` installs the chart handlers into a registry, accepting either a
registry that takes grouped registrations or one that only exposes
``block``/``block_macro``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from csvchart.exceptions import ConfigurationError

from .base import NamedContentHandler
from .handlers import ChartBlock, ChartBlockMacro

logger = logging.getLogger(__name__)

HandlerSpec = type[NamedContentHandler] | NamedContentHandler


def _instantiate(handler: HandlerSpec) -> NamedContentHandler:
    instance = handler() if isinstance(handler, type) else handler
    if not isinstance(instance, NamedContentHandler):
        raise ConfigurationError(
            "handler must derive from NamedContentHandler",
            context={"handler": repr(handler)},
        )
    if not instance.identifier():
        raise ConfigurationError(
            "handler has no name", context={"handler": type(instance).__name__}
        )
    return instance


class Registry:
    """Holds the block and block macro handlers available to a host.

    Examples
    --------
    >>> registry = Registry()
    >>> registry.has_blocks()
    False
    >>> _ = register(registry)
    >>> registry.registered_for_block("chart", "literal").name
    'chart'
    """

    def __init__(self) -> None:
        self._blocks: dict[str, NamedContentHandler] = {}
        self._block_macros: dict[str, NamedContentHandler] = {}
        self._groups: list[Callable[[Registry], Any]] = []

    def register(self, group: Callable[[Registry], Any]) -> Registry:
        """Run ``group`` against this registry and remember it."""
        self._groups.append(group)
        group(self)
        return self

    def block(self, handler: HandlerSpec) -> NamedContentHandler:
        """Register a delimited block handler under its name."""
        instance = _instantiate(handler)
        self._blocks[instance.identifier()] = instance
        logger.debug("Registered block handler %r", instance.identifier())
        return instance

    def block_macro(self, handler: HandlerSpec) -> NamedContentHandler:
        """Register a block macro handler under its name."""
        instance = _instantiate(handler)
        self._block_macros[instance.identifier()] = instance
        logger.debug("Registered block macro handler %r", instance.identifier())
        return instance

    def has_blocks(self) -> bool:
        return bool(self._blocks)

    def has_block_macros(self) -> bool:
        return bool(self._block_macros)

    def registered_for_block_macro(self, name: str) -> NamedContentHandler | None:
        """Return the block macro handler named ``name``, if any."""
        return self._block_macros.get(name)

    def registered_for_block(
        self, name: str, context: str
    ) -> NamedContentHandler | None:
        """Return the block handler named ``name`` if it accepts ``context``."""
        handler = self._blocks.get(name)
        if handler is None or context not in handler.contexts:
            return None
        return handler


def _register_chart_handlers(registry: Any) -> None:
    registry.block(ChartBlock)
    registry.block_macro(ChartBlockMacro)


def register(registry: Any = None) -> Any:
    """Install the chart block and block macro into ``registry``.

    Parameters
    ----------
    registry : Registry or None, optional
        Target registry. Anything exposing ``register(group)`` or
        ``block``/``block_macro`` is accepted. A new ``Registry`` is created
        when omitted.

    Returns
    -------
    Registry
        The registry the handlers were installed into.

    Raises
    ------
    ConfigurationError
        If ``registry`` offers neither registration style.
    """
    if registry is None:
        registry = Registry()
    if callable(getattr(registry, "register", None)):
        registry.register(_register_chart_handlers)
    elif callable(getattr(registry, "block", None)):
        _register_chart_handlers(registry)
    else:
        raise ConfigurationError(
            "registry supports neither group nor block registration",
            context={"registry": type(registry).__name__},
        )
    return registry
