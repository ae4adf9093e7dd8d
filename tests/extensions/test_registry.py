"""Tests for the extension registry and the ``register`` entry point."""

import pytest

import csvchart
from csvchart.exceptions import ConfigurationError
from csvchart.extensions.base import NamedContentHandler
from csvchart.extensions.handlers import ChartBlock, ChartBlockMacro
from csvchart.extensions.registry import Registry, register


def test_register_installs_both_handlers() -> None:
    registry = Registry()
    assert not registry.has_blocks()
    assert not registry.has_block_macros()
    assert register(registry) is registry
    assert registry.has_blocks()
    assert registry.has_block_macros()
    assert isinstance(registry.registered_for_block_macro("chart"), ChartBlockMacro)
    assert isinstance(registry.registered_for_block("chart", "literal"), ChartBlock)
    assert isinstance(registry.registered_for_block("chart", "listing"), ChartBlock)


def test_block_lookup_respects_context_and_name() -> None:
    registry = register(Registry())
    assert registry.registered_for_block("chart", "example") is None
    assert registry.registered_for_block("graph", "literal") is None
    assert registry.registered_for_block_macro("graph") is None


def test_register_without_registry_creates_one() -> None:
    registry = csvchart.register()
    assert isinstance(registry, Registry)
    assert registry.registered_for_block_macro("chart") is not None


def test_register_with_block_only_registry() -> None:
    class DirectRegistry:
        def __init__(self):
            self.blocks = []
            self.macros = []

        def block(self, handler):
            self.blocks.append(handler)

        def block_macro(self, handler):
            self.macros.append(handler)

    registry = register(DirectRegistry())
    assert registry.blocks == [ChartBlock]
    assert registry.macros == [ChartBlockMacro]


def test_register_rejects_unusable_registry() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        register(object())
    assert excinfo.value.code == "CONFIGURATION_ERROR"


def test_unnamed_handler_rejected() -> None:
    class Nameless(NamedContentHandler):
        pass

    with pytest.raises(ConfigurationError):
        Registry().block(Nameless)


def test_non_handler_rejected() -> None:
    with pytest.raises(ConfigurationError):
        Registry().block_macro(object)


def test_register_group_runs_immediately() -> None:
    seen = []
    registry = Registry()
    registry.register(lambda reg: seen.append(reg))
    assert seen == [registry]
