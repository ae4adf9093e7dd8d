"""CSV chart extension package.

This package turns comma-delimited data, supplied either as a file
reference or as an inline delimited block, into a ``ct-chart`` HTML fragment
that a client-side charting script renders in the browser.

The package is layered so the chart logic never depends on a particular
document engine:

Package Structure
-----------------
- `chart/`:
    Host-independent core: tabular parsing, chart options and markup.
- `extensions/`:
    ``ChartBlockMacro`` and ``ChartBlock`` handlers, the host capability
    protocols they depend on, and the ``Registry`` hosts query.
- `host/`:
    A Python-Markdown extension providing those capabilities.
- `config.py`: All constants (names, defaults, placeholders), as UPPER_SNAKE_CASE.
- `exceptions.py`: Package exception hierarchy.

Examples
--------
Register the handlers into a fresh registry:

>>> import csvchart
>>> registry = csvchart.register()
>>> registry.has_block_macros()
True

Render a Markdown document:

>>> import markdown
>>> from csvchart.host import ChartExtension
>>> html = markdown.markdown("chart::sales.csv[bar]", extensions=[ChartExtension()])
"""

from .extensions.registry import Registry, register

__version__ = "1.0.0"

__all__ = ["Registry", "__version__", "register"]
