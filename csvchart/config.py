"""Global configuration constants for the chart extension.

Defines the handler name, attribute defaults, output constants and the
Markdown host settings used across the package.
"""

from __future__ import annotations

# Handler registration
HANDLER_NAME: str = "chart"
POSITIONAL_ATTRIBUTES: tuple[str, ...] = ("type", "width", "height")
BLOCK_CONTENT_MODEL: str = "raw"
BLOCK_CONTEXTS: tuple[str, ...] = ("listing", "literal")
ASSET_ROLE: str = "target"
PASSTHROUGH_CONTEXT: str = "pass"

# Tabular input
CELL_DELIMITER: str = ","
LINE_SEPARATOR: str = "\n"

# Chart defaults
DEFAULT_CHART_HEIGHT: str = "400"
DEFAULT_CHART_WIDTH: str = "600"
DEFAULT_CHART_TYPE: str = "Line"
CHART_TYPES: dict[str, str] = {"bar": "Bar", "line": "Line"}
CHART_COLORS: str = "#72B3CC,#8EB33B"

# Placeholder fragments
EMPTY_CHART_MESSAGE: str = "[chart is empty]"
UNREADABLE_FILE_MESSAGE_FORMAT: str = "[file does not exist or cannot be read: {target}]"

# Markdown host
BLOCK_DELIMITERS: dict[str, str] = {"....": "literal", "----": "listing"}
PREPROCESSOR_NAME: str = "csvchart"
PREPROCESSOR_PRIORITY: int = 28
DEFAULT_BASE_DIR: str = "."
