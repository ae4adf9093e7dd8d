"""Python-Markdown binding for the chart handlers.

Registers a preprocessor that finds chart directives in a Markdown document,
dispatches them to the handlers held by a ``Registry`` and stashes the
returned HTML so Markdown emits it untouched.

Recognised syntax
-----------------
Block macro, one line::

    .Monthly sales
    chart::data/sales.csv[bar,500,700]

Delimited block, ``....`` (literal) or ``----`` (listing)::

    [chart,line,height=300]
    ....
    January,February,March
    28,48,40
    ....

The optional ``.Title`` line sets the ``title`` attribute unless the
attribute list names one explicitly.

Usage
-----
>>> import markdown
>>> from csvchart.host.markdown_ext import ChartExtension
>>> html = markdown.markdown(text, extensions=[ChartExtension(base_dir="docs")])
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from csvchart.config import (
    BLOCK_DELIMITERS,
    DEFAULT_BASE_DIR,
    LINE_SEPARATOR,
    PREPROCESSOR_NAME,
    PREPROCESSOR_PRIORITY,
)
from csvchart.exceptions import AssetReadError
from csvchart.extensions.base import PassthroughBlock
from csvchart.extensions.registry import Registry, register

from .attrlist import parse_attribute_list

logger = logging.getLogger(__name__)

BLOCK_MACRO_PATTERN = re.compile(
    r"^(?P<name>[A-Za-z][\w-]*)::(?P<target>\S+?)\[(?P<attrs>.*)\]\s*$"
)
BLOCK_ATTRIBUTES_PATTERN = re.compile(r"^\[(?P<attrs>.*)\]\s*$")
BLOCK_TITLE_PATTERN = re.compile(r"^\.(?P<title>[^\s.].*?)\s*$")
CODE_FENCE_PATTERN = re.compile(r"^(?P<fence>`{3,}|~{3,})")


def normalize_source(text: str) -> str:
    """Drop a leading BOM, trailing whitespace per line and the final newline.

    Lines are split on ``\\n`` only; other line-break characters stay inside
    their cell.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = [line.rstrip() for line in text.split(LINE_SEPARATOR)]
    if lines[-1] == "":
        lines.pop()
    return LINE_SEPARATOR.join(lines)


def closes_fence(line: str, fence: str) -> bool:
    """Return True if ``line`` closes a code fence opened with ``fence``."""
    stripped = line.rstrip()
    return len(stripped) >= len(fence) and set(stripped) == {fence[0]}


class MarkdownAssetHost:
    """Asset context for handlers invoked from a Markdown document.

    Parameters
    ----------
    base_dir : str or Path
        Directory relative targets are resolved against.
    safe : bool
        When true, assets resolving outside ``base_dir`` are refused.
    """

    def __init__(self, base_dir: str | Path = DEFAULT_BASE_DIR, safe: bool = False) -> None:
        self.base_dir = Path(base_dir)
        self.safe = safe

    def normalize_asset_path(self, target: str, role: str) -> str:
        """Resolve ``target`` against the base directory."""
        path = (self.base_dir / target).resolve()
        logger.debug("Resolved %s %r to %s", role, target, path)
        return str(path)

    def read_asset(
        self, path: str, *, warn_on_failure: bool = False, normalize: bool = False
    ) -> str | None:
        """Return the UTF-8 content of ``path``, or ``None`` if it cannot be read."""
        try:
            text = self._read(Path(path))
        except AssetReadError as exc:
            if warn_on_failure:
                logger.warning("%s", exc)
            return None
        return normalize_source(text) if normalize else text

    def _read(self, path: Path) -> str:
        if self.safe and not path.resolve().is_relative_to(self.base_dir.resolve()):
            raise AssetReadError(
                f"refusing to read {path} outside {self.base_dir}",
                context={"path": str(path)},
            )
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise AssetReadError(
                f"cannot read {path}: {exc}", context={"path": str(path)}
            ) from exc


class BlockLineReader:
    """Line reader over the raw content of one delimited block."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)

    def get_lines(self) -> list[str]:
        return list(self._lines)


class ChartPreprocessor(Preprocessor):
    """Replaces chart directives with stashed HTML placeholders."""

    def __init__(self, md: Markdown, registry: Registry, host: MarkdownAssetHost) -> None:
        super().__init__(md)
        self.registry = registry
        self.host = host

    def run(self, lines: list[str]) -> list[str]:
        output: list[str] = []
        fence: str | None = None
        index = 0
        while index < len(lines):
            line = lines[index]
            if fence is not None:
                if closes_fence(line, fence):
                    fence = None
                output.append(line)
                index += 1
                continue
            fence_match = CODE_FENCE_PATTERN.match(line)
            if fence_match:
                fence = fence_match.group("fence")
                output.append(line)
                index += 1
                continue
            consumed, block = self._convert(lines, index)
            if block is None:
                output.append(lines[index])
                index += 1
                continue
            output.extend(["", self.md.htmlStash.store(block.content), ""])
            index += consumed
        return output

    def _convert(self, lines: list[str], index: int) -> tuple[int, PassthroughBlock | None]:
        """Try to convert the directive starting at ``index``.

        Returns the number of lines consumed and the resulting block, or
        ``(0, None)`` when no registered directive starts there.
        """
        title = None
        start = index
        title_match = BLOCK_TITLE_PATTERN.match(lines[index])
        if title_match and index + 1 < len(lines):
            title = title_match.group("title")
            start = index + 1

        block = self._convert_block_macro(lines[start], title)
        if block is not None:
            return start - index + 1, block
        end, block = self._convert_delimited_block(lines, start, title)
        if block is not None:
            return end - index, block
        return 0, None

    def _convert_block_macro(self, line: str, title: str | None) -> PassthroughBlock | None:
        match = BLOCK_MACRO_PATTERN.match(line)
        if not match:
            return None
        handler = self.registry.registered_for_block_macro(match.group("name"))
        if handler is None:
            return None
        attributes = parse_attribute_list(match.group("attrs"))
        attrs = handler.resolve_attributes(attributes.positional, attributes.named)
        _apply_title(attrs, title)
        logger.debug("Processing block macro %s::%s", handler.identifier(), match.group("target"))
        return handler.process(self.host, match.group("target"), attrs)

    def _convert_delimited_block(
        self, lines: list[str], start: int, title: str | None
    ) -> tuple[int, PassthroughBlock | None]:
        """Convert ``[name,...]`` followed by a delimited block.

        Returns the index just past the closing delimiter together with the
        block, or ``(start, None)`` when nothing matched.
        """
        match = BLOCK_ATTRIBUTES_PATTERN.match(lines[start])
        if not match or start + 1 >= len(lines):
            return start, None
        delimiter = lines[start + 1].rstrip()
        context = BLOCK_DELIMITERS.get(delimiter)
        if context is None:
            return start, None
        attributes = parse_attribute_list(match.group("attrs"))
        if not attributes.positional or attributes.positional[0] is None:
            return start, None
        name = attributes.positional[0]
        handler = self.registry.registered_for_block(name, context)
        if handler is None:
            return start, None

        body_start = start + 2
        end = body_start
        while end < len(lines) and lines[end].rstrip() != delimiter:
            end += 1
        if end >= len(lines):
            logger.warning("Unterminated %s block %r; reading to end of document", context, name)
        body = [line.rstrip() for line in lines[body_start:end]]

        attrs = handler.resolve_attributes(attributes.positional[1:], attributes.named)
        _apply_title(attrs, title)
        logger.debug("Processing %s block %r with %d line(s)", context, name, len(body))
        block = handler.process(self.host, BlockLineReader(body), attrs)
        return min(end + 1, len(lines)), block


def _apply_title(attrs: dict[str, Any], title: str | None) -> None:
    if title is not None:
        attrs.setdefault("title", title)


class ChartExtension(Extension):
    """Markdown extension rendering ``chart`` block macros and blocks.

    Parameters
    ----------
    registry : Registry, optional
        Registry to dispatch to; defaults to one holding the chart handlers.
    base_dir : str, optional
        Directory chart file targets are resolved against.
    safe : bool, optional
        Refuse chart files outside ``base_dir``.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.registry = kwargs.pop("registry", None) or register(Registry())
        self.config = {
            "base_dir": [DEFAULT_BASE_DIR, "Directory chart file targets are resolved against"],
            "safe": [False, "Refuse chart files outside base_dir"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:
        host = MarkdownAssetHost(self.getConfig("base_dir"), self.getConfig("safe"))
        md.preprocessors.register(
            ChartPreprocessor(md, self.registry, host),
            PREPROCESSOR_NAME,
            PREPROCESSOR_PRIORITY,
        )


def makeExtension(**kwargs: Any) -> ChartExtension:
    return ChartExtension(**kwargs)
