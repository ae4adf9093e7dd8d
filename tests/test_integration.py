"""Integration tests: Markdown documents converted end to end.

Mirrors how authors use the extension: a block macro pointing at a CSV
fixture and inline ``....``/``----`` blocks, each with and without the
extension loaded and with the supported attribute forms.
"""

from pathlib import Path

import markdown
import pytest

from csvchart.host import ChartExtension

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def expected_chart(labels: str, series: list[str], **opts: str) -> str:
    """Return the ``ct-chart`` element expected for the given options."""
    series_attrs = " ".join(
        f'data-chart-series-{index}="{row}"' for index, row in enumerate(series)
    )
    return (
        f'<div class="ct-chart" data-chart-height="{opts.get("height", "400")}" '
        f'data-chart-width="{opts.get("width", "600")}" '
        f'data-chart-type="{opts.get("type", "Line")}" '
        f'data-chart-colors="#72B3CC,#8EB33B" data-chart-labels="{labels}" '
        f"{series_attrs}></div>"
    )


def sales_chart(**opts: str) -> str:
    return expected_chart("January,February,March", ["28,48,40", "65,59,80"], **opts)


def languages_chart(**opts: str) -> str:
    return expected_chart(
        "Java,JavaScript,Python", ["1.265,1.042,1.024", "1.118,1.004,1.279"], **opts
    )


def convert_with_extension(text: str) -> str:
    return markdown.markdown(text, extensions=[ChartExtension(base_dir=str(FIXTURES))])


def macro_input(target: str, attrs: list[str] | None = None) -> str:
    return f"chart::{target}[{','.join(attrs or [])}]"


def block_input(delimiter: str, attrs: list[str] | None = None) -> str:
    header = ",".join(["chart", *(attrs or [])])
    return (
        f"[{header}]\n{delimiter}\n"
        "Java,JavaScript,Python\n1.265,1.042,1.024\n1.118,1.004,1.279\n"
        f"{delimiter}"
    )


def test_macro_not_converted_without_extension() -> None:
    text = macro_input("sales.csv")
    assert text in markdown.markdown(text)


def test_macro_converted() -> None:
    assert sales_chart() in convert_with_extension(macro_input("sales.csv"))


def test_macro_missing_file_message() -> None:
    html = convert_with_extension(macro_input("404.csv"))
    assert "[file does not exist or cannot be read: 404.csv]" in html


@pytest.mark.parametrize(
    ("attrs", "opts"),
    [
        (["bar"], {"type": "Bar"}),
        (["width=500"], {"width": "500"}),
        (["height=700"], {"height": "700"}),
        (["bar", "500", "700"], {"type": "Bar", "width": "500", "height": "700"}),
    ],
)
def test_macro_attributes(attrs, opts) -> None:
    assert sales_chart(**opts) in convert_with_extension(macro_input("sales.csv", attrs))


@pytest.mark.parametrize("delimiter", ["....", "----"])
def test_block_not_converted_without_extension(delimiter: str) -> None:
    html = markdown.markdown(block_input(delimiter))
    assert "ct-chart" not in html
    assert "1.265,1.042,1.024" in html


@pytest.mark.parametrize("delimiter", ["....", "----"])
def test_block_converted(delimiter: str) -> None:
    assert languages_chart() in convert_with_extension(block_input(delimiter))


@pytest.mark.parametrize("delimiter", ["....", "----"])
def test_empty_block(delimiter: str) -> None:
    html = convert_with_extension(f"[chart]\n{delimiter}\n{delimiter}")
    assert "[chart is empty]" in html


@pytest.mark.parametrize("delimiter", ["....", "----"])
@pytest.mark.parametrize(
    ("attrs", "opts"),
    [
        (["bar"], {"type": "Bar"}),
        (["width=500"], {"width": "500"}),
        (["height=700"], {"height": "700"}),
        (["bar", "500", "700"], {"type": "Bar", "width": "500", "height": "700"}),
    ],
)
def test_block_attributes(delimiter: str, attrs, opts) -> None:
    assert languages_chart(**opts) in convert_with_extension(block_input(delimiter, attrs))
