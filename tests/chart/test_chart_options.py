"""Tests for building ``ChartConfig`` from attribute bags."""

from csvchart.chart.options import ChartConfig


def test_from_attributes_picks_known_keys() -> None:
    config = ChartConfig.from_attributes(
        {1: "bar", "type": "bar", "width": "500", "height": "700", "title": "Sales", "id": "c1"}
    )
    assert config == ChartConfig(title="Sales", type="bar", width="500", height="700")


def test_from_attributes_empty_or_none() -> None:
    assert ChartConfig.from_attributes({}) == ChartConfig()
    assert ChartConfig.from_attributes(None) == ChartConfig()


def test_from_attributes_does_not_coerce() -> None:
    config = ChartConfig.from_attributes({"width": 500, "height": "700"})
    assert config.width == 500
    assert config.height == "700"
