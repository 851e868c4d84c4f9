"""Tests for the standalone chart page."""

from __future__ import annotations

import json
import re
from dataclasses import replace

import pytest

from charts.configs import build_pixel_bubble_chart
from charts.exceptions import ChartConfigError
from charts.page import render_chart_page

pytestmark = pytest.mark.unit


def _embedded_config(html: str) -> dict:
    """Extract the json_script payload from a rendered page."""

    match = re.search(r'<script id="chart-config" type="application/json">(.*?)</script>', html, re.S)
    assert match is not None
    return json.loads(match.group(1))


def test_render_chart_page_embeds_canvas_and_config(settings) -> None:
    """The page carries the canvas, Chart.js and the bubble config."""

    settings.CHART_JS_URL = "https://example.test/chart.js"

    html = render_chart_page()

    assert '<canvas id="myChart"></canvas>' in html
    assert '<script src="https://example.test/chart.js"></script>' in html
    assert 'document.getElementById("myChart")' in html
    assert "window.onload" in html
    config = _embedded_config(html)
    assert config["type"] == "bubble"
    assert config["options"]["scales"]["xAxes"][0]["ticks"] == {"min": 0, "max": 1000}
    assert config["options"]["scales"]["yAxes"][0]["ticks"] == {"min": 0, "max": 2000}


def test_render_chart_page_uses_explicit_element_id_and_title() -> None:
    """Element id and title overrides are reflected in the page."""

    html = render_chart_page(element_id="pixels", title="Calibration")

    assert '<canvas id="pixels"></canvas>' in html
    assert "<title>Calibration</title>" in html
    assert 'document.getElementById("pixels")' in html


def test_render_chart_page_rejects_invalid_config() -> None:
    """Invalid configs are never rendered."""

    config = build_pixel_bubble_chart()
    config = replace(config, options=replace(config.options, aspect_ratio=-1))

    with pytest.raises(ChartConfigError):
        render_chart_page(config=config)


def test_render_chart_page_keeps_empty_element_id() -> None:
    """An empty element id is rendered as given rather than the default canvas id."""

    html = render_chart_page(element_id="")

    assert '<canvas id=""></canvas>' in html
    assert 'id="myChart"' not in html
    assert 'document.getElementById("")' in html
