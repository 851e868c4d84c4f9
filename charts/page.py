"""Standalone HTML page rendering for chart configs."""

from __future__ import annotations

from django.conf import settings
from django.template.loader import render_to_string

from .bootstrap import prepare_chart_payload
from .configs import build_pixel_bubble_chart
from .schema import BubbleChartConfig

DEFAULT_PAGE_TITLE = "Pixel bubble chart"


def render_chart_page(
    *,
    config: BubbleChartConfig | None = None,
    element_id: str | None = None,
    title: str | None = None,
) -> str:
    """Render a self-contained page that draws `config` on load.

    Args:
        config: Chart to embed; defaults to the pixel bubble chart.
        element_id: Canvas id; defaults to `settings.CHART_CANVAS_ID`.
        title: Document title.

    Returns:
        HTML document as a string.

    Raises:
        ChartConfigError: When the config fails validation.
    """

    payload = prepare_chart_payload(build_pixel_bubble_chart() if config is None else config)
    return render_to_string(
        "charts/bubble_chart.html",
        {
            "title": title or DEFAULT_PAGE_TITLE,
            "element_id": settings.CHART_CANVAS_ID if element_id is None else element_id,
            "chart_js_url": settings.CHART_JS_URL,
            "chart_config": payload,
        },
    )
