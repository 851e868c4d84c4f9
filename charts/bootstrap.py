"""Page-load bootstrap for the pixel bubble chart.

`initialize` mirrors what the exported page does in `window.onload`: look up
the drawing surface by id, build the chart configuration, and hand both to the
charting engine. The engine owns rendering from then on.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from django.conf import settings

from .codec import encode_chart_config
from .configs import build_pixel_bubble_chart
from .exceptions import ChartConfigError, DrawingSurfaceNotFoundError
from .schema import BubbleChartConfig
from .validator import validate_bubble_chart_config

logger = logging.getLogger(__name__)


class Document(Protocol):
    """The DOM-like lookup the bootstrapper needs."""

    def get_element_by_id(self, element_id: str) -> object | None:
        """Return the element with `element_id`, or None when absent."""


class ChartEngine(Protocol):
    """A charting engine constructor taking a surface and a config payload."""

    def __call__(self, surface: object, payload: dict[str, Any]) -> object:
        """Start rendering `payload` onto `surface`."""


def prepare_chart_payload(config: BubbleChartConfig) -> dict[str, Any]:
    """Validate a config and encode it for the charting engine.

    Args:
        config: BubbleChartConfig to hand off.

    Returns:
        Chart.js configuration dictionary.

    Raises:
        ChartConfigError: When the config has validation errors.
    """

    result = validate_bubble_chart_config(config)
    for warning in result.warnings:
        logger.warning(warning)
    if not result.is_valid:
        raise ChartConfigError(result.errors)
    return encode_chart_config(config)


def initialize(
    *,
    document: Document,
    engine: ChartEngine,
    element_id: str | None = None,
) -> None:
    """Build the pixel bubble chart and register it with the engine.

    Args:
        document: Environment used to look up the drawing surface.
        engine: Charting engine constructor, called once as `engine(surface, payload)`.
        element_id: Drawing surface id; defaults to `settings.CHART_CANVAS_ID`.

    Raises:
        DrawingSurfaceNotFoundError: When the document has no such element. The
            engine is not called in that case.
        ChartConfigError: When the built config fails validation.
    """

    target_id = settings.CHART_CANVAS_ID if element_id is None else element_id
    surface = document.get_element_by_id(target_id)
    if surface is None:
        raise DrawingSurfaceNotFoundError(target_id)
    logger.debug("Found drawing surface %r", target_id)

    payload = prepare_chart_payload(build_pixel_bubble_chart())
    engine(surface, payload)
    logger.info("Handed %s chart to engine on surface %r", payload["type"], target_id)
