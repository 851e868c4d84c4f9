"""Encoding helpers for the Chart.js configuration payload."""

from __future__ import annotations

from typing import Any

from .schema import BubbleChartConfig, LinearAxis


def encode_chart_config(config: BubbleChartConfig) -> dict[str, Any]:
    """Encode a BubbleChartConfig into the Chart.js configuration dictionary.

    Args:
        config: BubbleChartConfig to encode.

    Returns:
        A JSON-serializable dict shaped as
        `{type, data: {datasets}, options: {responsive, aspectRatio, scales}}`.
        Every call returns new containers.
    """

    datasets = [
        {
            "label": dataset.label,
            "data": [{"x": point.x, "y": point.y, "r": point.r} for point in dataset.data],
        }
        for dataset in config.data.datasets
    ]
    scales = config.options.scales
    return {
        "type": config.type,
        "data": {"datasets": datasets},
        "options": {
            "responsive": config.options.responsive,
            "aspectRatio": config.options.aspect_ratio,
            "scales": {
                "xAxes": [_encode_axis(axis) for axis in scales.x_axes],
                "yAxes": [_encode_axis(axis) for axis in scales.y_axes],
            },
        },
    }


def _encode_axis(axis: LinearAxis) -> dict[str, Any]:
    """Encode a single axis entry."""

    return {
        "type": axis.type,
        "position": axis.position,
        "ticks": {"min": axis.ticks.min, "max": axis.ticks.max},
    }
