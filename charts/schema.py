"""Schema types for the declarative bubble chart configuration.

The chart is described by plain frozen dataclasses instead of nested
dictionaries. The codec turns a `BubbleChartConfig` into the Chart.js
configuration dictionary only at the boundary where it is handed to the
charting engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ChartType = Literal["bubble"]

AxisType = Literal["linear"]

AxisPosition = Literal["bottom", "top", "left", "right"]


@dataclass(frozen=True, slots=True)
class BubblePoint:
    """A single bubble.

    Args:
        x: Horizontal position in x-axis units.
        y: Vertical position in y-axis units.
        r: Bubble radius in pixels.
    """

    x: float
    y: float
    r: float


@dataclass(frozen=True, slots=True)
class BubbleDataset:
    """A labeled group of bubbles drawn with shared styling."""

    label: str
    data: tuple[BubblePoint, ...]


@dataclass(frozen=True, slots=True)
class AxisTicks:
    """Fixed lower and upper bounds for an axis."""

    min: float
    max: float


@dataclass(frozen=True, slots=True)
class LinearAxis:
    """A linear cartesian axis.

    Args:
        position: Edge of the chart area the axis is drawn on.
        ticks: Fixed axis range.
        type: Axis scale type.
    """

    position: AxisPosition
    ticks: AxisTicks
    type: AxisType = "linear"


@dataclass(frozen=True, slots=True)
class ChartScales:
    """Horizontal and vertical axes for a cartesian chart."""

    x_axes: tuple[LinearAxis, ...]
    y_axes: tuple[LinearAxis, ...]


@dataclass(frozen=True, slots=True)
class ChartOptions:
    """Chart-level rendering options.

    Args:
        responsive: Resize the chart with its container.
        aspect_ratio: Canvas width divided by height.
        scales: Axis configuration.
    """

    responsive: bool
    aspect_ratio: float
    scales: ChartScales


@dataclass(frozen=True, slots=True)
class BubbleChartData:
    """Datasets drawn by a bubble chart."""

    datasets: tuple[BubbleDataset, ...]


@dataclass(frozen=True, slots=True)
class BubbleChartConfig:
    """Declarative definition of a bubble chart.

    Args:
        data: Datasets to draw.
        options: Sizing and axis options.
        type: The chart kind understood by the charting engine.
    """

    data: BubbleChartData
    options: ChartOptions
    type: ChartType = "bubble"
