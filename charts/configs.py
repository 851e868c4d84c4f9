"""Chart definitions shipped with the project."""

from __future__ import annotations

from .schema import (
    AxisTicks,
    BubbleChartConfig,
    BubbleChartData,
    BubbleDataset,
    BubblePoint,
    ChartOptions,
    ChartScales,
    LinearAxis,
)

PIXEL_DATASET_LABEL = "Pixel 250"

PIXEL_POINTS: tuple[BubblePoint, ...] = (
    BubblePoint(x=400, y=1200, r=20),
    BubblePoint(x=250, y=800, r=40),
    BubblePoint(x=600, y=890, r=8),
)

X_RANGE = AxisTicks(min=0, max=1000)
Y_RANGE = AxisTicks(min=0, max=2000)

ASPECT_RATIO = 0.5


def build_pixel_bubble_chart() -> BubbleChartConfig:
    """Return the pixel bubble chart configuration.

    A new config object is built on every call; the literal values never
    change.
    """

    return BubbleChartConfig(
        type="bubble",
        data=BubbleChartData(
            datasets=(BubbleDataset(label=PIXEL_DATASET_LABEL, data=PIXEL_POINTS),),
        ),
        options=ChartOptions(
            responsive=True,
            aspect_ratio=ASPECT_RATIO,
            scales=ChartScales(
                x_axes=(LinearAxis(type="linear", position="bottom", ticks=X_RANGE),),
                y_axes=(LinearAxis(type="linear", position="left", ticks=Y_RANGE),),
            ),
        ),
    )
