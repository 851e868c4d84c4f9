"""Validation for BubbleChartConfig definitions.

Structural problems are errors and make the config unusable. Bubbles drawn
outside the fixed axis ranges are only reported as warnings because Chart.js
still renders the chart; those bubbles are simply clipped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .schema import BubbleChartConfig, BubblePoint, LinearAxis


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a chart config."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_bubble_chart_config(config: BubbleChartConfig) -> ValidationResult:
    """Validate a single BubbleChartConfig.

    Args:
        config: BubbleChartConfig to validate.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if config.type != "bubble":
        errors.append(f"BubbleChartConfig.type is not a supported value: {config.type!r}.")

    if not config.data.datasets:
        errors.append("BubbleChartConfig.data.datasets must contain at least one entry.")

    options = config.options
    if not _is_finite(options.aspect_ratio) or options.aspect_ratio <= 0:
        errors.append(f"BubbleChartConfig.options.aspect_ratio must be positive, got {options.aspect_ratio!r}.")

    x_axes = options.scales.x_axes
    y_axes = options.scales.y_axes
    if not x_axes:
        errors.append("BubbleChartConfig.options.scales.x_axes must contain at least one axis.")
    if not y_axes:
        errors.append("BubbleChartConfig.options.scales.y_axes must contain at least one axis.")
    for idx, axis in enumerate(x_axes):
        _validate_axis(axis, name=f"x_axes[{idx}]", positions=("bottom", "top"), errors=errors)
    for idx, axis in enumerate(y_axes):
        _validate_axis(axis, name=f"y_axes[{idx}]", positions=("left", "right"), errors=errors)

    for ds_idx, dataset in enumerate(config.data.datasets):
        prefix = f"BubbleChartConfig.data.datasets[{ds_idx}]"
        if not dataset.label.strip():
            errors.append(f"{prefix}.label must be a non-empty string.")
        if not dataset.data:
            errors.append(f"{prefix}.data must contain at least one point.")
        for pt_idx, point in enumerate(dataset.data):
            point_errors = _point_errors(point)
            if point_errors:
                errors.extend(f"{prefix}.data[{pt_idx}] {message}" for message in point_errors)
                continue
            if x_axes and not _within(point.x, x_axes[0]):
                warnings.append(
                    f"{prefix}.data[{pt_idx}] x={point.x!r} is outside the x-axis range "
                    f"[{x_axes[0].ticks.min!r}, {x_axes[0].ticks.max!r}]."
                )
            if y_axes and not _within(point.y, y_axes[0]):
                warnings.append(
                    f"{prefix}.data[{pt_idx}] y={point.y!r} is outside the y-axis range "
                    f"[{y_axes[0].ticks.min!r}, {y_axes[0].ticks.max!r}]."
                )

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _validate_axis(
    axis: LinearAxis,
    *,
    name: str,
    positions: tuple[str, ...],
    errors: list[str],
) -> None:
    """Append errors for a single axis definition."""

    prefix = f"BubbleChartConfig.options.scales.{name}"
    if axis.type != "linear":
        errors.append(f"{prefix}.type is not a supported value: {axis.type!r}.")
    if axis.position not in positions:
        errors.append(f"{prefix}.position must be one of {list(positions)}, got {axis.position!r}.")
    if not (_is_finite(axis.ticks.min) and _is_finite(axis.ticks.max)):
        errors.append(f"{prefix}.ticks bounds must be finite numbers.")
    elif axis.ticks.min >= axis.ticks.max:
        errors.append(f"{prefix}.ticks.min must be less than ticks.max.")


def _point_errors(point: BubblePoint) -> list[str]:
    """Return problems with a single point's values."""

    problems: list[str] = []
    for field_name in ("x", "y", "r"):
        if not _is_finite(getattr(point, field_name)):
            problems.append(f"{field_name} must be a finite number.")
    if _is_finite(point.r) and point.r < 0:
        problems.append("r must not be negative.")
    return problems


def _within(value: float, axis: LinearAxis) -> bool:
    """Return True when a value lies inside an axis range (inclusive)."""

    return axis.ticks.min <= value <= axis.ticks.max


def _is_finite(value: object) -> bool:
    """Return True for real, finite numbers (bools excluded)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
