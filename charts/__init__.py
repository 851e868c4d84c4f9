"""Declarative bubble chart configuration and page bootstrap.

The chart is described by frozen `BubbleChartConfig` objects, encoded to the
Chart.js configuration dictionary and handed to a charting engine together
with a drawing surface looked up by element id.
"""
