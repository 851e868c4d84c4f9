"""App configuration for the `charts` Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ChartsConfig(AppConfig):
    """Configuration for the `charts` app."""

    name = "charts"
    verbose_name = "Pixel bubble chart"
