"""Django settings for pixelchart.

The project has no database and serves no requests; Django is used for its
settings, template engine, logging configuration and management commands.
Deployment-specific values are driven by environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed boolean value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_str(name: str, *, default: str) -> str:
    """Return a trimmed string environment variable, falling back when blank."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


DEBUG = _env_bool("DJANGO_DEBUG", default=True)

_DEV_SECRET_KEY = "dev-only-insecure-secret-key"
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or (_DEV_SECRET_KEY if DEBUG else "")
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY is required when DJANGO_DEBUG is False.")

INSTALLED_APPS = [
    "charts.apps.ChartsConfig",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    }
]

DATABASES: dict[str, dict[str, object]] = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

CHART_CANVAS_ID = _env_str("PIXELCHART_CANVAS_ID", default="myChart")
CHART_JS_URL = _env_str(
    "PIXELCHART_CHART_JS_URL",
    default="https://cdn.jsdelivr.net/npm/chart.js@2.9.4/dist/Chart.min.js",
)
CHART_EXPORT_DIR = Path(_env_str("PIXELCHART_EXPORT_DIR", default=str(BASE_DIR / "dist")))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "charts": {
            "handlers": ["console"],
            "level": _env_str("DJANGO_LOG_LEVEL", default="INFO").upper(),
            "propagate": True,
        },
    },
}
