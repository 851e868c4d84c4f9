"""Export the pixel bubble chart as a standalone page or JSON payload."""

from __future__ import annotations

import json
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from charts.bootstrap import prepare_chart_payload
from charts.configs import build_pixel_bubble_chart
from charts.exceptions import ChartConfigError
from charts.page import render_chart_page
from charts.validator import validate_bubble_chart_config


class Command(BaseCommand):
    """Write the bubble chart page (or its Chart.js config) to disk or stdout."""

    help = "Export the pixel bubble chart as an HTML page or Chart.js JSON config."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--output",
            default=None,
            help="Destination file; '-' writes to stdout. Defaults to CHART_EXPORT_DIR/index.html.",
        )
        parser.add_argument(
            "--format",
            choices=("html", "json"),
            default="html",
            help="Export the full HTML page or only the Chart.js config.",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Validate the chart config and report without writing.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        output: str | None = options["output"]
        fmt: str = options["format"]
        check: bool = options["check"]

        config = build_pixel_bubble_chart()
        result = validate_bubble_chart_config(config)
        for warning in result.warnings:
            self.stderr.write(f"WARNING: {warning}")
        if not result.is_valid:
            raise CommandError("\n".join(result.errors))
        if check:
            self.stdout.write(f"[CHECK] ok ({len(result.warnings)} warnings)")
            return None

        try:
            if fmt == "json":
                content = json.dumps(prepare_chart_payload(config), indent=2) + "\n"
            else:
                content = render_chart_page(config=config)
        except ChartConfigError as exc:
            raise CommandError(str(exc)) from exc

        if output == "-":
            self.stdout.write(content, ending="")
            return None

        default_name = "chart.json" if fmt == "json" else "index.html"
        path = Path(output) if output else Path(settings.CHART_EXPORT_DIR) / default_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.stdout.write(f"[WRITE] {path}")
        return None
