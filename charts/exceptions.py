"""Exceptions raised while bootstrapping a chart."""

from __future__ import annotations


class ChartError(Exception):
    """Base class for chart bootstrap failures."""


class DrawingSurfaceNotFoundError(ChartError, LookupError):
    """Raised when the drawing surface element is missing from the document."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"No drawing surface with id {element_id!r} in the document.")
        self.element_id = element_id


class ChartConfigError(ChartError, ValueError):
    """Raised when a chart config fails validation."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__("Invalid chart config:\n" + "\n".join(f"- {error}" for error in errors))
        self.errors = errors
