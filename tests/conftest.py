"""Pytest fixtures shared across the chart test suite."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest


class FakeDocument:
    """A DOM-like document holding elements by id."""

    def __init__(self, elements: dict[str, object] | None = None) -> None:
        self.elements = dict(elements or {})
        self.lookups: list[str] = []

    def get_element_by_id(self, element_id: str) -> object | None:
        """Return the element registered under `element_id`."""

        self.lookups.append(element_id)
        return self.elements.get(element_id)


class RecordingEngine:
    """A charting engine stand-in that records every construction."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, dict[str, Any]]] = []

    def __call__(self, surface: object, payload: dict[str, Any]) -> object:
        self.calls.append((surface, payload))
        return object()


@pytest.fixture
def canvas() -> object:
    """Return a sentinel drawing surface."""

    return object()


@pytest.fixture
def make_document():
    """Return a factory for documents holding the given elements."""

    return FakeDocument


@pytest.fixture
def document(make_document, canvas) -> FakeDocument:
    """Return a document containing the default `myChart` canvas."""

    return make_document({"myChart": canvas})


@pytest.fixture
def engine() -> RecordingEngine:
    """Return a recording charting engine."""

    return RecordingEngine()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no filesystem or command access.
    - `integration`: tests touching management commands or the filesystem.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
