"""Shared test fixtures for ems.

Fixtures defined here are available to all tests in the suite without
needing an explicit import.
"""
from __future__ import annotations

import pytest

from ems.output import BufferSink

DEMO_TRANSCRIPT = [
    "Retrieving employee data from the external HR system.",
    "Displaying full-time employee details.",
    "Displaying basic employee details.",
    "Displaying full-time employee details.",
    "Displaying advanced employee details.",
    "Displaying part-time employee details.",
    "Processing command 1 in ConcreteEmployeeProcessor1.",
    "Processing command 2 in ConcreteEmployeeProcessor2.",
]


@pytest.fixture()
def sink() -> BufferSink:
    """Return an empty in-memory sink."""
    return BufferSink()


@pytest.fixture()
def demo_transcript() -> list[str]:
    """The exact lines the built-in demonstration writes."""
    return list(DEMO_TRANSCRIPT)


@pytest.fixture()
def expected_version() -> str:
    """Update this fixture when cutting a release."""
    return "0.1.0"
