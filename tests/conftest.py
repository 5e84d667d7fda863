"""Root pytest configuration for all tests.

Provides the canonical 14-sensor example scenario as fixtures. The report
text and expected answers live in shared/example_scenario.py so that
scripts and tests agree on them.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.beacon.value_objects import Sensor
from domain.beacon.world import World
from infrastructure.beacon.report_adapter import parse_report
from shared.example_scenario import EXAMPLE_REPORT
from tests.conftest_utils import get_fixtures_dir


@pytest.fixture(scope="session")
def example_sensors() -> tuple[Sensor, ...]:
    """Sensors of the canonical example report."""
    return parse_report(EXAMPLE_REPORT)


@pytest.fixture(scope="session")
def example_world(example_sensors: tuple[Sensor, ...]) -> World:
    """World built from the canonical example report."""
    return World.build(example_sensors)


@pytest.fixture
def example_report_path() -> Path:
    """Path to the canonical example report on disk."""
    return get_fixtures_dir() / "example_report.txt"
