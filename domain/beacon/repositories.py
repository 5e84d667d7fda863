"""Domain Port(s) for sensor report I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import Sensor


class SensorRepository(Protocol):
    """Port for obtaining sensors from external sources.

    Implementations live in infrastructure (e.g., the text report adapter).
    """

    def load_sensors(self, file_path: Path | str) -> tuple[Sensor, ...]:
        """Load every sensor record from a report."""
        ...
