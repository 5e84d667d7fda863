"""Infrastructure adapters for the beacon bounded context.

This module provides the infrastructure layer implementations for beacon
operations: loading sensor reports from text files and rendering a World
as a text grid.
"""

from .grid_renderer import render_grid
from .report_adapter import TextReportAdapter, parse_report, parse_sensor

__all__ = ["TextReportAdapter", "parse_report", "parse_sensor", "render_grid"]
