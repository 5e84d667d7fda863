"""Beacon Locator Domain Layer.

This package contains the core business logic organized by bounded contexts:
- beacon: Sensors, coverage diamonds, row coverage and the uncovered-cell search
"""

from domain import beacon

__all__ = ["beacon"]
