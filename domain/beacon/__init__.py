"""Beacon Bounded Context.

Responsible for locating the distress beacon from sensor reports:
- Value Objects: Point, Sensor, CoverageInterval, Quadrant
- Services: row_coverage (interval merging), search_uncovered_point
  (quadrant search)
- Aggregate: World (row and region queries, tuning frequency)
"""
