"""
Analysis and reporting for simulated disk accesses.
"""

from hdd_sim.analysis.statistics import AccessStatistics

from hdd_sim.analysis.reporter import (
    get_geometry_summary,
    geometry_table,
    describe_position,
    position_table,
    access_table,
    statistics_table,
)

__all__ = [
    "AccessStatistics",
    "get_geometry_summary",
    "geometry_table",
    "describe_position",
    "position_table",
    "access_table",
    "statistics_table",
]
