"""
Test fixtures for the HDD simulator.

Provides small drives whose layouts are easy to verify by hand.
"""

from tests.fixtures.drives import (
    EXAMPLE_DRIVE,
    TWO_SURFACE_DRIVE,
    create_example_geometry,
    create_example_device,
    create_two_surface_geometry,
    create_two_surface_device,
)

__all__ = [
    "EXAMPLE_DRIVE",
    "TWO_SURFACE_DRIVE",
    "create_example_geometry",
    "create_example_device",
    "create_two_surface_geometry",
    "create_two_surface_device",
]
