"""
HDD Simulator - rotating disk timing model for storage simulators.

Translates logical byte addresses into physical positions on a
zoned-recording disk and computes seek, rotational and transfer time for
sequential accesses.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from hdd_sim.core import (
    AddressOutOfRangeError,
    ConfigurationError,
    DegenerateGeometryError,
    DiskGeometry,
    DiskModelError,
    DriveSettings,
    HardDiskDevice,
    PhysicalPosition,
    load_settings,
)

__all__ = [
    "__version__",

    # Geometry and device
    "DiskGeometry",
    "PhysicalPosition",
    "HardDiskDevice",

    # Settings
    "DriveSettings",
    "load_settings",

    # Errors
    "DiskModelError",
    "ConfigurationError",
    "DegenerateGeometryError",
    "AddressOutOfRangeError",
]
