"""
Core disk model.

This module provides the zoned disk geometry and address decoding, the
seek/rotation/transfer timing model, the device that ties them together,
and the drive settings layer.
"""

from hdd_sim.core.errors import (
    DiskModelError,
    ConfigurationError,
    DegenerateGeometryError,
    AddressOutOfRangeError,
)

from hdd_sim.core.geometry import (
    DiskGeometry,
    PhysicalPosition,
    BYTES_PER_SECTOR,
)

from hdd_sim.core.timing import (
    TransferResult,
    seek_time,
    wait_time,
    sector_time,
    transfer_time,
)

from hdd_sim.core.device import (
    HardDiskDevice,
    DeviceState,
    AccessResult,
    Operation,
    sectors_for_size,
)

from hdd_sim.core.settings import (
    DriveSettings,
    PRESETS,
    make_settings,
    get_preset,
    load_settings,
    save_settings,
    get_settings_dir,
    get_settings_file,
)

__all__ = [
    # Errors
    "DiskModelError",
    "ConfigurationError",
    "DegenerateGeometryError",
    "AddressOutOfRangeError",

    # Geometry
    "DiskGeometry",
    "PhysicalPosition",
    "BYTES_PER_SECTOR",

    # Timing
    "TransferResult",
    "seek_time",
    "wait_time",
    "sector_time",
    "transfer_time",

    # Device
    "HardDiskDevice",
    "DeviceState",
    "AccessResult",
    "Operation",
    "sectors_for_size",

    # Settings
    "DriveSettings",
    "PRESETS",
    "make_settings",
    "get_preset",
    "load_settings",
    "save_settings",
    "get_settings_dir",
    "get_settings_file",
]
