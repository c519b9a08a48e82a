"""
Rotating disk device: read/write entry points over the geometry and timing
models.

A HardDiskDevice answers one request at a time, synchronously. Each request
returns the simulated completion timestamp and moves the head to the track
where the transfer ended.

Concurrency contract:
    The device owns its DeviceState exclusively. It performs no locking; a
    driver dispatching requests from several threads must serialize access
    to each device instance. Timestamps must be non-decreasing per device
    for the head-position model to remain meaningful.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, TYPE_CHECKING

from hdd_sim.analysis.statistics import AccessStatistics
from hdd_sim.core.errors import AddressOutOfRangeError
from hdd_sim.core.geometry import DiskGeometry, PhysicalPosition
from hdd_sim.core.timing import seek_time, transfer_time, wait_time
from hdd_sim.utils.logging import log_operation

if TYPE_CHECKING:
    from hdd_sim.core.settings import DriveSettings

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Kind of access. Both share one timing model."""
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class DeviceState:
    """
    Mutable-by-replacement state of one device.

    Attributes:
        head_track: Track the head currently rests on
    """
    head_track: int = 0


@dataclass(frozen=True)
class AccessResult:
    """
    Timing breakdown of a completed access.

    Attributes:
        operation: READ or WRITE
        start_ts: Timestamp the request was issued at
        end_ts: Simulated completion timestamp
        address: Requested byte address
        size: Requested size in bytes
        sectors: Whole sectors transferred
        position: Decoded start position
        seek: Initial seek time
        wait: Initial rotational latency
        transfer: Transfer time including track crossings
        end_track: Head track after the access
        tracks_crossed: Track boundaries crossed during the transfer
    """
    operation: Operation
    start_ts: float
    end_ts: float
    address: int
    size: int
    sectors: int
    position: PhysicalPosition
    seek: float
    wait: float
    transfer: float
    end_track: int
    tracks_crossed: int

    @property
    def elapsed(self) -> float:
        return self.seek + self.wait + self.transfer


def sectors_for_size(size: int, sector_size: int) -> int:
    """
    Number of whole sectors needed to hold `size` bytes.

    Partial sectors round up: the head has to pass the whole sector.

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Transfer size must be non-negative, got {size}")
    return -(-size // sector_size)


class HardDiskDevice:
    """
    Simulated hard disk drive with zoned recording.

    Attributes:
        geometry: Immutable disk geometry
        state: Current DeviceState (replaced after every access)
        statistics: Aggregated statistics over all completed accesses
        last_access: AccessResult of the most recent access, or None
        verbose: Log every access at INFO instead of DEBUG

    Example:
        >>> device = HardDiskDevice(1, 2, 4, 8, rpm=7200, sector_size=512,
        ...                         seek_overhead=1.0, seek_per_track=0.1)
        >>> ts = device.read(0.0, 0, 512)
        >>> device.head_track
        0
    """

    def __init__(self, surfaces: int, tracks_per_surface: int,
                 sectors_innermost_track: int, sectors_outermost_track: int,
                 rpm: int, sector_size: int,
                 seek_overhead: float, seek_per_track: float,
                 verbose: bool = False):
        """
        Build a device from raw drive parameters.

        Raises:
            ConfigurationError: If the parameters do not describe a usable disk
        """
        geometry = DiskGeometry(
            surfaces=surfaces,
            tracks_per_surface=tracks_per_surface,
            sectors_innermost_track=sectors_innermost_track,
            sectors_outermost_track=sectors_outermost_track,
            rpm=rpm,
            sector_size=sector_size,
            seek_overhead=seek_overhead,
            seek_per_track=seek_per_track,
        )
        self._setup(geometry, verbose)

    @classmethod
    def from_geometry(cls, geometry: DiskGeometry,
                      verbose: bool = False) -> "HardDiskDevice":
        """Build a device around an already validated geometry."""
        device = cls.__new__(cls)
        device._setup(geometry, verbose)
        return device

    @classmethod
    def from_settings(cls, settings: "DriveSettings") -> "HardDiskDevice":
        """Build a device from a DriveSettings model."""
        return cls.from_geometry(settings.to_geometry(), verbose=settings.verbose)

    def _setup(self, geometry: DiskGeometry, verbose: bool) -> None:
        self.geometry = geometry
        self.verbose = verbose
        self.state = DeviceState()
        self.statistics = AccessStatistics()
        self.last_access: Optional[AccessResult] = None
        self._last_ts: Optional[float] = None

        logger.debug(f"Created device: {geometry}")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def head_track(self) -> int:
        return self.state.head_track

    @property
    def capacity_bytes(self) -> int:
        return self.geometry.capacity_bytes

    @property
    def _log_level(self) -> int:
        return logging.INFO if self.verbose else logging.DEBUG

    def decode(self, address: int) -> PhysicalPosition:
        """Decode an address without touching device state."""
        position = self.geometry.decode(address)

        if logger.isEnabledFor(self._log_level):
            log_operation(
                "decode",
                f"0x{address:X} -> block {address // self.geometry.sector_size}, "
                f"{position}, max. access "
                f"{self.geometry.blocks_remaining_on_track(position)}",
                self._log_level,
                logger=logger,
            )
        return position

    # -------------------------------------------------------------------------
    # Access entry points
    # -------------------------------------------------------------------------

    def read(self, ts: float, address: int, size: int) -> float:
        """
        Read `size` bytes starting at `address`.

        Args:
            ts: Timestamp the request is issued at (seconds)
            address: Byte address of the first byte
            size: Number of bytes, rounded up to whole sectors

        Returns:
            Simulated completion timestamp

        Raises:
            AddressOutOfRangeError: If the request does not fit on the disk;
                the device state is left unchanged
        """
        return self.access(ts, address, size, Operation.READ).end_ts

    def write(self, ts: float, address: int, size: int) -> float:
        """Write `size` bytes starting at `address`; same timing as read()."""
        return self.access(ts, address, size, Operation.WRITE).end_ts

    def access(self, ts: float, address: int, size: int,
               operation: Operation = Operation.READ) -> AccessResult:
        """
        Perform one access and return its full timing breakdown.

        The head seeks from its current track to the target track, waits
        half a revolution on average, then transfers sequentially. The head
        stays on the track where the transfer ended.
        """
        if self._last_ts is not None and ts < self._last_ts:
            logger.warning(
                f"{operation.value}: timestamp {ts} precedes previous request "
                f"at {self._last_ts}"
            )

        sectors = sectors_for_size(size, self.geometry.sector_size)
        position = self.decode(address)

        block_index = address // self.geometry.sector_size
        if block_index + sectors > self.geometry.total_blocks:
            raise AddressOutOfRangeError(
                f"{operation.value} of {size} bytes runs past the end of the disk",
                address=address,
                capacity=self.geometry.capacity_bytes,
            )

        seek = seek_time(self.geometry, self.state.head_track, position.track)
        wait = wait_time(self.geometry)
        transfer = transfer_time(self.geometry, position, sectors)

        end_ts = ts + seek + wait + transfer.elapsed

        result = AccessResult(
            operation=operation,
            start_ts=ts,
            end_ts=end_ts,
            address=address,
            size=size,
            sectors=sectors,
            position=position,
            seek=seek,
            wait=wait,
            transfer=transfer.elapsed,
            end_track=transfer.end_track,
            tracks_crossed=transfer.tracks_crossed,
        )

        self.state = replace(self.state, head_track=transfer.end_track)
        self.statistics.record(result)
        self.last_access = result
        self._last_ts = ts

        log_operation(
            operation.value,
            f"ts={ts} address=0x{address:X} size=0x{size:X} -> {end_ts} "
            f"(seek {seek:.6f}s, wait {wait:.6f}s, transfer {transfer.elapsed:.6f}s)",
            self._log_level,
            logger=logger,
        )
        return result

    def reset(self) -> None:
        """Return the head to track 0 and clear statistics."""
        self.state = DeviceState()
        self.statistics = AccessStatistics()
        self.last_access = None
        self._last_ts = None

    def __repr__(self) -> str:
        return f"HardDiskDevice({self.geometry!r}, head_track={self.head_track})"
