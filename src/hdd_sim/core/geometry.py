"""
Zoned-recording disk geometry and address decoding.

This module describes the physical layout of a rotating disk whose outer
tracks hold more sectors than its inner tracks. The sector count of each
track is linearly interpolated between the innermost and outermost track
and floored to a whole number of sectors.

Blocks are laid out sector-major, surface-minor: one angular sector position
spans every surface before the next sector position starts, since all heads
share one actuator and the platters rotate in lockstep.
"""

import math
from dataclasses import dataclass, field

import numpy as np

from hdd_sim.core.errors import (
    AddressOutOfRangeError,
    ConfigurationError,
    DegenerateGeometryError,
)


# Standard bytes per sector
BYTES_PER_SECTOR = 512

# Capacity is reported in decimal gigabytes
BYTES_PER_GB = 1_000_000_000

SECONDS_PER_MINUTE = 60.0


# =============================================================================
# Physical Position
# =============================================================================


@dataclass(frozen=True)
class PhysicalPosition:
    """
    A point on the disk.

    Attributes:
        surface: Platter surface (head) index
        track: Track index, 0 is the innermost track
        sector: Angular sector index within the track
    """
    surface: int
    track: int
    sector: int

    def __str__(self) -> str:
        return f"H{self.surface}:T{self.track}:S{self.sector}"


# =============================================================================
# Disk Geometry Data Class
# =============================================================================


@dataclass(frozen=True)
class DiskGeometry:
    """
    Immutable shape and mechanical parameters of a rotating disk.

    The geometry is validated on construction. Sectors per track for every
    track and the cumulative block count at the end of every track are
    precomputed once, so decoding an address is a binary search.

    Attributes:
        surfaces: Number of platter surfaces sharing one actuator
        tracks_per_surface: Number of tracks on each surface
        sectors_innermost_track: Sector count on track 0
        sectors_outermost_track: Sector count on the last track
        rpm: Spindle speed in revolutions per minute
        sector_size: Bytes per sector
        seek_overhead: Fixed cost of any non-zero seek (seconds)
        seek_per_track: Additional seek cost per track travelled (seconds)

    Raises:
        ConfigurationError: If the parameters do not describe a usable disk
        DegenerateGeometryError: If some track would hold zero sectors

    Example:
        >>> geometry = DiskGeometry(
        ...     surfaces=1,
        ...     tracks_per_surface=2,
        ...     sectors_innermost_track=4,
        ...     sectors_outermost_track=8,
        ...     rpm=7200,
        ...     sector_size=512,
        ... )
        >>> geometry.capacity_bytes
        6144
        >>> geometry.decode(2048)
        PhysicalPosition(surface=0, track=1, sector=0)
    """
    surfaces: int
    tracks_per_surface: int
    sectors_innermost_track: int
    sectors_outermost_track: int
    rpm: int
    sector_size: int = BYTES_PER_SECTOR
    seek_overhead: float = 0.0
    seek_per_track: float = 0.0

    _track_sectors: np.ndarray = field(init=False, repr=False, compare=False)
    _track_ends: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._validate()

        tracks = np.arange(self.tracks_per_surface, dtype=np.float64)
        track_sectors = np.floor(
            float(self.sectors_innermost_track) + self.sectors_diff * tracks
        ).astype(np.int64)

        empty = np.flatnonzero(track_sectors <= 0)
        if empty.size:
            track = int(empty[0])
            raise DegenerateGeometryError(
                "Sector interpolation produces a track without sectors",
                track=track,
                sectors=int(track_sectors[track]),
            )

        # Cumulative block count at the end of each track (all surfaces)
        track_ends = np.cumsum(track_sectors * self.surfaces)

        track_sectors.flags.writeable = False
        track_ends.flags.writeable = False
        object.__setattr__(self, "_track_sectors", track_sectors)
        object.__setattr__(self, "_track_ends", track_ends)

    def _validate(self) -> None:
        """Check the raw parameters before anything is derived from them."""
        positive = (
            ("surfaces", self.surfaces),
            ("rpm", self.rpm),
            ("sector_size", self.sector_size),
        )
        for name, value in positive:
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive", name, value)

        if self.tracks_per_surface < 2:
            raise ConfigurationError(
                "At least two tracks per surface are needed to interpolate "
                "sectors per track",
                "tracks_per_surface",
                self.tracks_per_surface,
            )

        if self.sectors_innermost_track < 0:
            raise ConfigurationError(
                "Innermost track cannot hold a negative number of sectors",
                "sectors_innermost_track",
                self.sectors_innermost_track,
            )

        if self.sectors_outermost_track <= self.sectors_innermost_track:
            raise ConfigurationError(
                "Outermost track should contain more sectors than innermost",
                "sectors_outermost_track",
                self.sectors_outermost_track,
            )

        for name in ("seek_overhead", "seek_per_track"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(
                    f"{name} must be a non-negative number of seconds",
                    name,
                    value,
                )

    # -------------------------------------------------------------------------
    # Derived parameters
    # -------------------------------------------------------------------------

    @property
    def sectors_diff(self) -> float:
        """Linear growth in sectors per track from one track to the next."""
        return (
            (self.sectors_outermost_track - self.sectors_innermost_track)
            / (self.tracks_per_surface - 1)
        )

    @property
    def track_sectors(self) -> np.ndarray:
        """Read-only array of sectors per track, indexed by track."""
        return self._track_sectors

    @property
    def total_sectors(self) -> int:
        """Total number of sectors on all tracks of all surfaces."""
        return int(self._track_ends[-1])

    @property
    def total_blocks(self) -> int:
        """Number of addressable blocks (one block per sector)."""
        return self.total_sectors

    @property
    def capacity_bytes(self) -> int:
        """Total capacity in bytes."""
        return self.total_sectors * self.sector_size

    @property
    def capacity_gb(self) -> float:
        """Total capacity in decimal gigabytes."""
        return self.capacity_bytes / BYTES_PER_GB

    @property
    def min_sectors_per_track(self) -> int:
        return int(self._track_sectors[0])

    @property
    def max_sectors_per_track(self) -> int:
        return int(self._track_sectors[-1])

    @property
    def rotation_period(self) -> float:
        """Time of one full revolution in seconds."""
        return SECONDS_PER_MINUTE / self.rpm

    def sectors_per_track(self, track: int) -> int:
        """
        Number of sectors on one surface of the given track.

        Args:
            track: Track index in [0, tracks_per_surface)

        Returns:
            floor(sectors_innermost_track + sectors_diff * track)

        Raises:
            ValueError: If track is outside the disk
        """
        if not 0 <= track < self.tracks_per_surface:
            raise ValueError(
                f"Track {track} outside 0..{self.tracks_per_surface - 1}"
            )
        return int(self._track_sectors[track])

    def first_block_of_track(self, track: int) -> int:
        """Flat block index of sector 0, surface 0 on the given track."""
        if not 0 <= track < self.tracks_per_surface:
            raise ValueError(
                f"Track {track} outside 0..{self.tracks_per_surface - 1}"
            )
        if track == 0:
            return 0
        return int(self._track_ends[track - 1])

    # -------------------------------------------------------------------------
    # Address translation
    # -------------------------------------------------------------------------

    def decode(self, address: int) -> PhysicalPosition:
        """
        Translate a byte address into a physical position.

        The track is the first one whose cumulative block count exceeds the
        block index. Within the track, blocks run sector-major and
        surface-minor.

        Args:
            address: Byte address, 0 <= address < capacity_bytes

        Returns:
            PhysicalPosition of the block holding the address

        Raises:
            AddressOutOfRangeError: If the address is outside the disk

        Example:
            >>> geometry.decode(0)
            PhysicalPosition(surface=0, track=0, sector=0)
        """
        if address < 0 or address >= self.capacity_bytes:
            raise AddressOutOfRangeError(
                "Address outside disk capacity",
                address=address,
                capacity=self.capacity_bytes,
            )

        block_index = address // self.sector_size
        track = int(np.searchsorted(self._track_ends, block_index, side="right"))

        offset = block_index - self.first_block_of_track(track)
        return PhysicalPosition(
            surface=offset % self.surfaces,
            track=track,
            sector=offset // self.surfaces,
        )

    def is_valid_position(self, position: PhysicalPosition) -> bool:
        """Check that a position lies on the disk."""
        return (
            0 <= position.track < self.tracks_per_surface and
            0 <= position.surface < self.surfaces and
            0 <= position.sector < int(self._track_sectors[position.track])
        )

    def block_index(self, position: PhysicalPosition) -> int:
        """
        Flat block index of a physical position (inverse of decode).

        Raises:
            AddressOutOfRangeError: If the position is not on the disk
        """
        if not self.is_valid_position(position):
            raise AddressOutOfRangeError(f"Position {position} is not on the disk")

        return (
            self.first_block_of_track(position.track) +
            position.sector * self.surfaces +
            position.surface
        )

    def encode(self, position: PhysicalPosition) -> int:
        """Byte address of the first byte stored at a physical position."""
        return self.block_index(position) * self.sector_size

    def blocks_remaining_on_track(self, position: PhysicalPosition) -> int:
        """
        Number of blocks that can be transferred from position, inclusive,
        before the head has to move to the next track.
        """
        if not self.is_valid_position(position):
            raise AddressOutOfRangeError(f"Position {position} is not on the disk")

        track_sectors = int(self._track_sectors[position.track])
        return (
            (track_sectors - (position.sector + 1)) * self.surfaces +
            (self.surfaces - position.surface)
        )

    def __str__(self) -> str:
        return (
            f"DiskGeometry("
            f"{self.surfaces}H/{self.tracks_per_surface}T/"
            f"{self.sectors_innermost_track}-{self.sectors_outermost_track}S, "
            f"{self.sector_size}B/sec, {self.rpm}rpm, "
            f"{self.capacity_gb:.3f}GB)"
        )
