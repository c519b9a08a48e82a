"""
Access-time model for rotating disks.

All functions are pure: they compute simulated durations (seconds) from a
DiskGeometry and explicit head positions, and never touch device state.
The caller decides what to do with the resulting head track.

Components of an access:
    - Seek: fixed overhead plus a linear cost per track travelled
    - Wait: average rotational latency, half a revolution
    - Transfer: one sector's share of a revolution per block, plus a
      track-to-track step and a fresh rotational wait per track crossed
"""

import logging
from dataclasses import dataclass

from hdd_sim.core.errors import AddressOutOfRangeError
from hdd_sim.core.geometry import DiskGeometry, PhysicalPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferResult:
    """
    Outcome of a sequential multi-sector transfer.

    Attributes:
        elapsed: Transfer time in seconds, including track crossings
        end_track: Track the head rests on when the transfer completes
        tracks_crossed: Number of track boundaries crossed
        sectors: Number of sectors transferred
    """
    elapsed: float
    end_track: int
    tracks_crossed: int
    sectors: int


def seek_time(geometry: DiskGeometry, from_track: int, to_track: int) -> float:
    """
    Time to move the actuator between two tracks.

    No acceleration curve is modelled: any movement pays the fixed overhead
    plus a linear per-track cost.

    Args:
        geometry: Disk geometry supplying the seek parameters
        from_track: Track the head currently rests on
        to_track: Target track

    Returns:
        0.0 if the tracks are equal, otherwise
        abs(to_track - from_track) * seek_per_track + seek_overhead
    """
    if from_track == to_track:
        return 0.0

    return abs(to_track - from_track) * geometry.seek_per_track + geometry.seek_overhead


def wait_time(geometry: DiskGeometry) -> float:
    """Average rotational latency: half a revolution, i.e. 30 / rpm seconds."""
    return 0.5 * geometry.rotation_period


def sector_time(geometry: DiskGeometry, track: int) -> float:
    """Time for one sector of the given track to pass under the head."""
    return geometry.rotation_period / geometry.sectors_per_track(track)


def transfer_time(geometry: DiskGeometry, start: PhysicalPosition,
                  sectors: int) -> TransferResult:
    """
    Simulate a sequential transfer of `sectors` blocks starting at `start`.

    Blocks are consumed in sector-major, surface-minor order. When a track is
    exhausted with blocks remaining, the head steps to the next track (surface
    0, sector 0) and pays seek_time(t, t + 1) + wait_time() before continuing.

    Args:
        geometry: Disk geometry
        start: Position of the first block
        sectors: Number of blocks to transfer (0 is allowed)

    Returns:
        TransferResult with the elapsed time and the final head track

    Raises:
        ValueError: If sectors is negative
        AddressOutOfRangeError: If the start position is not on the disk or
            the transfer runs past the last track

    Example:
        >>> result = transfer_time(geometry, geometry.decode(0), 8)
        >>> result.end_track, result.tracks_crossed
        (1, 1)
    """
    if sectors < 0:
        raise ValueError(f"Sector count must be non-negative, got {sectors}")

    track = start.track
    available = geometry.blocks_remaining_on_track(start)
    remaining = sectors
    elapsed = 0.0
    crossings = 0

    while True:
        chunk = min(remaining, available)
        elapsed += chunk * sector_time(geometry, track)
        remaining -= chunk

        if remaining == 0:
            break

        if track + 1 >= geometry.tracks_per_surface:
            raise AddressOutOfRangeError(
                f"Transfer of {sectors} sectors from {start} runs past the last track",
                capacity=geometry.capacity_bytes,
            )

        elapsed += seek_time(geometry, track, track + 1) + wait_time(geometry)
        track += 1
        crossings += 1
        available = geometry.sectors_per_track(track) * geometry.surfaces

    logger.debug(
        f"Transfer {sectors} sectors from {start}: {elapsed:.6f}s, "
        f"ended on track {track} after {crossings} crossing(s)"
    )

    return TransferResult(
        elapsed=elapsed,
        end_track=track,
        tracks_crossed=crossings,
        sectors=sectors,
    )
