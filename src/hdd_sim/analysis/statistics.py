"""
Statistical aggregation of simulated disk accesses.

This module provides:
- Per-device running totals of seek, rotational and transfer time
- Read/write request and byte counts
- Track crossing counts and average access time
"""

from dataclasses import dataclass, field
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from hdd_sim.core.device import AccessResult


@dataclass
class AccessStatistics:
    """
    Running totals over completed accesses of one device.

    Attributes:
        reads: Number of read requests
        writes: Number of write requests
        bytes_read: Bytes requested by reads
        bytes_written: Bytes requested by writes
        sectors_transferred: Whole sectors transferred
        seeks: Accesses that moved the head before transferring
        tracks_crossed: Track boundaries crossed during transfers
        total_seek_time: Sum of initial seek times (seconds)
        total_wait_time: Sum of initial rotational latencies (seconds)
        total_transfer_time: Sum of transfer times (seconds)

    Example:
        >>> stats = device.statistics
        >>> print(f"Average access: {stats.average_access_time * 1000:.3f} ms")
    """
    reads: int = 0
    writes: int = 0
    bytes_read: int = 0
    bytes_written: int = 0
    sectors_transferred: int = 0
    seeks: int = 0
    tracks_crossed: int = 0
    total_seek_time: float = 0.0
    total_wait_time: float = 0.0
    total_transfer_time: float = 0.0
    tracks_visited: Dict[int, int] = field(default_factory=dict)

    def record(self, result: "AccessResult") -> None:
        """Add one completed access to the totals."""
        from hdd_sim.core.device import Operation

        if result.operation is Operation.WRITE:
            self.writes += 1
            self.bytes_written += result.size
        else:
            self.reads += 1
            self.bytes_read += result.size

        if result.seek > 0:
            self.seeks += 1

        self.sectors_transferred += result.sectors
        self.tracks_crossed += result.tracks_crossed
        self.total_seek_time += result.seek
        self.total_wait_time += result.wait
        self.total_transfer_time += result.transfer

        track = result.position.track
        self.tracks_visited[track] = self.tracks_visited.get(track, 0) + 1

    @property
    def requests(self) -> int:
        return self.reads + self.writes

    @property
    def total_time(self) -> float:
        return self.total_seek_time + self.total_wait_time + self.total_transfer_time

    @property
    def average_access_time(self) -> float:
        """Mean elapsed time per request, 0.0 before the first request."""
        if self.requests == 0:
            return 0.0
        return self.total_time / self.requests

    def summary(self) -> Dict[str, float]:
        """Flat dictionary of the headline numbers, for reports and logs."""
        if self.requests == 0:
            return {
                'requests': 0,
                'avg_seek_time': 0.0,
                'avg_wait_time': 0.0,
                'avg_transfer_time': 0.0,
                'total_time': 0.0,
            }

        return {
            'requests': self.requests,
            'avg_seek_time': self.total_seek_time / self.requests,
            'avg_wait_time': self.total_wait_time / self.requests,
            'avg_transfer_time': self.total_transfer_time / self.requests,
            'total_time': self.total_time,
        }
