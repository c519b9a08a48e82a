"""
Reporting for simulated disks.

This module renders the structured data produced by the disk model:
- Geometry summaries (plain text and rich tables)
- Decoded address breakdowns
- Per-access timing tables
- Aggregated access statistics

The disk model itself never prints; everything here is computed from its
return values and read-only accessors.
"""

from typing import Dict, Iterable, TYPE_CHECKING

from rich.table import Table

from hdd_sim.analysis.statistics import AccessStatistics
from hdd_sim.core.geometry import DiskGeometry, PhysicalPosition

if TYPE_CHECKING:
    from hdd_sim.core.device import AccessResult


def _ms(seconds: float) -> str:
    return f"{seconds * 1000:.3f} ms"


# =============================================================================
# Geometry
# =============================================================================


def get_geometry_summary(geometry: DiskGeometry) -> str:
    """
    Get a human-readable summary of disk geometry.

    Example:
        >>> print(get_geometry_summary(geometry))
        Disk Geometry Summary
        =====================
        Surfaces: 1
        Tracks/Surface: 2
        ...
    """
    return f"""Disk Geometry Summary
=====================
Surfaces: {geometry.surfaces}
Tracks/Surface: {geometry.tracks_per_surface}
Sectors on Innermost Track: {geometry.sectors_innermost_track}
Sectors on Outermost Track: {geometry.sectors_outermost_track}
RPM: {geometry.rpm}
Sector Size: {geometry.sector_size}
Total Sectors: {geometry.total_sectors:,}
Capacity: {geometry.capacity_gb:.3f} GB ({geometry.capacity_bytes:,} bytes)"""


def geometry_table(geometry: DiskGeometry) -> Table:
    """Rich table of geometry and mechanical parameters."""
    table = Table(title="HDD Geometry", show_header=False)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Surfaces", str(geometry.surfaces))
    table.add_row("Tracks/surface", str(geometry.tracks_per_surface))
    table.add_row("Sectors on innermost track", str(geometry.sectors_innermost_track))
    table.add_row("Sectors on outermost track", str(geometry.sectors_outermost_track))
    table.add_row("Sectors/track growth", f"{geometry.sectors_diff:.4f}")
    table.add_row("RPM", str(geometry.rpm))
    table.add_row("Sector size", f"{geometry.sector_size} B")
    table.add_row("Seek overhead", _ms(geometry.seek_overhead))
    table.add_row("Seek per track", _ms(geometry.seek_per_track))
    table.add_row("Total sectors", f"{geometry.total_sectors:,}")
    table.add_row("Capacity", f"{geometry.capacity_gb:.3f} GB")
    return table


# =============================================================================
# Address Decoding
# =============================================================================


def describe_position(geometry: DiskGeometry, address: int,
                      position: PhysicalPosition) -> Dict[str, int]:
    """
    Structured breakdown of a decoded address.

    Returns:
        Dictionary with block index, position fields, sectors on the track
        and the blocks that can be transferred before the track ends
    """
    return {
        'address': address,
        'block_index': address // geometry.sector_size,
        'surface': position.surface,
        'track': position.track,
        'sector': position.sector,
        'track_sectors': geometry.sectors_per_track(position.track),
        'max_access': geometry.blocks_remaining_on_track(position),
    }


def position_table(geometry: DiskGeometry, address: int,
                   position: PhysicalPosition) -> Table:
    """Rich table for a decoded address."""
    details = describe_position(geometry, address, position)

    table = Table(title=f"Decode 0x{address:X}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Block index", f"{details['block_index']:,}")
    table.add_row("Surface", str(details['surface']))
    table.add_row("Track", str(details['track']))
    table.add_row("Sector", str(details['sector']))
    table.add_row("Sectors on track", str(details['track_sectors']))
    table.add_row("Max. access", str(details['max_access']))
    return table


# =============================================================================
# Accesses
# =============================================================================


def access_table(results: Iterable["AccessResult"]) -> Table:
    """Rich table with one row per completed access."""
    table = Table(title="Accesses")
    table.add_column("Op")
    table.add_column("Address", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Position")
    table.add_column("Seek", justify="right")
    table.add_column("Wait", justify="right")
    table.add_column("Transfer", justify="right")
    table.add_column("Crossed", justify="right")
    table.add_column("Done at", justify="right")

    for result in results:
        table.add_row(
            result.operation.value,
            f"0x{result.address:X}",
            f"{result.size:,}",
            str(result.position),
            _ms(result.seek),
            _ms(result.wait),
            _ms(result.transfer),
            str(result.tracks_crossed),
            f"{result.end_ts:.6f} s",
        )
    return table


def statistics_table(stats: AccessStatistics) -> Table:
    """Rich table of aggregated access statistics."""
    summary = stats.summary()

    table = Table(title="Access Statistics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Requests", f"{stats.requests} ({stats.reads} read, {stats.writes} write)")
    table.add_row("Bytes read", f"{stats.bytes_read:,}")
    table.add_row("Bytes written", f"{stats.bytes_written:,}")
    table.add_row("Sectors transferred", f"{stats.sectors_transferred:,}")
    table.add_row("Seeks", str(stats.seeks))
    table.add_row("Tracks crossed", str(stats.tracks_crossed))
    table.add_row("Avg. seek", _ms(summary['avg_seek_time']))
    table.add_row("Avg. wait", _ms(summary['avg_wait_time']))
    table.add_row("Avg. transfer", _ms(summary['avg_transfer_time']))
    table.add_row("Total busy time", _ms(summary['total_time']))
    return table
