"""
Unit tests for geometry, position and statistics reports.
"""

import io

from rich.console import Console

from hdd_sim.analysis import (
    access_table,
    describe_position,
    geometry_table,
    get_geometry_summary,
    position_table,
    statistics_table,
)
from tests.fixtures import create_example_device, create_example_geometry


def render(renderable) -> str:
    """Render a rich object to plain text."""
    console = Console(file=io.StringIO(), width=160, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestGeometryReport:
    """Test geometry summaries."""

    def test_summary_text(self):
        """Test the plain-text summary lists the key numbers."""
        summary = get_geometry_summary(create_example_geometry())

        assert summary.startswith("Disk Geometry Summary")
        assert "Surfaces: 1" in summary
        assert "Sectors on Outermost Track: 8" in summary
        assert "Total Sectors: 12" in summary
        assert "(6,144 bytes)" in summary

    def test_geometry_table(self):
        """Test the rich table renders every parameter."""
        output = render(geometry_table(create_example_geometry()))

        assert "HDD Geometry" in output
        assert "Tracks/surface" in output
        assert "4.0000" in output
        assert "1000.000 ms" in output


class TestPositionReport:
    """Test decoded address reports."""

    def test_describe_position(self):
        """Test the structured breakdown of a decoded address."""
        geometry = create_example_geometry()
        position = geometry.decode(2048 + 7)

        details = describe_position(geometry, 2048 + 7, position)

        assert details == {
            'address': 2055,
            'block_index': 4,
            'surface': 0,
            'track': 1,
            'sector': 0,
            'track_sectors': 8,
            'max_access': 8,
        }

    def test_position_table(self):
        """Test the rich table for a decoded address."""
        geometry = create_example_geometry()
        output = render(position_table(geometry, 0x600, geometry.decode(0x600)))

        assert "Decode 0x600" in output
        assert "Max. access" in output


class TestAccessReports:
    """Test access and statistics tables."""

    def test_access_table(self):
        """Test one row per access."""
        device = create_example_device()
        first = device.access(0.0, 0, 512)
        second = device.access(first.end_ts, 4 * 512, 512)

        output = render(access_table([first, second]))

        assert "read" in output
        assert "0x800" in output
        assert "H0:T1:S0" in output

    def test_statistics_table(self):
        """Test statistics render with request counts."""
        device = create_example_device()
        device.read(0.0, 0, 512)
        device.write(1.0, 0, 512)

        output = render(statistics_table(device.statistics))

        assert "Access Statistics" in output
        assert "2 (1 read, 1 write)" in output
