"""
Unit tests for the access-time model.

Tests seek_time, wait_time, sector_time and the track-crossing
transfer_time loop.
"""

import pytest

from hdd_sim.core import (
    AddressOutOfRangeError,
    PhysicalPosition,
    sector_time,
    seek_time,
    transfer_time,
    wait_time,
)
from tests.fixtures import create_example_geometry, create_two_surface_geometry


class TestSeekTime:
    """Test seek_time()."""

    @pytest.mark.parametrize("track", [0, 1, 57, 1023])
    def test_no_movement_is_free(self, track):
        """Test seeking to the current track costs nothing."""
        geometry = create_example_geometry()
        assert seek_time(geometry, track, track) == 0.0

    def test_overhead_plus_distance(self):
        """Test fixed overhead plus linear per-track cost."""
        geometry = create_two_surface_geometry()

        assert seek_time(geometry, 0, 1) == pytest.approx(0.006)
        assert seek_time(geometry, 0, 3) == pytest.approx(0.008)

    @pytest.mark.parametrize("a,b", [(0, 1), (3, 0), (10, 250)])
    def test_symmetric(self, a, b):
        """Test seeking in and out costs the same."""
        geometry = create_example_geometry()
        assert seek_time(geometry, a, b) == seek_time(geometry, b, a)


class TestWaitTime:
    """Test wait_time() and sector_time()."""

    def test_half_revolution(self):
        """Test average rotational latency equals 30 / rpm."""
        geometry = create_example_geometry()
        assert wait_time(geometry) == 30.0 / 7200

    def test_two_surface_wait(self):
        """Test latency at 6000 rpm."""
        geometry = create_two_surface_geometry()
        assert wait_time(geometry) == 30.0 / 6000

    def test_sector_time_depends_on_track(self):
        """Test outer tracks pass sectors faster."""
        geometry = create_example_geometry()

        assert sector_time(geometry, 0) == pytest.approx((60 / 7200) / 4)
        assert sector_time(geometry, 1) == pytest.approx((60 / 7200) / 8)
        assert sector_time(geometry, 1) < sector_time(geometry, 0)


class TestTransferTime:
    """Test transfer_time()."""

    def test_single_sector(self):
        """Test one sector costs one sector's share of a revolution."""
        geometry = create_example_geometry()

        result = transfer_time(geometry, PhysicalPosition(0, 0, 0), 1)

        assert result.elapsed == pytest.approx((60 / 7200) / 4)
        assert result.end_track == 0
        assert result.tracks_crossed == 0
        assert result.sectors == 1

    def test_zero_sectors(self):
        """Test an empty transfer takes no time and stays on track."""
        geometry = create_example_geometry()

        result = transfer_time(geometry, PhysicalPosition(0, 1, 3), 0)

        assert result.elapsed == 0.0
        assert result.end_track == 1
        assert result.tracks_crossed == 0

    def test_exactly_fills_track(self):
        """Test finishing on the last block of a track does not cross."""
        geometry = create_example_geometry()

        result = transfer_time(geometry, PhysicalPosition(0, 0, 0), 4)

        assert result.elapsed == pytest.approx(4 * (60 / 7200) / 4)
        assert result.end_track == 0
        assert result.tracks_crossed == 0

    def test_crossing_one_boundary(self):
        """Test one boundary adds exactly one seek plus one wait."""
        geometry = create_example_geometry()
        period = 60 / 7200

        result = transfer_time(geometry, PhysicalPosition(0, 0, 2), 4)

        expected = (
            2 * period / 4 +
            seek_time(geometry, 0, 1) + wait_time(geometry) +
            2 * period / 8
        )
        assert result.elapsed == pytest.approx(expected)
        assert result.end_track == 1
        assert result.tracks_crossed == 1

    def test_crossing_from_second_surface(self):
        """Test blocks left on a track count every remaining surface."""
        geometry = create_two_surface_geometry()
        period = 60 / 6000

        # Block 4 is sector 2, surface 0: blocks 4 and 5 remain on track 0
        result = transfer_time(geometry, geometry.decode(4 * 512), 5)

        expected = 2 * period / 3 + (0.006 + 0.005) + 3 * period / 4
        assert result.elapsed == pytest.approx(expected)
        assert result.end_track == 1

    def test_crossing_two_boundaries(self):
        """Test each boundary crossed is charged once."""
        geometry = create_two_surface_geometry()
        period = 60 / 6000
        step = seek_time(geometry, 0, 1) + wait_time(geometry)

        result = transfer_time(geometry, PhysicalPosition(0, 0, 0), 6 + 8 + 1)

        expected = 6 * period / 3 + step + 8 * period / 4 + step + period / 5
        assert result.elapsed == pytest.approx(expected)
        assert result.end_track == 2
        assert result.tracks_crossed == 2

    def test_full_track_costs_one_revolution_per_surface(self):
        """Test a whole track takes `surfaces` revolutions."""
        geometry = create_two_surface_geometry()

        result = transfer_time(geometry, PhysicalPosition(0, 2, 0), 10)

        assert result.elapsed == pytest.approx(2 * geometry.rotation_period)

    def test_runs_past_last_track(self):
        """Test running off the outermost track is out of range."""
        geometry = create_two_surface_geometry()

        # Block 30 leaves 6 blocks on the last track
        with pytest.raises(AddressOutOfRangeError):
            transfer_time(geometry, geometry.decode(30 * 512), 7)

    def test_negative_sectors(self):
        """Test a negative sector count is rejected."""
        geometry = create_example_geometry()

        with pytest.raises(ValueError):
            transfer_time(geometry, PhysicalPosition(0, 0, 0), -1)

    def test_invalid_start(self):
        """Test a start position off the disk is rejected."""
        geometry = create_example_geometry()

        with pytest.raises(AddressOutOfRangeError):
            transfer_time(geometry, PhysicalPosition(0, 0, 4), 1)
