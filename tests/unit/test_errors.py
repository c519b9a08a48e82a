"""
Unit tests for the exception hierarchy and error messages.
"""

import pytest

from hdd_sim.core import (
    AddressOutOfRangeError,
    ConfigurationError,
    DegenerateGeometryError,
    DiskModelError,
)
from hdd_sim.utils import get_error_severity, handle_model_error, is_fatal_error


class TestExceptions:
    """Test exception formatting and hierarchy."""

    def test_configuration_error_message(self):
        """Test the offending parameter is appended."""
        error = ConfigurationError("rpm must be positive", "rpm", 0)

        assert str(error) == "rpm must be positive [rpm=0]"
        assert error.message == "rpm must be positive"

    def test_degenerate_geometry_message(self):
        """Test the empty track is named."""
        error = DegenerateGeometryError("empty track", track=0, sectors=0)

        assert str(error) == "empty track [Track: 0, sectors: 0]"
        assert isinstance(error, ConfigurationError)

    def test_address_error_message(self):
        """Test address and capacity are appended."""
        error = AddressOutOfRangeError("outside", address=0x1800, capacity=6144)

        assert str(error) == "outside [Address: 0x1800, capacity: 6,144 bytes]"

    @pytest.mark.parametrize("error", [
        ConfigurationError("x"),
        DegenerateGeometryError("x"),
        AddressOutOfRangeError("x"),
    ])
    def test_common_base(self, error):
        """Test every model error shares one base class."""
        assert isinstance(error, DiskModelError)
        assert str(error) == "x"


class TestErrorHandler:
    """Test user-facing error messages."""

    def test_address_hint(self):
        """Test out-of-range errors show the valid address range."""
        error = AddressOutOfRangeError("outside", address=6144, capacity=6144)

        message = handle_model_error(error, "read")

        assert message.startswith("read failed: outside")
        assert "Valid addresses are 0..6143." in message

    def test_configuration_hint(self):
        """Test configuration errors point at the settings."""
        message = handle_model_error(ConfigurationError("bad"), "info")
        assert "Check the drive settings" in message

    def test_degenerate_hint(self):
        """Test degenerate geometry suggests a fix."""
        message = handle_model_error(DegenerateGeometryError("empty", track=0, sectors=0))
        assert "sectors_innermost_track" in message

    def test_severity(self):
        """Test configuration errors are fatal, address errors are not."""
        assert is_fatal_error(ConfigurationError("bad"))
        assert not is_fatal_error(AddressOutOfRangeError("outside"))
        assert get_error_severity(ConfigurationError("bad")) == "critical"
        assert get_error_severity(AddressOutOfRangeError("outside")) == "error"
