"""
Unit tests for drive settings.

Tests validation, presets, JSON persistence and settings paths.
"""

import json
import sys

import pytest

from hdd_sim.core import (
    ConfigurationError,
    DriveSettings,
    HardDiskDevice,
    PRESETS,
    get_preset,
    get_settings_dir,
    get_settings_file,
    load_settings,
    make_settings,
    save_settings,
)


class TestDriveSettings:
    """Test the settings model."""

    def test_defaults_build_a_device(self):
        """Test the default drive is a valid geometry."""
        settings = DriveSettings()
        device = HardDiskDevice.from_settings(settings)

        assert device.geometry.surfaces == 4
        assert device.geometry.tracks_per_surface == 1024
        assert device.geometry.sectors_per_track(0) == 200
        assert device.verbose is False

    def test_to_geometry(self):
        """Test settings map one-to-one onto geometry fields."""
        settings = make_settings(surfaces=2, rpm=5400, seek_overhead=0.003)
        geometry = settings.to_geometry()

        assert geometry.surfaces == 2
        assert geometry.rpm == 5400
        assert geometry.seek_overhead == 0.003

    def test_inverted_zones(self):
        """Test outer <= inner sectors is a configuration error."""
        with pytest.raises(ConfigurationError):
            make_settings(sectors_innermost_track=400, sectors_outermost_track=200)

    def test_single_track(self):
        """Test fewer than two tracks is rejected."""
        with pytest.raises(ConfigurationError) as excinfo:
            make_settings(tracks_per_surface=1)

        assert excinfo.value.parameter == "tracks_per_surface"

    @pytest.mark.parametrize("field", ["rpm", "surfaces", "sector_size"])
    def test_zero_values(self, field):
        """Test zero counts are rejected."""
        with pytest.raises(ConfigurationError):
            make_settings(**{field: 0})

    def test_negative_seek(self):
        """Test negative seek costs are rejected."""
        with pytest.raises(ConfigurationError):
            make_settings(seek_per_track=-1.0)

    def test_unknown_field(self):
        """Test typos in field names are not silently ignored."""
        with pytest.raises(ConfigurationError):
            make_settings(rmp=7200)


class TestPresets:
    """Test named presets."""

    def test_tiny_preset(self):
        """Test the tiny preset is the two-track example drive."""
        geometry = get_preset("tiny").to_geometry()

        assert geometry.capacity_bytes == 6144
        assert geometry.seek_overhead == 1.0

    def test_all_presets_valid(self):
        """Test every preset builds a geometry."""
        for name, settings in PRESETS.items():
            assert settings.to_geometry().capacity_bytes > 0, name

    def test_unknown_preset(self):
        """Test unknown preset names raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as excinfo:
            get_preset("floppy")

        assert excinfo.value.value == "floppy"


class TestPersistence:
    """Test JSON load/save."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing settings file falls back to the default drive."""
        assert load_settings(tmp_path / "absent.json") == DriveSettings()

    def test_save_then_load(self, tmp_path):
        """Test saved settings load back unchanged."""
        path = tmp_path / "nested" / "drive.json"
        settings = get_preset("tiny")

        written = save_settings(settings, path)

        assert written == path
        assert load_settings(path) == settings

    def test_partial_file(self, tmp_path):
        """Test omitted fields take their defaults."""
        path = tmp_path / "drive.json"
        path.write_text(json.dumps({"rpm": 10000}))

        settings = load_settings(path)

        assert settings.rpm == 10000
        assert settings.surfaces == DriveSettings().surfaces

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is a configuration error."""
        path = tmp_path / "drive.json"
        path.write_text("{ not json")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_settings(path)

    def test_non_object_json(self, tmp_path):
        """Test JSON that is not an object is rejected."""
        path = tmp_path / "drive.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_invalid_values(self, tmp_path):
        """Test invalid values name the offending field."""
        path = tmp_path / "drive.json"
        path.write_text(json.dumps({"rpm": 0}))

        with pytest.raises(ConfigurationError) as excinfo:
            load_settings(path)

        assert excinfo.value.parameter == "rpm"


class TestSettingsPaths:
    """Test settings file locations."""

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        """Test XDG_CONFIG_HOME is honoured on Linux."""
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_settings_dir() == tmp_path / "hdd-sim"
        assert get_settings_file() == tmp_path / "hdd-sim" / "drive.json"
