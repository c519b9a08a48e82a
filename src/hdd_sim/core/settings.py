"""
Drive settings for the HDD simulator.

This module provides the configuration layer that sits in front of the disk
model: a validated settings model, JSON persistence, named presets, and the
platform-specific location of the user's settings file.

Features:
    - pydantic validation of every drive parameter
    - JSON load/save with clear ConfigurationError messages
    - Missing settings file falls back to the default drive
    - Named presets for quick experiments
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from hdd_sim.core.errors import ConfigurationError
from hdd_sim.core.geometry import BYTES_PER_SECTOR, DiskGeometry

# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# Settings File Paths
# =============================================================================

def get_settings_dir() -> Path:
    """
    Get the platform-specific settings directory.

    Platform paths:
        - Linux: ~/.config/hdd-sim/
        - Windows: %APPDATA%/HddSim/
        - macOS: ~/Library/Application Support/HddSim/
    """
    if sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
        return base / 'HddSim'
    elif sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'HddSim'
    else:
        xdg_config = os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config')
        return Path(xdg_config) / 'hdd-sim'


def get_settings_file() -> Path:
    """Get the default drive settings file path."""
    return get_settings_dir() / 'drive.json'


# =============================================================================
# Settings Model
# =============================================================================


class DriveSettings(BaseModel):
    """
    Validated drive parameters.

    Times are in seconds. The defaults describe a small four-surface drive
    spinning at 7200 rpm.

    Example:
        >>> settings = DriveSettings(tracks_per_surface=2048)
        >>> device = HardDiskDevice.from_settings(settings)
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    surfaces: int = Field(default=4, ge=1)
    tracks_per_surface: int = Field(default=1024, ge=2)
    sectors_innermost_track: int = Field(default=200, ge=1)
    sectors_outermost_track: int = Field(default=400, ge=1)
    rpm: int = Field(default=7200, ge=1)
    sector_size: int = Field(default=BYTES_PER_SECTOR, ge=1)
    seek_overhead: float = Field(default=0.002, ge=0.0, allow_inf_nan=False)
    seek_per_track: float = Field(default=0.00001, ge=0.0, allow_inf_nan=False)
    verbose: bool = False

    @model_validator(mode='after')
    def _check_zones(self) -> "DriveSettings":
        if self.sectors_outermost_track <= self.sectors_innermost_track:
            raise ValueError(
                "outermost track should contain more sectors than innermost"
            )
        return self

    def to_geometry(self) -> DiskGeometry:
        """Build the DiskGeometry these settings describe."""
        return DiskGeometry(
            surfaces=self.surfaces,
            tracks_per_surface=self.tracks_per_surface,
            sectors_innermost_track=self.sectors_innermost_track,
            sectors_outermost_track=self.sectors_outermost_track,
            rpm=self.rpm,
            sector_size=self.sector_size,
            seek_overhead=self.seek_overhead,
            seek_per_track=self.seek_per_track,
        )


PRESETS: Dict[str, DriveSettings] = {
    'default': DriveSettings(),
    'tiny': DriveSettings(
        surfaces=1,
        tracks_per_surface=2,
        sectors_innermost_track=4,
        sectors_outermost_track=8,
        rpm=7200,
        sector_size=512,
        seek_overhead=1.0,
        seek_per_track=0.1,
    ),
}


def _configuration_error(error: ValidationError, source: str) -> ConfigurationError:
    """Convert the first pydantic validation error into a ConfigurationError."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get('loc', ())) or None
    return ConfigurationError(
        f"Invalid drive settings in {source}: {first.get('msg', 'invalid value')}",
        parameter=location,
        value=first.get('input'),
    )


def make_settings(**values) -> DriveSettings:
    """
    Build DriveSettings from keyword values.

    Raises:
        ConfigurationError: If any value is invalid
    """
    try:
        return DriveSettings(**values)
    except ValidationError as e:
        raise _configuration_error(e, "arguments") from e


def get_preset(name: str) -> DriveSettings:
    """
    Look up a named preset.

    Raises:
        ConfigurationError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset (available: {', '.join(sorted(PRESETS))})",
            parameter='preset',
            value=name,
        ) from None


# =============================================================================
# Persistence
# =============================================================================


def load_settings(path: Optional[Union[str, Path]] = None) -> DriveSettings:
    """
    Load drive settings from a JSON file.

    Args:
        path: Settings file (default: get_settings_file())

    Returns:
        DriveSettings; the default drive when the file does not exist

    Raises:
        ConfigurationError: If the file is not valid JSON or holds invalid values
    """
    settings_path = Path(path) if path is not None else get_settings_file()

    if not settings_path.exists():
        logger.info(f"No settings file at {settings_path}, using defaults")
        return DriveSettings()

    try:
        data = json.loads(settings_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Settings file {settings_path} is not valid JSON: {e.msg} "
            f"(line {e.lineno})"
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file {settings_path} must contain a JSON object"
        )

    try:
        settings = DriveSettings.model_validate(data)
    except ValidationError as e:
        raise _configuration_error(e, str(settings_path)) from e

    logger.debug(f"Loaded settings from {settings_path}")
    return settings


def save_settings(settings: DriveSettings,
                  path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write drive settings as indented JSON.

    Returns:
        The path written to
    """
    settings_path = Path(path) if path is not None else get_settings_file()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(
        json.dumps(settings.model_dump(), indent=2) + "\n",
        encoding='utf-8',
    )

    logger.info(f"Saved settings to {settings_path}")
    return settings_path
