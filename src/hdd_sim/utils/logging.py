"""
Logging configuration for the HDD simulator.

Provides console/file logging setup and small helpers so every module logs
operations in the same shape.
"""

import logging
import platform
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> None:
    """
    Configure logging for the application.

    Logs to the console at `level`. When `log_file` is given, everything
    down to DEBUG is also written to that file.

    Args:
        log_file: Optional path to a log file
        level: Console logging level (default: logging.INFO)

    Example:
        >>> setup_logging(level=logging.DEBUG)
        >>> logging.getLogger("hdd_sim").info("Simulation started")
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
    handlers = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    # Replaces handlers from any earlier call
    logging.basicConfig(
        level=logging.DEBUG if log_file else level,
        handlers=handlers,
        force=True,
    )

    if log_file:
        log_system_info()


def log_system_info() -> None:
    """Log interpreter and platform details for troubleshooting."""
    logging.info("=" * 60)
    logging.info("HDD Simulator - System Information")
    logging.info("=" * 60)
    logging.info(f"Platform: {platform.system()} {platform.release()}")
    logging.info(f"Machine: {platform.machine()}")
    logging.info(f"Python version: {sys.version}")
    logging.info("=" * 60)


def log_operation(operation: str, details: str, level: int = logging.INFO,
                  logger: Optional[logging.Logger] = None) -> None:
    """
    Log a disk operation with details.

    Args:
        operation: Name of the operation (e.g., "read", "decode")
        details: Additional details about the operation
        level: Logging level (default: logging.INFO)
        logger: Logger to use (default: the root logger)

    Example:
        >>> log_operation("read", "address=0x0 size=0x200 -> 0.0062")
    """
    (logger or logging.getLogger()).log(level, f"{operation}: {details}")


def log_error(operation: str, error: Exception,
              logger: Optional[logging.Logger] = None) -> None:
    """
    Log an error with operation context.

    Example:
        >>> log_error("decode", AddressOutOfRangeError("Address outside disk"))
    """
    (logger or logging.getLogger()).error(
        f"{operation} failed - {type(error).__name__}: {error}"
    )


def log_device_info(geometry, logger: Optional[logging.Logger] = None) -> None:
    """
    Log the geometry of a simulated drive.

    Args:
        geometry: DiskGeometry object
        logger: Logger to use (default: the root logger)
    """
    log = logger or logging.getLogger()
    log.info(
        f"Geometry: {geometry.surfaces} surfaces, "
        f"{geometry.tracks_per_surface} tracks/surface, "
        f"{geometry.sectors_innermost_track}-{geometry.sectors_outermost_track} "
        f"sectors/track ({geometry.sector_size} bytes/sector)"
    )
    log.info(
        f"Capacity: {geometry.total_sectors} sectors "
        f"({geometry.capacity_gb:.3f} GB), {geometry.rpm} rpm"
    )
