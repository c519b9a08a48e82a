"""
Error handling utilities for the HDD simulator.

Turns disk model exceptions into user-facing messages and severities for the
command line and for logs.
"""

from hdd_sim.core.errors import (
    AddressOutOfRangeError,
    ConfigurationError,
    DegenerateGeometryError,
    DiskModelError,
)


def handle_model_error(error: Exception, operation: str = "disk operation") -> str:
    """
    Build an actionable message for an error raised by the disk model.

    Args:
        error: Exception raised by the model or settings layer
        operation: Description of the operation that failed

    Returns:
        Formatted error message with a hint where one helps

    Example:
        >>> try:
        ...     device.read(0.0, device.capacity_bytes, 512)
        ... except DiskModelError as e:
        ...     print(handle_model_error(e, "read"))
        read failed: Address outside disk capacity [...]
        Valid addresses are 0..6143.
    """
    message = f"{operation} failed: {error}"

    if isinstance(error, DegenerateGeometryError):
        return (
            f"{message}\n"
            f"Increase sectors_innermost_track so every track holds at least one sector."
        )

    if isinstance(error, ConfigurationError):
        return f"{message}\nCheck the drive settings file or preset."

    if isinstance(error, AddressOutOfRangeError) and error.capacity:
        return f"{message}\nValid addresses are 0..{error.capacity - 1}."

    return message


def is_fatal_error(error: Exception) -> bool:
    """
    Determine if an error prevents any further use of the device.

    Configuration errors mean no device exists. An out-of-range request
    leaves the device untouched and usable.
    """
    return isinstance(error, ConfigurationError) or not isinstance(error, DiskModelError)


def get_error_severity(error: Exception) -> str:
    """
    Get the severity level of an error.

    Returns:
        Severity level: "critical" or "error"
    """
    if is_fatal_error(error):
        return "critical"
    return "error"
