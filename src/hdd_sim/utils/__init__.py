"""
Utility functions for the HDD simulator: logging setup and error messages.
"""

from hdd_sim.utils.logging import (
    setup_logging,
    log_system_info,
    log_operation,
    log_error,
    log_device_info,
)

from hdd_sim.utils.error_handler import (
    handle_model_error,
    is_fatal_error,
    get_error_severity,
)

__all__ = [
    # Logging
    "setup_logging",
    "log_system_info",
    "log_operation",
    "log_error",
    "log_device_info",

    # Error handling
    "handle_model_error",
    "is_fatal_error",
    "get_error_severity",
]
