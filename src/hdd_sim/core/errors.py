"""
Exception hierarchy for the rotating disk model.

Exceptions:
    DiskModelError: Base exception for all disk model errors
    ConfigurationError: Invalid drive parameters at construction time
    DegenerateGeometryError: A reachable track would hold zero sectors
    AddressOutOfRangeError: Address (or transfer) outside the disk capacity
"""

from typing import Any, Optional


class DiskModelError(Exception):
    """Base exception for all disk model errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class ConfigurationError(DiskModelError):
    """Raised when drive parameters do not describe a usable disk."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None):
        self.parameter = parameter
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.parameter is not None:
            return f"{base} [{self.parameter}={self.value!r}]"
        return base


class DegenerateGeometryError(ConfigurationError):
    """Raised when the sector interpolation yields an empty track."""

    def __init__(self, message: str, track: Optional[int] = None,
                 sectors: Optional[int] = None):
        self.track = track
        self.sectors = sectors
        super().__init__(message)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.track is not None:
            return f"{base} [Track: {self.track}, sectors: {self.sectors}]"
        return base


class AddressOutOfRangeError(DiskModelError):
    """Raised when an address or transfer falls outside the disk."""

    def __init__(self, message: str, address: Optional[int] = None,
                 capacity: Optional[int] = None):
        self.address = address
        self.capacity = capacity
        super().__init__(message)

    def _format_message(self) -> str:
        base = super()._format_message()
        parts = []
        if self.address is not None:
            parts.append(f"Address: 0x{self.address:X}")
        if self.capacity is not None:
            parts.append(f"capacity: {self.capacity:,} bytes")
        if parts:
            return f"{base} [{', '.join(parts)}]"
        return base
