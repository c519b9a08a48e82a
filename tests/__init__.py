"""
Test suite for the HDD simulator.

This package contains:
- Unit tests for geometry, timing, device, settings and reporting
- Integration tests for complete access workloads
- Drive fixtures with hand-checked layouts
"""
