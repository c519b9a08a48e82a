#!/usr/bin/env python3
"""
Packaging for the HDD simulator.

Supports standard pip installs, including editable ones (pip install -e .).
"""

from setuptools import setup, find_packages

setup(
    name="hdd-sim",
    version="1.0.0",
    description="Rotating disk (HDD) geometry and access-time model for storage simulators",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.26.0",
        "pydantic>=2.5.0",
        "rich>=13.7.0",
        "typer>=0.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "hdd-sim=hdd_sim.main:app",
        ],
    },
)
