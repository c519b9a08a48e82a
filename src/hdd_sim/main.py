"""
Command line interface for the HDD simulator.

Commands:
    info         Show the geometry of the configured drive
    decode       Decode a byte address into surface/track/sector
    access       Run ADDRESS:SIZE requests back to back on one device
    init-config  Write a settings file to start from
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from hdd_sim.analysis.reporter import (
    access_table,
    geometry_table,
    position_table,
    statistics_table,
)
from hdd_sim.core.device import HardDiskDevice, Operation
from hdd_sim.core.errors import DiskModelError
from hdd_sim.core.settings import (
    DriveSettings,
    get_preset,
    load_settings,
    save_settings,
)
from hdd_sim.utils.error_handler import handle_model_error
from hdd_sim.utils.logging import log_device_info, log_error, setup_logging

app = typer.Typer(
    name="hdd-sim",
    help="""HDD Simulator - rotating disk timing model

Decode byte addresses on a zoned-recording disk and time sequential accesses.

Quick start:
  hdd-sim info                        # Show the default drive
  hdd-sim decode 0x1000               # Where does an address live?
  hdd-sim access 0:4096 0x100000:512  # Time a few requests
""",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed hexadecimal integer."""
    try:
        return int(text, 0)
    except ValueError:
        raise typer.BadParameter(f"not an integer: {text!r}") from None


def parse_request(text: str) -> Tuple[int, int]:
    """Parse an ADDRESS:SIZE request."""
    address, sep, size = text.partition(":")
    if not sep:
        raise typer.BadParameter(f"expected ADDRESS:SIZE, got {text!r}")
    nbytes = parse_int(size)
    if nbytes < 0:
        raise typer.BadParameter(f"size must be non-negative, got {nbytes}")
    return parse_int(address), nbytes


def _resolve_settings(config: Optional[Path], preset: Optional[str]) -> DriveSettings:
    if preset is not None:
        return get_preset(preset)
    return load_settings(config)


def _fail(error: Exception, operation: str) -> None:
    log_error(operation, error, logger=logger)
    console.print(f"[bold red]{escape(handle_model_error(error, operation))}[/bold red]")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every access"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """HDD Simulator - rotating disk timing model."""
    ctx.obj = {"verbose": verbose}
    setup_logging(str(log_file) if log_file else None,
                  level=logging.INFO if verbose else logging.WARNING)


@app.command()
def info(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Drive settings JSON file (default: user settings file)"
    ),
    preset: Optional[str] = typer.Option(
        None, "--preset", "-p", help="Use a named preset instead of a settings file"
    ),
):
    """Show the geometry of the configured drive."""
    try:
        geometry = _resolve_settings(config, preset).to_geometry()
    except DiskModelError as e:
        _fail(e, "info")

    log_device_info(geometry, logger=logger)
    console.print(geometry_table(geometry))


@app.command()
def decode(
    address: str = typer.Argument(..., help="Byte address (decimal or 0x hex)"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Drive settings JSON file (default: user settings file)"
    ),
    preset: Optional[str] = typer.Option(
        None, "--preset", "-p", help="Use a named preset instead of a settings file"
    ),
):
    """Decode a byte address into surface, track and sector."""
    value = parse_int(address)
    try:
        geometry = _resolve_settings(config, preset).to_geometry()
        position = geometry.decode(value)
    except DiskModelError as e:
        _fail(e, "decode")

    console.print(position_table(geometry, value, position))


@app.command()
def access(
    ctx: typer.Context,
    requests: List[str] = typer.Argument(..., help="Requests as ADDRESS:SIZE"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Drive settings JSON file (default: user settings file)"
    ),
    preset: Optional[str] = typer.Option(
        None, "--preset", "-p", help="Use a named preset instead of a settings file"
    ),
    ts: float = typer.Option(0.0, "--ts", help="Timestamp of the first request (s)"),
    write: bool = typer.Option(False, "--write", "-w", help="Issue writes instead of reads"),
):
    """
    Run requests back to back on one device.

    Each request is issued when the previous one completes, starting at --ts.
    """
    parsed = [parse_request(text) for text in requests]
    operation = Operation.WRITE if write else Operation.READ

    try:
        device = HardDiskDevice.from_settings(_resolve_settings(config, preset))
    except DiskModelError as e:
        _fail(e, "access")

    if ctx.obj and ctx.obj.get("verbose"):
        device.verbose = True

    results = []
    now = ts
    for address, size in parsed:
        try:
            result = device.access(now, address, size, operation)
        except DiskModelError as e:
            console.print(access_table(results))
            _fail(e, operation.value)
        results.append(result)
        now = result.end_ts

    console.print(access_table(results))
    console.print(statistics_table(device.statistics))
    console.print(f"Completed at [bold]{now:.6f} s[/bold], head on track {device.head_track}")


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(..., help="Where to write the settings file"),
    preset: str = typer.Option("default", "--preset", "-p", help="Preset to start from"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a drive settings file to start from."""
    if path.exists() and not force:
        console.print(f"[yellow]{escape(str(path))} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        settings = get_preset(preset)
    except DiskModelError as e:
        _fail(e, "init-config")

    save_settings(settings, path)
    console.print(f"[green]Wrote {preset} settings to {escape(str(path))}[/green]")


if __name__ == "__main__":
    app()
