"""CLI commands for inspecting and freezing resolved configuration."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config_station.domain.models.config import ConfigSources, MappingConfig
from config_station.infrastructure.writers.file_writer import ConfigWriter
from config_station.settings.loader import Settings, load_settings
from config_station.station import ConfigStation
from config_station.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)
app = typer.Typer(help="Resolve configuration from a JSON file and prefixed environment variables.")


@dataclass
class AppContext:
    """Holds process-wide settings shared by CLI commands."""

    settings: Settings


def _init_context(debug_override: Optional[bool] = None) -> AppContext:
    settings = load_settings(debug_override=debug_override)
    configure_logging(debug=settings.debug, level=settings.log_level)
    return AppContext(settings=settings)


@app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Optional[bool] = typer.Option(
        None,
        "--debug/--no-debug",
        help="Temporarily toggle verbose logging without touching environment variables.",
    ),
) -> None:
    """Attach the application context to Typer."""
    ctx.obj = _init_context(debug_override=debug)


@app.command()
def inspect(
    env_key: str = typer.Argument(..., help="Environment prefix, e.g. MYAPP"),
    location: Optional[Path] = typer.Option(None, "--location", "-l", help="Config file to read."),
    trace: bool = typer.Option(False, "--trace", help="Emit the per-source debug trace."),
) -> None:
    """Show the merged configuration and where each value came from."""
    station = _build_station(env_key, location, trace)
    sources = station.read_sources()
    _print_sources(station, sources)


@app.command()
def freeze(
    env_key: str = typer.Argument(..., help="Environment prefix, e.g. MYAPP"),
    location: Optional[Path] = typer.Option(None, "--location", "-l", help="Config file to read."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the merged config. Defaults to the resolved location.",
    ),
) -> None:
    """Write the merged file + environment configuration back as JSON."""
    station = _build_station(env_key, location, False)
    config = station.load()
    target = output or (Path(station.location) if station.location else None)
    if target is None:
        console.print("[red]No location resolved; pass --location or --output.[/red]")
        raise typer.Exit(code=1)

    if output is None:
        station.store(config)
    else:
        ConfigWriter(output).write(config.serialize())
    logger.debug("Froze %d keys for %s", len(config.as_dict()), env_key)
    console.print(f"Config written to {target}")


def _build_station(env_key: str, location: Optional[Path], trace: bool) -> ConfigStation:
    try:
        return ConfigStation(
            env_key,
            MappingConfig,
            location=str(location) if location else None,
            debug=trace or None,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc


def _print_sources(station: ConfigStation, sources: ConfigSources) -> None:
    table = Table(title=f"{station.env_key} configuration", show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_column("Source")

    for key in sorted(sources.merged):
        table.add_row(key, str(sources.merged[key]), sources.origin(key))

    console.print(f"Location: {station.location or 'N/A'}")
    if sources.file.failed:
        console.print(f"[yellow]File not used: {sources.file.error}[/yellow]")
    console.print(table)
