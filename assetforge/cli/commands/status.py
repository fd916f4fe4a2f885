"""``assetforge status``: show each bundle's current artifact without writing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from assetforge.cli.commands._common import console, fail, load_settings, open_project
from assetforge.core.errors import AssetForgeError


def status_cmd(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Bundle configuration file (TOML)."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Project root that bundle patterns are relative to."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for artifacts."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Report whether each bundle's current version is already built."""
    settings = load_settings(verbose)
    try:
        pipeline, bundle_config = open_project(settings, config=config, root=root, output=output)
        rows = pipeline.status(bundle_config)
    except AssetForgeError as exc:
        fail(exc)

    table = Table(title=f"Bundle status ({pipeline.output_dir})")
    table.add_column("Bundle", style="cyan")
    table.add_column("Current artifact")
    table.add_column("Built", justify="center")

    stale = 0
    for bundle, artifact, present in rows:
        if not present:
            stale += 1
        table.add_row(bundle, artifact, "[green]Yes[/green]" if present else "[yellow]No[/yellow]")

    console.print(table)
    if stale:
        console.print(f"[yellow]{stale} bundle(s) need building.[/yellow]")
