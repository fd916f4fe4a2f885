"""``assetforge build``: build every configured bundle.

Compiles each bundle, writes its content-named artifact unless the
current version is already present, sweeps superseded versions and
writes the manifest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from assetforge.cli.commands._common import console, fail, load_settings, open_project
from assetforge.core.errors import AssetForgeError


def build_cmd(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Bundle configuration file (TOML)."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Project root that bundle patterns are relative to."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for artifacts."
    ),
    sweep: bool = typer.Option(
        True, "--sweep/--no-sweep", help="Remove superseded artifacts after building."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Rewrite artifacts even if already current."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Build all bundles and print the resulting artifact names."""
    settings = load_settings(verbose)
    try:
        pipeline, bundle_config = open_project(
            settings, config=config, root=root, output=output, sweep=sweep, force=force
        )
        results = pipeline.build_all(bundle_config)
    except AssetForgeError as exc:
        fail(exc)

    if not results:
        console.print("[dim]No bundles configured.[/dim]")
        return

    table = Table(title=f"Bundles -> {pipeline.output_dir}")
    table.add_column("Bundle", style="cyan")
    table.add_column("Artifact", style="green")
    table.add_column("Size", justify="right")
    table.add_column("Written", justify="center")
    table.add_column("Swept", justify="right")

    for r in results:
        written = "[green]Yes[/green]" if r.written else "[dim]current[/dim]"
        table.add_row(r.bundle, r.artifact_name, str(r.size_bytes), written, str(r.swept))

    console.print(table)
