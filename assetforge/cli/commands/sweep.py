"""``assetforge sweep BUNDLE CURRENT``: manual retention pass."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from assetforge.cli.commands._common import console, fail, load_settings, locate_output_dir
from assetforge.core.errors import AssetForgeError
from assetforge.core.sweeper import RetentionSweeper


def sweep_cmd(
    bundle: str = typer.Argument(..., help="Bundle name."),
    current: str = typer.Argument(..., help="Artifact filename to keep."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory to sweep."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Bundle configuration file (TOML)."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Project root the default output directory is relative to."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Delete every artifact of BUNDLE except CURRENT."""
    settings = load_settings(verbose)
    try:
        output_dir = locate_output_dir(settings, config=config, root=root, output=output)
        deleted = RetentionSweeper().sweep(output_dir, bundle, current)
    except AssetForgeError as exc:
        fail(exc)
    console.print(f"Removed {deleted} stale artifact(s) for [cyan]{bundle}[/cyan].")
