"""``assetforge version-file INPUT --type css|js``: version one file.

Prints the artifact name plainly for scripting. Old versions of the file
are left in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from assetforge.cli.commands._common import console, fail, load_settings, locate_output_dir
from assetforge.core.errors import AssetForgeError
from assetforge.core.versioner import SingleFileVersioner


def version_file_cmd(
    input_path: Path = typer.Argument(..., help="File to minify and version."),
    file_type: str = typer.Option(..., "--type", "-t", help="Asset type: css or js."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for the artifact."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Bundle configuration file (TOML)."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Project root the default output directory is relative to."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Minify a single file and write it under its content-hashed name."""
    settings = load_settings(verbose)
    try:
        output_dir = locate_output_dir(settings, config=config, root=root, output=output)
        name = SingleFileVersioner().version_file(input_path, output_dir, file_type)
    except AssetForgeError as exc:
        fail(exc)
    console.print(name, highlight=False)
