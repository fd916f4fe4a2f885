"""Main Typer application: imports and registers all CLI commands.

Entry point: ``assetforge`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

from pathlib import Path

import typer

from assetforge.cli.commands.build import build_cmd
from assetforge.cli.commands.status import status_cmd
from assetforge.cli.commands.sweep import sweep_cmd
from assetforge.cli.commands.version_file import version_file_cmd

app = typer.Typer(
    name="assetforge",
    help="assetforge: content-hashed JavaScript/CSS bundles for cache busting.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="build", help="Build all configured bundles.")(build_cmd)
app.command(name="status", help="Show whether each bundle's current version exists.")(status_cmd)
app.command(name="version-file", help="Minify and version a single CSS or JS file.")(version_file_cmd)
app.command(name="sweep", help="Delete superseded artifacts of one bundle.")(sweep_cmd)


@app.command(name="hash", help="Print the content digest of a file.")
def hash_cmd(
    path: Path = typer.Argument(..., help="File to hash (raw bytes, no minification)."),
) -> None:
    """Print the 8-character base-36 digest of PATH's bytes."""
    from assetforge.cli.commands._common import console, fail
    from assetforge.core.compiler import read_sources
    from assetforge.core.errors import AssetForgeError
    from assetforge.core.hasher import content_digest

    try:
        data = read_sources([path])
    except AssetForgeError as exc:
        fail(exc)
    console.print(content_digest(data), highlight=False)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
