"""assetforge CLI: Typer-based command-line interface.

Provides the ``assetforge`` command with subcommands for building
bundles, checking their status, versioning single files and sweeping
superseded artifacts.

All output uses Rich for formatted terminal display.
"""
