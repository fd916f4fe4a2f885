"""Shared CLI plumbing: settings resolution, logging setup, error reporting."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from assetforge.config import BuildSettings
from assetforge.core.config_loader import load_bundle_config
from assetforge.core.errors import AssetForgeError
from assetforge.core.pipeline import AssetPipeline
from assetforge.models.bundles import BundleConfig

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Route log records through rich; called once per CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def fail(exc: AssetForgeError) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(code=1)


def load_settings(verbose: bool = False) -> BuildSettings:
    settings = BuildSettings()
    configure_logging(settings.log_level, verbose=verbose)
    return settings


def project_root_for(settings: BuildSettings, root: Optional[Path]) -> Path:
    return (root or settings.project_root).resolve()


def resolve_config_path(settings: BuildSettings, root: Path, config: Optional[Path]) -> Path:
    if config is not None:
        return config
    if settings.config_path.is_absolute():
        return settings.config_path
    return root / settings.config_path


def resolve_output_dir(
    settings: BuildSettings,
    root: Path,
    output: Optional[Path],
    bundle_config: Optional[BundleConfig] = None,
) -> Path:
    """Pick the output directory as an absolute path.

    Precedence: ``--output`` (relative to the working directory), then
    ``output_dir`` in the bundle config, then ``ASSETFORGE_OUTPUT_DIR`` /
    the default (relative to the project root).
    """
    if output is not None:
        return output.resolve()
    if bundle_config is not None and bundle_config.output_dir is not None:
        return bundle_config.output_dir
    return root / settings.output_dir


def locate_output_dir(
    settings: BuildSettings,
    *,
    config: Optional[Path],
    root: Optional[Path],
    output: Optional[Path],
) -> Path:
    """Output directory for commands that do not build bundles.

    The bundle config is consulted when present; it is required only
    when named explicitly with ``--config``.
    """
    project_root = project_root_for(settings, root)
    if output is not None:
        return resolve_output_dir(settings, project_root, output)
    config_path = resolve_config_path(settings, project_root, config)
    bundle_config = None
    if config is not None or config_path.is_file():
        bundle_config = load_bundle_config(config_path)
    return resolve_output_dir(settings, project_root, None, bundle_config)


def open_project(
    settings: BuildSettings,
    *,
    config: Optional[Path],
    root: Optional[Path],
    output: Optional[Path],
    sweep: bool = True,
    force: bool = False,
) -> tuple[AssetPipeline, BundleConfig]:
    """Load the bundle config and build a pipeline for it."""
    project_root = project_root_for(settings, root)
    bundle_config = load_bundle_config(resolve_config_path(settings, project_root, config))
    pipeline = AssetPipeline(
        project_root,
        resolve_output_dir(settings, project_root, output, bundle_config),
        sweep=sweep and settings.sweep,
        skip_existing=settings.skip_existing and not force,
        manifest_name=settings.manifest_name,
    )
    return pipeline, bundle_config
