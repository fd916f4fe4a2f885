"""Runtime settings: env-driven via pydantic-settings.

Reads from a .env file and ASSETFORGE_* environment variables. Bundle
definitions themselves live in the TOML file named by ``config_path``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildSettings(BaseSettings):
    """Build settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ASSETFORGE_OUTPUT_DIR=public/assets
        export ASSETFORGE_LOG_LEVEL=DEBUG
        export ASSETFORGE_SWEEP=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ASSETFORGE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    project_root: Path = Path(".")
    config_path: Path = Path("assetforge.toml")
    output_dir: Path = Path("static/dist")
    manifest_name: str = "manifest.json"  # empty disables the manifest

    # Behaviour
    sweep: bool = True
    skip_existing: bool = True

    # Observability
    log_level: str = "INFO"
