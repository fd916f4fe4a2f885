"""Bundle configuration loading from TOML.

Two layouts are accepted::

    # assetforge.toml
    output_dir = "static/dist"

    [[bundles]]
    name = "app"
    patterns = ["js/vendor/*.js", "js/app.js"]

    # pyproject.toml
    [[tool.assetforge.bundles]]
    name = "app"
    patterns = ["js/app.js"]

Relative ``output_dir`` values are made absolute against the config
file's directory.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from assetforge.core.errors import ConfigError
from assetforge.models.bundles import BundleConfig

logger = logging.getLogger(__name__)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def parse_bundle_config(data: dict[str, Any], *, source: Path | str = "<memory>") -> BundleConfig:
    """Validate an already-parsed TOML document."""
    source = Path(source)
    if source.name == "pyproject.toml":
        data = data.get("tool", {}).get("assetforge")
        if data is None:
            raise ConfigError(source, "missing [tool.assetforge] table")
    if not isinstance(data, dict):
        raise ConfigError(source, "configuration must be a table")

    try:
        config = BundleConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(source, _format_validation_error(exc)) from exc

    if config.output_dir is not None and not config.output_dir.is_absolute():
        config = config.model_copy(update={"output_dir": source.absolute().parent / config.output_dir})
    return config


def load_bundle_config(path: Path | str) -> BundleConfig:
    """Read and validate the bundle configuration at ``path``.

    Raises
    ------
    ConfigError
        File missing or unreadable, invalid TOML, or invalid bundle entries.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(path, f"cannot read file ({exc.strerror or exc})") from exc

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(path, f"invalid TOML ({exc})") from exc

    config = parse_bundle_config(data, source=path)
    logger.debug("Loaded %d bundle(s) from %s", len(config.bundles), path)
    return config
