"""Asset manifest: maps each bundle name to its current artifact filename.

Templating layers read this to emit cache-busted ``<script>`` tags. The
file is canonical JSON, so an unchanged build produces identical bytes.
"""

from __future__ import annotations

import json
from pathlib import Path

from assetforge.core.errors import ReadError
from assetforge.core.hasher import canonical_json_bytes
from assetforge.core.writer import VersionedWriter
from assetforge.models.artifacts import BuildResult


def manifest_entries(results: list[BuildResult]) -> dict[str, str]:
    return {r.bundle: r.artifact_name for r in results}


def write_manifest(
    output_dir: Path | str,
    results: list[BuildResult],
    *,
    name: str = "manifest.json",
    writer: VersionedWriter | None = None,
) -> Path:
    """Atomically write the manifest for ``results``."""
    writer = writer or VersionedWriter()
    return writer.write(output_dir, name, canonical_json_bytes(manifest_entries(results)))


def read_manifest(path: Path | str) -> dict[str, str]:
    """Load a previously written manifest."""
    try:
        return json.loads(Path(path).read_bytes())
    except (OSError, ValueError) as exc:
        raise ReadError(path) from exc
