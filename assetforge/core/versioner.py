"""Single-file versioning: one input file, minified and digested.

There is no pattern resolution and no retention sweep here: old
versions of single files accumulate in the output directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from assetforge.core.compiler import read_sources
from assetforge.core.errors import MinifyError, UnsupportedTypeError
from assetforge.core.hasher import content_digest
from assetforge.core.minifier import Minifier, minify
from assetforge.core.writer import VersionedWriter
from assetforge.models.artifacts import FileKind, single_file_artifact_name

logger = logging.getLogger(__name__)


def coerce_kind(file_type: FileKind | str) -> FileKind:
    """Map ``"css"`` / ``"js"`` (case-insensitive) to :class:`FileKind`."""
    if isinstance(file_type, FileKind):
        return file_type
    if isinstance(file_type, str):
        value = file_type.strip().lower()
        if value in {kind.value for kind in FileKind}:
            return FileKind(value)
    raise UnsupportedTypeError(file_type)


class SingleFileVersioner:
    """Writes a minified, content-named copy of one asset file."""

    def __init__(
        self,
        writer: VersionedWriter | None = None,
        minifier: Minifier | None = None,
    ) -> None:
        self._writer = writer or VersionedWriter()
        self._minify = minifier or minify

    def artifact_for(self, input_path: Path | str, file_type: FileKind | str) -> tuple[str, bytes]:
        """Compute ``(artifact_name, minified_bytes)`` without writing."""
        kind = coerce_kind(file_type)
        path = Path(input_path)
        raw = read_sources([path])
        try:
            minified = self._minify(raw, kind)
        except MinifyError as exc:
            raise MinifyError(exc.message, bundle=exc.bundle, path=path) from exc
        except Exception as exc:
            raise MinifyError(str(exc) or type(exc).__name__, path=path) from exc
        return single_file_artifact_name(path.stem, content_digest(minified), kind), minified

    def version_file(
        self,
        input_path: Path | str,
        output_dir: Path | str,
        file_type: FileKind | str,
    ) -> str:
        """Minify ``input_path`` into ``output_dir``; returns the artifact name.

        The type is checked before anything is read or written.
        """
        name, minified = self.artifact_for(input_path, file_type)
        self._writer.write(output_dir, name, minified)
        logger.debug("Versioned %s as %s", input_path, name)
        return name
