"""Versioned artifact writer: atomic temp-file-then-rename writes.

A reader of ``output_dir/artifact_name`` sees either nothing (or the
previous file) or the complete new file, never a partial one. The
temporary file lives in the same directory so the rename never crosses
a filesystem boundary.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from assetforge.core.errors import DirCreateError, WriteError

logger = logging.getLogger(__name__)

# Published artifacts are world-readable; mkstemp would leave them 0600.
ARTIFACT_MODE = 0o644

# Fixed and short so the temporary name fits wherever the artifact name does.
TEMP_PREFIX = ".assetforge-"


def ensure_dir(directory: Path) -> None:
    """Create ``directory`` and its parents if missing."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirCreateError(directory, str(exc)) from exc
    if not directory.is_dir():
        raise DirCreateError(directory, "exists and is not a directory")


class VersionedWriter:
    """Writes artifacts under their final names in one atomic step."""

    def write(self, output_dir: Path | str, artifact_name: str, data: bytes) -> Path:
        """Write ``data`` to ``output_dir/artifact_name``; returns the final path.

        Raises
        ------
        DirCreateError
            ``output_dir`` could not be created.
        WriteError
            The temporary file could not be written or renamed into place.
            The temporary file is removed and the final path is untouched.
        """
        if not artifact_name or Path(artifact_name).name != artifact_name or artifact_name == "..":
            raise WriteError(Path(output_dir) / artifact_name, "artifact name must be a plain filename")

        directory = Path(output_dir)
        ensure_dir(directory)
        target = directory / artifact_name

        try:
            with tempfile.NamedTemporaryFile(
                dir=directory, prefix=TEMP_PREFIX, suffix=".tmp", delete=False
            ) as handle:
                temp_path = Path(handle.name)
        except OSError as exc:
            raise WriteError(target, str(exc)) from exc

        try:
            with open(temp_path, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(temp_path, ARTIFACT_MODE)
            os.replace(temp_path, target)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise WriteError(target, str(exc)) from exc
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s (%d bytes)", target, len(data))
        return target
