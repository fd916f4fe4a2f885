"""Bundle oracle: read-only answers about the current artifact.

Nothing here writes. ``current_artifact`` recompiles the bundle from
source every time; there is no digest cache between calls.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from assetforge.core.compiler import BundleCompiler
from assetforge.core.errors import StatError
from assetforge.models.bundles import BundleSpec

logger = logging.getLogger(__name__)


class BundleOracle:
    """Tells callers whether a bundle's current version is already on disk."""

    def __init__(self, compiler: BundleCompiler) -> None:
        self._compiler = compiler

    def current_artifact(self, spec: BundleSpec) -> str:
        """Return the artifact name the bundle would be written under now."""
        return self._compiler.compile(spec).artifact_name

    def exists(self, output_dir: Path | str, artifact_name: str) -> bool:
        """Check for a regular file at exactly ``output_dir/artifact_name``.

        A missing directory counts as absent. Any other stat failure
        raises :class:`StatError`.
        """
        path = Path(output_dir) / artifact_name
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise StatError(path, str(exc)) from exc
        return stat.S_ISREG(st.st_mode)

    def is_current(self, spec: BundleSpec, output_dir: Path | str) -> tuple[str, bool]:
        """Return ``(artifact_name, exists)`` for ``spec``."""
        name = self.current_artifact(spec)
        present = self.exists(output_dir, name)
        logger.debug("Bundle %r current artifact %s present=%s", spec.name, name, present)
        return name, present
