"""Retention sweep: leave exactly one artifact per bundle.

The sweeper only ever deletes a file it has first positively matched
against the bundle's naming shape. Matching is a pure function
(:func:`stale_artifacts`) so it can be tested apart from deletion.

Sweeps are not atomic across files; a crash mid-sweep can leave stale
artifacts behind, which the next sweep removes. Two sweeps for the same
bundle must not run concurrently.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from assetforge.core.errors import DeleteError, ListError
from assetforge.models.artifacts import ArtifactShape

logger = logging.getLogger(__name__)


def stale_artifacts(entries: Iterable[str], shape: ArtifactShape, current: str) -> list[str]:
    """Names in ``entries`` owned by ``shape`` other than ``current``, sorted."""
    return sorted(name for name in entries if name != current and shape.matches(name))


class RetentionSweeper:
    """Deletes superseded artifacts from an output directory."""

    def sweep(self, output_dir: Path | str, bundle_name: str, current_artifact: str) -> int:
        """Delete every ``{bundle_name}.*.min.js`` except ``current_artifact``.

        Returns the number of files deleted.
        """
        return self.sweep_shape(output_dir, ArtifactShape.for_bundle(bundle_name), current_artifact)

    def sweep_shape(self, output_dir: Path | str, shape: ArtifactShape, current_artifact: str) -> int:
        """Delete every file matching ``shape`` except ``current_artifact``.

        Raises
        ------
        ListError
            The directory could not be listed. Nothing is deleted.
        DeleteError
            One or more deletions failed. All other matches are still
            attempted; the error carries the per-file failures and the
            count of files that were deleted.
        """
        directory = Path(output_dir)
        try:
            with os.scandir(directory) as it:
                files = [entry.name for entry in it if entry.is_file(follow_symlinks=False)]
        except OSError as exc:
            raise ListError(directory, str(exc)) from exc

        deleted = 0
        failures: dict[Path, OSError] = {}
        for name in stale_artifacts(files, shape, current_artifact):
            path = directory / name
            try:
                path.unlink()
            except FileNotFoundError:
                logger.debug("Stale artifact %s already gone", path)
                continue
            except OSError as exc:
                logger.warning("Could not delete stale artifact %s: %s", path, exc)
                failures[path] = exc
                continue
            deleted += 1
            logger.info("Removed stale artifact %s", name)

        if failures:
            raise DeleteError(directory, failures, deleted)
        return deleted
