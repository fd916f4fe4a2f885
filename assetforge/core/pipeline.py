"""Asset pipeline: the coordinator for a build invocation.

The AssetPipeline wires the PatternResolver, BundleCompiler, BundleOracle,
VersionedWriter, RetentionSweeper and SingleFileVersioner together. For
each bundle it compiles, skips the write when the current artifact is
already present, writes it otherwise, and then sweeps superseded
artifacts.
"""

from __future__ import annotations

import logging
from pathlib import Path

from assetforge.core.compiler import BundleCompiler
from assetforge.core.manifest import write_manifest
from assetforge.core.minifier import Minifier
from assetforge.core.oracle import BundleOracle
from assetforge.core.resolver import PatternResolver
from assetforge.core.sweeper import RetentionSweeper
from assetforge.core.versioner import SingleFileVersioner
from assetforge.core.writer import VersionedWriter
from assetforge.models.artifacts import BuildResult, FileKind
from assetforge.models.bundles import BundleConfig, BundleSpec

logger = logging.getLogger(__name__)


class AssetPipeline:
    """Builds bundles and single files into one output directory.

    Parameters
    ----------
    root:
        Project root; all bundle patterns are relative to it.
    output_dir:
        Where artifacts are written. Relative paths are taken from ``root``.
    minifier:
        External minifier. Defaults to rjsmin/rcssmin.
    sweep:
        Remove superseded artifacts after each bundle build.
    skip_existing:
        Skip the write when the current artifact is already on disk.
    manifest_name:
        Filename for the bundle manifest written by :meth:`build_all`.
        Empty string disables it.
    """

    def __init__(
        self,
        root: Path | str,
        output_dir: Path | str,
        *,
        minifier: Minifier | None = None,
        sweep: bool = True,
        skip_existing: bool = True,
        manifest_name: str = "manifest.json",
    ) -> None:
        self.root = Path(root)
        output = Path(output_dir)
        self.output_dir = output if output.is_absolute() else self.root / output
        self.sweep_enabled = sweep
        self.skip_existing = skip_existing
        self.manifest_name = manifest_name

        self.resolver = PatternResolver(self.root)
        self.compiler = BundleCompiler(self.resolver, minifier)
        self.oracle = BundleOracle(self.compiler)
        self.writer = VersionedWriter()
        self.sweeper = RetentionSweeper()
        self.versioner = SingleFileVersioner(self.writer, minifier)

    # ------------------------------------------------------------------
    # Bundles
    # ------------------------------------------------------------------

    def build_bundle(self, spec: BundleSpec) -> BuildResult:
        """Compile, write (unless already current) and sweep one bundle."""
        compiled = self.compiler.compile(spec)
        name = compiled.artifact_name

        written = False
        if self.skip_existing and self.oracle.exists(self.output_dir, name):
            logger.info("Bundle %r is current (%s)", spec.name, name)
        else:
            self.writer.write(self.output_dir, name, compiled.content)
            written = True

        swept = 0
        if self.sweep_enabled:
            swept = self.sweeper.sweep(self.output_dir, spec.name, name)

        return BuildResult(
            bundle=spec.name,
            artifact_name=name,
            digest=compiled.digest,
            written=written,
            swept=swept,
            size_bytes=len(compiled.content),
        )

    def build_all(self, config: BundleConfig) -> list[BuildResult]:
        """Build every bundle in config order; the first failure propagates.

        The manifest is written only after every bundle succeeded.
        """
        results = [self.build_bundle(spec) for spec in config.bundles]
        if self.manifest_name and results:
            write_manifest(self.output_dir, results, name=self.manifest_name, writer=self.writer)
        logger.info("Built %d bundle(s) into %s", len(results), self.output_dir)
        return results

    def status(self, config: BundleConfig) -> list[tuple[str, str, bool]]:
        """Read-only pass: ``(bundle, current_artifact, exists)`` per bundle."""
        rows = []
        for spec in config.bundles:
            artifact, present = self.oracle.is_current(spec, self.output_dir)
            rows.append((spec.name, artifact, present))
        return rows

    def sweep(self, bundle_name: str, current_artifact: str) -> int:
        return self.sweeper.sweep(self.output_dir, bundle_name, current_artifact)

    # ------------------------------------------------------------------
    # Single files
    # ------------------------------------------------------------------

    def version_file(self, input_path: Path | str, file_type: FileKind | str) -> str:
        """Version one file into the output directory. Old versions are kept."""
        return self.versioner.version_file(input_path, self.output_dir, file_type)
