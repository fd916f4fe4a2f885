"""assetforge data models: all Pydantic v2, all frozen (immutable)."""

from assetforge.models.artifacts import (
    BUNDLE_KIND,
    ArtifactShape,
    BuildResult,
    CompiledBundle,
    FileKind,
    bundle_artifact_name,
    single_file_artifact_name,
)
from assetforge.models.bundles import BundleConfig, BundleSpec

__all__ = [
    # bundles
    "BundleSpec",
    "BundleConfig",
    # artifacts
    "FileKind",
    "BUNDLE_KIND",
    "ArtifactShape",
    "CompiledBundle",
    "BuildResult",
    "bundle_artifact_name",
    "single_file_artifact_name",
]
