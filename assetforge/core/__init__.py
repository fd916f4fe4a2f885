"""Core engine: resolution, hashing, compilation, writing and retention."""

from assetforge.core.compiler import BundleCompiler
from assetforge.core.hasher import content_digest
from assetforge.core.oracle import BundleOracle
from assetforge.core.pipeline import AssetPipeline
from assetforge.core.resolver import PatternResolver
from assetforge.core.sweeper import RetentionSweeper
from assetforge.core.versioner import SingleFileVersioner
from assetforge.core.writer import VersionedWriter

__all__ = [
    "AssetPipeline",
    "BundleCompiler",
    "BundleOracle",
    "PatternResolver",
    "RetentionSweeper",
    "SingleFileVersioner",
    "VersionedWriter",
    "content_digest",
]
