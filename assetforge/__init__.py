"""assetforge: deterministic, content-hashed asset bundles.

Groups JavaScript/CSS sources into named bundles, minifies them, names
each artifact after a digest of its minified bytes, and keeps exactly
one current artifact per bundle in the output directory.
"""

__version__ = "0.1.0"
__description__ = "Deterministic asset bundling with content-hashed, cache-busting filenames"

from assetforge.core.pipeline import AssetPipeline
from assetforge.cli.app import app as cli

__all__ = ["AssetPipeline", "cli", "__version__"]
