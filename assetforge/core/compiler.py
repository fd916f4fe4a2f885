"""Bundle compilation: resolve, concatenate, minify, digest.

The digest is taken over the minified bytes so the filename tracks what
is actually served. Source files are concatenated verbatim with no
separator; files that need a trailing newline must carry their own.
"""

from __future__ import annotations

import logging
from pathlib import Path

from assetforge.core.errors import MinifyError, ReadError
from assetforge.core.hasher import content_digest
from assetforge.core.minifier import Minifier, minify
from assetforge.core.resolver import PatternResolver
from assetforge.models.artifacts import BUNDLE_KIND, CompiledBundle
from assetforge.models.bundles import BundleSpec

logger = logging.getLogger(__name__)


def read_sources(paths: list[Path], *, bundle: str | None = None) -> bytes:
    """Read ``paths`` in order and join their raw bytes.

    Stops at the first unreadable file.
    """
    chunks: list[bytes] = []
    for path in paths:
        try:
            chunks.append(path.read_bytes())
        except OSError as exc:
            raise ReadError(path, bundle) from exc
    return b"".join(chunks)


class BundleCompiler:
    """Compiles a :class:`BundleSpec` into minified, digested content.

    Stateless apart from its collaborators; compiling the same spec over
    unchanged files always yields the same digest.

    Parameters
    ----------
    resolver:
        Expands the bundle's patterns.
    minifier:
        External minifier; defaults to :func:`assetforge.core.minifier.minify`.
    """

    def __init__(self, resolver: PatternResolver, minifier: Minifier | None = None) -> None:
        self._resolver = resolver
        self._minify = minifier or minify

    def compile(self, spec: BundleSpec) -> CompiledBundle:
        """Compile ``spec``.

        Raises
        ------
        PatternError
            A pattern is malformed, escapes the root, or matches nothing.
        ReadError
            A matched file could not be read.
        MinifyError
            The minifier rejected the concatenated content.
        """
        sources = self._resolver.resolve(spec.patterns)
        raw = read_sources(sources, bundle=spec.name)

        try:
            minified = self._minify(raw, BUNDLE_KIND)
        except MinifyError as exc:
            raise MinifyError(exc.message, bundle=spec.name, path=exc.path) from exc
        except Exception as exc:
            raise MinifyError(str(exc) or type(exc).__name__, bundle=spec.name) from exc

        digest = content_digest(minified)
        logger.debug(
            "Compiled bundle %r: %d source(s), %d -> %d bytes, digest %s",
            spec.name, len(sources), len(raw), len(minified), digest,
        )
        return CompiledBundle(
            name=spec.name,
            digest=digest,
            content=minified,
            sources=sources,
        )
