"""Artifact naming: the filename contract shared with downstream consumers.

Bundles:       ``{bundle}.{digest}.min.js``
Single files:  ``{base}.{digest}.css`` or ``{base}.{digest}.min.js``
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class FileKind(str, Enum):
    """The closed set of asset types the minifier understands."""

    CSS = "css"
    JS = "js"

    @property
    def suffix(self) -> str:
        """Filename tail following the digest (``.min.js`` / ``.css``)."""
        if self is FileKind.JS:
            return ".min.js"
        return ".css"


# Bundles are always emitted as JavaScript.
BUNDLE_KIND = FileKind.JS


def bundle_artifact_name(bundle_name: str, digest: str) -> str:
    """``{bundle}.{digest}.min.js``"""
    return f"{bundle_name}.{digest}{BUNDLE_KIND.suffix}"


def single_file_artifact_name(base_name: str, digest: str, kind: FileKind) -> str:
    """``{base}.{digest}.css`` for CSS, ``{base}.{digest}.min.js`` for JS."""
    return f"{base_name}.{digest}{kind.suffix}"


class ArtifactShape(BaseModel):
    """Prefix/suffix rule identifying the artifacts owned by one name.

    A filename belongs to the shape when it is exactly
    ``prefix + token + suffix`` with a non-empty, dot-free ``token``.
    Anchoring on the ``.`` separator keeps ``base`` from claiming
    ``basex.*`` files, and the dot-free token keeps it from claiming
    files of a dotted sibling such as ``base.vendor``.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    suffix: str

    @classmethod
    def for_bundle(cls, bundle_name: str) -> ArtifactShape:
        return cls(prefix=f"{bundle_name}.", suffix=BUNDLE_KIND.suffix)

    @classmethod
    def for_single_file(cls, base_name: str, kind: FileKind) -> ArtifactShape:
        return cls(prefix=f"{base_name}.", suffix=kind.suffix)

    def matches(self, filename: str) -> bool:
        if len(filename) <= len(self.prefix) + len(self.suffix):
            return False
        if not (filename.startswith(self.prefix) and filename.endswith(self.suffix)):
            return False
        token = filename[len(self.prefix):len(filename) - len(self.suffix)]
        return "." not in token and "/" not in token


class CompiledBundle(BaseModel):
    """Result of compiling a bundle: the minified bytes and their digest."""

    model_config = ConfigDict(frozen=True)

    name: str
    digest: str
    content: bytes
    sources: list[Path] = []

    @property
    def artifact_name(self) -> str:
        return bundle_artifact_name(self.name, self.digest)


class BuildResult(BaseModel):
    """Outcome of building one bundle into an output directory."""

    model_config = ConfigDict(frozen=True)

    bundle: str
    artifact_name: str
    digest: str
    written: bool
    swept: int = 0
    size_bytes: int = 0
