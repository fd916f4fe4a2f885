"""Shared test fixtures for assetforge."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from assetforge.core.compiler import BundleCompiler
from assetforge.core.pipeline import AssetPipeline
from assetforge.core.resolver import PatternResolver
from assetforge.models.artifacts import FileKind
from assetforge.models.bundles import BundleSpec


def collapse_whitespace(content: bytes, kind: FileKind) -> bytes:
    """Deterministic stand-in minifier: collapse runs of whitespace."""
    return b" ".join(content.split())


@pytest.fixture
def minifier() -> Callable[[bytes, FileKind], bytes]:
    return collapse_whitespace


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree with JS and CSS sources."""
    root = tmp_path / "project"
    files = {
        "js/vendor/a.js": "var a = 1;\n",
        "js/vendor/b.js": "var b = 2;\n",
        "js/app.js": "function main() {\n  return a + b;\n}\n",
        "js/admin/panel.js": "var panel = true;\n",
        "css/site.css": "body {\n  color: red;\n}\n",
        "README.txt": "not an asset\n",
    }
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory path; not created up front."""
    return tmp_path / "dist"


@pytest.fixture
def resolver(project: Path) -> PatternResolver:
    return PatternResolver(project)


@pytest.fixture
def compiler(resolver: PatternResolver, minifier) -> BundleCompiler:
    return BundleCompiler(resolver, minifier)


@pytest.fixture
def pipeline(project: Path, output_dir: Path, minifier) -> AssetPipeline:
    return AssetPipeline(project, output_dir, minifier=minifier)


@pytest.fixture
def app_bundle() -> BundleSpec:
    return BundleSpec(name="app", patterns=["js/vendor/*.js", "js/app.js"])


@pytest.fixture
def make_artifacts() -> Callable[..., list[Path]]:
    """Factory fixture: create empty files with the given names in a directory."""

    def _factory(directory: Path, *names: str) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for name in names:
            path = directory / name
            path.write_bytes(b"// " + name.encode())
            paths.append(path)
        return paths

    return _factory
