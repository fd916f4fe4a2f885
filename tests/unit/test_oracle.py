"""Tests for BundleOracle: read-only existence and current-name queries."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from assetforge.core.compiler import BundleCompiler
from assetforge.core.errors import StatError
from assetforge.core.oracle import BundleOracle
from assetforge.models.bundles import BundleSpec


@pytest.fixture
def oracle(compiler: BundleCompiler) -> BundleOracle:
    return BundleOracle(compiler)


class TestCurrentArtifact:
    def test_matches_compiled_name(self, oracle: BundleOracle, compiler: BundleCompiler, app_bundle: BundleSpec):
        assert oracle.current_artifact(app_bundle) == compiler.compile(app_bundle).artifact_name

    def test_pure_across_calls(self, oracle: BundleOracle, app_bundle: BundleSpec):
        assert oracle.current_artifact(app_bundle) == oracle.current_artifact(app_bundle)

    def test_tracks_source_changes(self, oracle: BundleOracle, app_bundle: BundleSpec, project: Path):
        before = oracle.current_artifact(app_bundle)
        (project / "js" / "app.js").write_text("function main() { return 42; }\n")
        assert oracle.current_artifact(app_bundle) != before

    def test_performs_no_writes(self, oracle: BundleOracle, app_bundle: BundleSpec, output_dir: Path):
        oracle.is_current(app_bundle, output_dir)
        assert not output_dir.exists()


class TestExists:
    def test_missing_directory(self, oracle: BundleOracle, output_dir: Path):
        assert oracle.exists(output_dir, "app.00000000.min.js") is False

    def test_missing_file(self, oracle: BundleOracle, output_dir: Path):
        output_dir.mkdir()
        assert oracle.exists(output_dir, "app.00000000.min.js") is False

    def test_present(self, oracle: BundleOracle, output_dir: Path):
        output_dir.mkdir()
        (output_dir / "app.00000000.min.js").write_bytes(b"x")
        assert oracle.exists(output_dir, "app.00000000.min.js") is True

    def test_exact_name_only(self, oracle: BundleOracle, output_dir: Path):
        output_dir.mkdir()
        (output_dir / "app.00000001.min.js").write_bytes(b"x")
        assert oracle.exists(output_dir, "app.00000000.min.js") is False

    def test_directory_is_not_an_artifact(self, oracle: BundleOracle, output_dir: Path):
        (output_dir / "app.00000000.min.js").mkdir(parents=True)
        assert oracle.exists(output_dir, "app.00000000.min.js") is False

    def test_stat_failure_raises(self, oracle: BundleOracle, output_dir: Path, monkeypatch):
        def denied(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(os, "stat", denied)
        with pytest.raises(StatError) as info:
            oracle.exists(output_dir, "app.00000000.min.js")
        assert info.value.path == output_dir / "app.00000000.min.js"
