"""Tests for bundle configuration loading: TOML layouts and ConfigError."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from assetforge.core.config_loader import load_bundle_config, parse_bundle_config
from assetforge.core.errors import ConfigError


def _write(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


class TestLoadBundleConfig:
    def test_dedicated_file(self, tmp_path: Path):
        path = _write(tmp_path / "assetforge.toml", """
            [[bundles]]
            name = "app"
            patterns = ["js/vendor/*.js", "js/app.js"]

            [[bundles]]
            name = "admin"
            patterns = ["js/admin/*.js"]
        """)
        config = load_bundle_config(path)
        assert [b.name for b in config.bundles] == ["app", "admin"]
        assert config.bundles[0].patterns == ["js/vendor/*.js", "js/app.js"]
        assert config.output_dir is None

    def test_pyproject_table(self, tmp_path: Path):
        path = _write(tmp_path / "pyproject.toml", """
            [project]
            name = "site"

            [[tool.assetforge.bundles]]
            name = "app"
            patterns = ["js/app.js"]
        """)
        assert load_bundle_config(path).get("app").patterns == ["js/app.js"]

    def test_pyproject_without_table(self, tmp_path: Path):
        path = _write(tmp_path / "pyproject.toml", """
            [project]
            name = "site"
        """)
        with pytest.raises(ConfigError, match="tool.assetforge"):
            load_bundle_config(path)

    def test_relative_output_dir_resolved_against_file(self, tmp_path: Path):
        path = _write(tmp_path / "assetforge.toml", """
            output_dir = "public/assets"

            [[bundles]]
            name = "app"
            patterns = ["js/app.js"]
        """)
        assert load_bundle_config(path).output_dir == tmp_path / "public/assets"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError) as info:
            load_bundle_config(tmp_path / "absent.toml")
        assert info.value.path == tmp_path / "absent.toml"

    def test_invalid_toml(self, tmp_path: Path):
        path = _write(tmp_path / "assetforge.toml", "[[bundles]\nname = ")
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_bundle_config(path)

    def test_duplicate_names(self, tmp_path: Path):
        path = _write(tmp_path / "assetforge.toml", """
            [[bundles]]
            name = "app"
            patterns = ["a.js"]

            [[bundles]]
            name = "app"
            patterns = ["b.js"]
        """)
        with pytest.raises(ConfigError, match="duplicate bundle name"):
            load_bundle_config(path)

    @pytest.mark.parametrize("entry", [
        'name = "app"',
        'patterns = ["a.js"]',
        'name = "app"\npatterns = []',
        'name = ""\npatterns = ["a.js"]',
        'name = "app"\npatterns = "a.js"',
        'name = "app"\npatterns = ["a.js"]\nminify = false',
    ])
    def test_invalid_entries(self, tmp_path: Path, entry: str):
        path = _write(tmp_path / "assetforge.toml", f"[[bundles]]\n{entry}\n")
        with pytest.raises(ConfigError, match="bundles"):
            load_bundle_config(path)


class TestParseBundleConfig:
    def test_empty_document(self):
        assert parse_bundle_config({}).bundles == []

    def test_non_table_rejected(self):
        with pytest.raises(ConfigError):
            parse_bundle_config(["not", "a", "table"])  # type: ignore[arg-type]
