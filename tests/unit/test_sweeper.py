"""Tests for RetentionSweeper: matching predicate, counts, error aggregation."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetforge.core.errors import DeleteError, ListError
from assetforge.core.sweeper import RetentionSweeper, stale_artifacts
from assetforge.models.artifacts import ArtifactShape, FileKind


class TestStaleArtifacts:
    def test_filters_to_owned_non_current(self):
        entries = [
            "base.AAAAAAAA.min.js",
            "base.BBBBBBBB.min.js",
            "basex.CCCCCCCC.min.js",
            "manifest.json",
        ]
        shape = ArtifactShape.for_bundle("base")
        assert stale_artifacts(entries, shape, "base.BBBBBBBB.min.js") == ["base.AAAAAAAA.min.js"]

    def test_current_never_returned(self):
        shape = ArtifactShape.for_bundle("app")
        assert stale_artifacts(["app.00000000.min.js"], shape, "app.00000000.min.js") == []

    def test_sorted_output(self):
        shape = ArtifactShape.for_bundle("app")
        entries = ["app.zzzzzzzz.min.js", "app.00000000.min.js", "app.mmmmmmmm.min.js"]
        assert stale_artifacts(entries, shape, "none") == [
            "app.00000000.min.js", "app.mmmmmmmm.min.js", "app.zzzzzzzz.min.js",
        ]


class TestSweep:
    def test_deletes_all_but_current(self, output_dir: Path, make_artifacts):
        make_artifacts(output_dir, "app.11111111.min.js", "app.22222222.min.js", "app.33333333.min.js")
        deleted = RetentionSweeper().sweep(output_dir, "app", "app.33333333.min.js")
        assert deleted == 2
        assert [p.name for p in output_dir.iterdir()] == ["app.33333333.min.js"]

    def test_nothing_to_delete(self, output_dir: Path, make_artifacts):
        make_artifacts(output_dir, "app.11111111.min.js")
        assert RetentionSweeper().sweep(output_dir, "app", "app.11111111.min.js") == 0

    def test_current_absent_still_sweeps(self, output_dir: Path, make_artifacts):
        make_artifacts(output_dir, "app.11111111.min.js")
        assert RetentionSweeper().sweep(output_dir, "app", "app.99999999.min.js") == 1

    def test_single_file_shape(self, output_dir: Path, make_artifacts):
        make_artifacts(output_dir, "site.11111111.css", "site.22222222.css", "site.11111111.min.js")
        shape = ArtifactShape.for_single_file("site", FileKind.CSS)
        deleted = RetentionSweeper().sweep_shape(output_dir, shape, "site.22222222.css")
        assert deleted == 1
        assert sorted(p.name for p in output_dir.iterdir()) == ["site.11111111.min.js", "site.22222222.css"]

    def test_subdirectories_untouched(self, output_dir: Path):
        (output_dir / "app.11111111.min.js").mkdir(parents=True)
        assert RetentionSweeper().sweep(output_dir, "app", "app.22222222.min.js") == 0
        assert (output_dir / "app.11111111.min.js").is_dir()

    def test_list_error(self, output_dir: Path):
        with pytest.raises(ListError) as info:
            RetentionSweeper().sweep(output_dir, "app", "app.00000000.min.js")
        assert info.value.path == output_dir

    def test_delete_failures_aggregated(self, output_dir: Path, make_artifacts, monkeypatch):
        make_artifacts(
            output_dir,
            "app.11111111.min.js",
            "app.22222222.min.js",
            "app.33333333.min.js",
            "app.44444444.min.js",
            "app.55555555.min.js",
        )
        original = Path.unlink
        locked = {"app.11111111.min.js", "app.33333333.min.js"}

        def unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name in locked:
                raise PermissionError(13, "Permission denied", str(self))
            original(self, missing_ok=missing_ok)

        monkeypatch.setattr(Path, "unlink", unlink)
        with pytest.raises(DeleteError) as info:
            RetentionSweeper().sweep(output_dir, "app", "app.55555555.min.js")

        err = info.value
        assert err.deleted == 2
        assert sorted(p.name for p in err.failures) == sorted(locked)
        assert all(isinstance(e, PermissionError) for e in err.failures.values())
        remaining = sorted(p.name for p in output_dir.iterdir())
        assert remaining == ["app.11111111.min.js", "app.33333333.min.js", "app.55555555.min.js"]
