"""오케스트레이터(load_album, process_album) 테스트."""

import os
import subprocess

import pytest

from core.exceptions import (
    AlbumConfigError,
    AlbumNotFound,
    BrowserUnavailable,
    ConversionFailed,
    OutputRootUnavailable,
    UnknownTransformationSet,
)
from model.album import Album, Image
from service.album_service import load_album, new_output_root, process_album

DOCUMENT = {
    "name": "trip",
    "base": "/in",
    "transformations": {"bw": ["Normalize"]},
    "images": [
        {"filename": "a.jpg"},
        {"filename": "b.jpg", "transformations": "bw"},
    ],
}


class TestLoadAlbum:
    def test_load(self, album_file):
        album = load_album(album_file(DOCUMENT))

        assert album.name == "trip"
        assert [img.filename for img in album.images] == ["a.jpg", "b.jpg"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(AlbumNotFound):
            load_album(str(tmp_path / "nope.json"))

    def test_not_utf8(self, album_file):
        with pytest.raises(AlbumConfigError):
            load_album(album_file(b'{"name": "\xff"}'))

    def test_malformed_json(self, album_file):
        with pytest.raises(AlbumConfigError):
            load_album(album_file("{not json"))

    def test_unknown_variant(self, album_file):
        document = dict(DOCUMENT, transformations={"bw": ["Sepia"]})
        with pytest.raises(AlbumConfigError):
            load_album(album_file(document))


def test_new_output_root_is_unique(app_settings):
    first = new_output_root(app_settings)
    second = new_output_root(app_settings)

    assert first != second
    assert os.path.dirname(first) == app_settings.OUTPUT_PARENT
    assert os.path.basename(first).startswith("album_creator_")
    assert not os.path.exists(first)


class TestProcessAlbum:
    def test_converts_browses_and_cleans_up(self, fake_run, app_settings):
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)
        seen = {}
        fake_run.on_browser = lambda cmd: seen.setdefault("files", sorted(os.listdir(cmd[-1])))

        units = process_album(album, root, app_settings)

        assert [c[0] for c in fake_run.calls] == ["gm", "gm", "dolphin"]
        assert fake_run.calls[1][2:] == ["-normalize", "/in/b.jpg", os.path.join(root, "2_b.jpg")]
        assert seen["files"] == ["1_a.jpg", "2_b.jpg"]
        assert len(units) == 2
        assert not os.path.exists(root)

    def test_resolution_failure_creates_nothing(self, fake_run, app_settings):
        album = Album(name="x", base="/in", images=[Image(filename="a.jpg", transformation_set="missing")])
        root = new_output_root(app_settings)

        with pytest.raises(UnknownTransformationSet):
            process_album(album, root, app_settings)

        assert fake_run.calls == []
        assert not os.path.exists(root)

    def test_conversion_failure_still_cleans_up(self, fake_run, app_settings):
        fake_run.fail_on = 2
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)

        with pytest.raises(ConversionFailed):
            process_album(album, root, app_settings)

        assert [c[0] for c in fake_run.calls] == ["gm", "gm"]
        assert not os.path.exists(root)

    def test_browser_failure_still_cleans_up(self, fake_run, app_settings):
        fake_run.missing.add("dolphin")
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)

        with pytest.raises(BrowserUnavailable):
            process_album(album, root, app_settings)

        assert not os.path.exists(root)

    def test_dry_run_runs_nothing(self, fake_run, app_settings):
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)

        units = process_album(album, root, app_settings, dry_run=True)

        assert len(units) == 2
        assert fake_run.calls == []
        assert not os.path.exists(root)

    def test_existing_output_root_is_refused(self, fake_run, app_settings, tmp_path):
        """이미 있는 디렉토리는 쓰지도 지우지도 않는다."""
        album = Album.model_validate(DOCUMENT)
        root = tmp_path / "taken"
        root.mkdir()
        (root / "keep.txt").write_text("x")

        with pytest.raises(OutputRootUnavailable):
            process_album(album, str(root), app_settings)

        assert fake_run.calls == []
        assert (root / "keep.txt").exists()

    def test_missing_output_parent(self, fake_run, app_settings, tmp_path):
        album = Album.model_validate(DOCUMENT)

        with pytest.raises(OutputRootUnavailable):
            process_album(album, str(tmp_path / "no" / "such"), app_settings)

    def test_foreign_file_keeps_directory(self, fake_run, app_settings):
        """브라우저가 남긴 파일(.directory)이 있으면 디렉토리만 남기고 정상 종료한다."""
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)
        fake_run.on_browser = lambda cmd: open(os.path.join(cmd[-1], ".directory"), "w").close()

        units = process_album(album, root, app_settings)

        assert len(units) == 2
        assert os.listdir(root) == [".directory"]

    def test_foreign_file_does_not_hide_conversion_failure(self, fake_run, app_settings, monkeypatch):
        """정리 단계에서 디렉토리를 못 지워도 원래 오류(ConversionFailed)가 그대로 올라온다."""
        fake_run.fail_on = 2
        album = Album.model_validate(DOCUMENT)
        root = new_output_root(app_settings)

        def _run_and_litter(cmd, **kwargs):
            open(os.path.join(root, "thumbs.db"), "w").close()
            return fake_run(cmd, **kwargs)

        monkeypatch.setattr(subprocess, "run", _run_and_litter)

        with pytest.raises(ConversionFailed):
            process_album(album, root, app_settings)

        assert os.listdir(root) == ["thumbs.db"]
