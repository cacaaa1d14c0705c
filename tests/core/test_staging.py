"""Tests for the staging area."""

import pytest

from render_deploy.api.exceptions import StagingError
from render_deploy.core.staging import StagingArea

OBJECT_FILES = [
    "mock_weather_data.json",
    "mock_accommodations.json",
    "mock_equipment.json",
    "mock_embeddings_cache.json",
]


class TestStagingArea:
    def test_create_unique_directories(self, tmp_path):
        first = StagingArea(base_dir=tmp_path)
        second = StagingArea(base_dir=tmp_path)
        assert first.create() != second.create()
        assert first.path.name.startswith("render-deploy-")

    def test_path_before_create(self):
        with pytest.raises(StagingError):
            StagingArea().path

    def test_populate_copies_tree(self, tmp_path, source_tree):
        with StagingArea(base_dir=tmp_path) as staging:
            staging.populate(source_tree)
            assert (staging.path / "app" / "main.py").read_text() == "app = None\n"
            assert (staging.path / "requirements.txt").exists()
            assert (staging.path / ".env.example").exists()

    def test_populate_skips_git_metadata(self, tmp_path, source_tree):
        (source_tree / ".git").mkdir()
        (source_tree / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        with StagingArea(base_dir=tmp_path) as staging:
            staging.populate(source_tree)
            assert not (staging.path / ".git").exists()

    def test_populate_missing_source(self, tmp_path):
        with StagingArea(base_dir=tmp_path) as staging:
            with pytest.raises(StagingError, match="not found"):
                staging.populate(tmp_path / "does-not-exist")

    def test_bootstrap_data_contents(self, tmp_path, source_tree):
        with StagingArea(base_dir=tmp_path) as staging:
            staging.populate(source_tree)
            written = staging.bootstrap_data()

            data_dir = staging.path / "app" / "data"
            assert len(written) == 5
            for name in OBJECT_FILES:
                assert (data_dir / name).read_text() == "{}\n"
            assert (data_dir / "destination_embeddings.json").read_text() == "[]\n"

    def test_bootstrap_overwrites_existing_data(self, tmp_path, source_tree):
        with StagingArea(base_dir=tmp_path) as staging:
            staging.populate(source_tree)
            assert "stale" in (staging.path / "app/data/mock_weather_data.json").read_text()
            staging.bootstrap_data()
            assert (staging.path / "app/data/mock_weather_data.json").read_text() == "{}\n"

    def test_context_manager_removes_directory(self, tmp_path):
        with StagingArea(base_dir=tmp_path) as staging:
            path = staging.path
            (path / "file.txt").write_text("x")
        assert not path.exists()

    def test_context_manager_removes_on_error(self, tmp_path):
        with pytest.raises(RuntimeError):
            with StagingArea(base_dir=tmp_path) as staging:
                path = staging.path
                raise RuntimeError("boom")
        assert not path.exists()

    def test_keep_leaves_directory(self, tmp_path):
        with StagingArea(keep=True, base_dir=tmp_path) as staging:
            path = staging.path
        assert path.exists()

    def test_cleanup_without_create(self):
        assert StagingArea().cleanup() is True

    def test_bootstrap_data_write_failure(self, tmp_path, source_tree):
        (source_tree / "app" / "data" / "mock_weather_data.json").unlink()
        (source_tree / "app" / "data").rmdir()
        (source_tree / "app" / "data").write_text("not a directory\n")
        with StagingArea(base_dir=tmp_path) as staging:
            staging.populate(source_tree)
            with pytest.raises(StagingError, match="Failed to write data files"):
                staging.bootstrap_data()
