"""Tests for database path resolution."""

from pathlib import Path

from pysortie.database.paths import ROOT_ENV_VAR, DatabasePaths, get_bundled_root


class TestDatabasePaths:
    def test_layout(self, tmp_path):
        paths = DatabasePaths(tmp_path)
        assert paths.database_dir == tmp_path / "Database"
        assert paths.document("Names.ini") == tmp_path / "Database" / "Names.ini"
        assert paths.ogg_file("RadioBeep") == tmp_path / "Include" / "Ogg" / "RadioBeep.ogg"

    def test_accepts_string_root(self, tmp_path):
        assert DatabasePaths(str(tmp_path)).root == Path(tmp_path)

    def test_explicit_root_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path / "env"))
        assert DatabasePaths.resolve(tmp_path).root == tmp_path

    def test_environment_root(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path))
        assert DatabasePaths.resolve().root == tmp_path

    def test_bundled_root_by_default(self, monkeypatch):
        monkeypatch.delenv(ROOT_ENV_VAR, raising=False)
        paths = DatabasePaths.resolve()
        assert paths.root == get_bundled_root()
        for name in ("Common.ini", "EnemyAirDefense.ini", "Names.ini", "Objectives.ini"):
            assert paths.document(name).is_file()
