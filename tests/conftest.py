"""Shared pytest fixtures: a complete, writable database tree per test."""

import configparser
import shutil
from pathlib import Path

import pytest

from pysortie.database.paths import DatabasePaths, get_bundled_root


class DatabaseTree:
    """Writable copy of the bundled database with helpers to edit single keys."""

    def __init__(self, root: Path):
        self.root = root
        self.paths = DatabasePaths(root)

    def _read(self, document: str) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None, default_section="__defaults__")
        parser.optionxform = str
        parser.read(self.paths.document(document), encoding="utf-8")
        return parser

    def _write(self, document: str, parser: configparser.ConfigParser):
        with open(self.paths.document(document), "w", encoding="utf-8") as f:
            parser.write(f)

    def set_value(self, document: str, section: str, key: str, value: str):
        parser = self._read(document)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)
        self._write(document, parser)

    def remove_value(self, document: str, section: str, key: str):
        parser = self._read(document)
        parser.remove_option(section, key)
        self._write(document, parser)

    def included_oggs(self):
        return [a.strip() for a in self._read("Common.ini").get("Include", "CommonOgg").split(",")]

    def remove_ogg(self, asset: str):
        self.paths.ogg_file(asset).unlink()


@pytest.fixture
def database(tmp_path) -> DatabaseTree:
    """Bundled database copied to tmp_path, with every included .ogg present."""
    shutil.copytree(get_bundled_root() / "Database", tmp_path / "Database")
    tree = DatabaseTree(tmp_path)
    tree.paths.include_ogg_dir.mkdir(parents=True)
    for asset in tree.included_oggs():
        tree.paths.ogg_file(asset).write_bytes(b"")
    return tree


@pytest.fixture
def write_ini(tmp_path):
    """Write an ad-hoc settings document and return its path."""
    def _write(text: str, name: str = "Test.ini") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
