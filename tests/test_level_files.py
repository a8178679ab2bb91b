"""
Level file writing tests.

Run with: pytest tests/test_level_files.py -v
"""

import pytest

from bombhopper.domain.entity import Text
from bombhopper.domain.geometry import Point
from bombhopper.domain.level import Level
from bombhopper.infra.exceptions import LevelEncodeError, LevelSaveError
from bombhopper.infra.level_codec import dumps_level
from bombhopper.infra.level_files import save_level_to_path


def test_save_writes_compact_document(tmp_path):
    level = Level("saved", (10, 20))
    level.push(Text.new(Point(1, 2), "héllo"))
    path = tmp_path / "saved.json"

    save_level_to_path(level, path)

    assert path.read_text(encoding="utf-8") == dumps_level(level)
    assert not (tmp_path / "saved.json.tmp").exists()


def test_save_replaces_existing_file(tmp_path):
    path = tmp_path / "level.json"
    path.write_text("old", encoding="utf-8")

    save_level_to_path(Level("new", (0, 0)), path)

    assert path.read_text(encoding="utf-8").startswith('{"name":"new"')


def test_save_into_missing_directory_fails(tmp_path):
    path = tmp_path / "missing" / "level.json"

    with pytest.raises(LevelSaveError):
        save_level_to_path(Level("lost", (0, 0)), path)

    assert not path.exists()


def test_encode_errors_propagate_unchanged(tmp_path):
    path = tmp_path / "bad.json"

    with pytest.raises(LevelEncodeError):
        save_level_to_path(Level("bad", (0,)), path)

    assert not path.exists()
