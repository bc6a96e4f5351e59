# tests/test_config.py
from __future__ import annotations

import json
from pathlib import Path

from diyprojects.models.db import DbSettings
from diyprojects.utils.config import db_settings_from, load_settings


def test_missing_file_gives_defaults(tmp_path: Path):
    settings = load_settings(tmp_path / "absent.json")
    assert settings["database"]["host"] == "localhost"
    assert settings["database"]["port"] == 3306
    assert db_settings_from(settings) == DbSettings()


def test_file_overrides_are_merged_per_key(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"database": {"host": "db.internal", "port": "3307"}}))

    db = db_settings_from(load_settings(path))
    assert db.host == "db.internal"
    assert db.port == 3307
    assert db.schema == "projects"
    assert db.user == "projects"


def test_malformed_file_falls_back_to_defaults(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert load_settings(path)["database"]["schema"] == "projects"
