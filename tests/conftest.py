# Rev 0.2.0

"""Pytest fixtures for diyprojects (Rev 0.2.0)"""
from __future__ import annotations
import sqlite3
from pathlib import Path
from typing import Callable

import pytest

from diyprojects.models.db import ConnectionProvider, DbSettings
from diyprojects.repositories.project_repository import ProjectRepository
from diyprojects.services.project_service import ProjectService

# SQLite rendition of data/projects_schema.sql
SQLITE_SCHEMA = """
CREATE TABLE project (
  project_id INTEGER PRIMARY KEY AUTOINCREMENT,
  project_name VARCHAR(128) NOT NULL,
  estimated_hours DECIMAL(7,2),
  actual_hours DECIMAL(7,2),
  difficulty INT,
  notes TEXT
);
CREATE TABLE category (
  category_id INTEGER PRIMARY KEY AUTOINCREMENT,
  category_name VARCHAR(128) NOT NULL
);
CREATE TABLE material (
  material_id INTEGER PRIMARY KEY AUTOINCREMENT,
  project_id INT NOT NULL REFERENCES project (project_id) ON DELETE CASCADE,
  material_name VARCHAR(128) NOT NULL,
  num_required INT,
  cost DECIMAL(7,2)
);
CREATE TABLE step (
  step_id INTEGER PRIMARY KEY AUTOINCREMENT,
  project_id INT NOT NULL REFERENCES project (project_id) ON DELETE CASCADE,
  step_text TEXT NOT NULL,
  step_order INT NOT NULL
);
CREATE TABLE project_category (
  project_id INT NOT NULL REFERENCES project (project_id) ON DELETE CASCADE,
  category_id INT NOT NULL REFERENCES category (category_id) ON DELETE CASCADE,
  UNIQUE (project_id, category_id)
);
"""


@pytest.fixture()
def db_settings(tmp_path: Path) -> DbSettings:
    db_path = tmp_path / "test.db"
    con = sqlite3.connect(str(db_path))
    try:
        con.executescript(SQLITE_SCHEMA)
        con.commit()
    finally:
        con.close()
    return DbSettings(
        drivername="sqlite",
        host=None,
        port=None,
        schema=str(db_path),
        user=None,
        password=None,
    )


@pytest.fixture()
def raw_conn(db_settings: DbSettings) -> Callable[[], sqlite3.Connection]:
    """Factory for a plain sqlite3 connection, for seeding and assertions."""
    def _connect() -> sqlite3.Connection:
        con = sqlite3.connect(db_settings.schema)
        con.row_factory = sqlite3.Row
        return con
    return _connect


@pytest.fixture()
def provider(db_settings: DbSettings):
    p = ConnectionProvider(db_settings)
    try:
        yield p
    finally:
        p.dispose()


@pytest.fixture()
def repo(provider: ConnectionProvider) -> ProjectRepository:
    return ProjectRepository(provider)


@pytest.fixture()
def service(repo: ProjectRepository) -> ProjectService:
    return ProjectService(repo)


@pytest.fixture()
def seeded_project_id(raw_conn) -> int:
    """One project with two materials, two steps (stored out of order) and two categories."""
    con = raw_conn()
    try:
        cur = con.execute(
            "INSERT INTO project (project_name, estimated_hours, actual_hours, difficulty, notes) "
            "VALUES ('Bookshelf', '6.50', '8.25', 2, 'pine boards')"
        )
        pid = cur.lastrowid
        con.executemany(
            "INSERT INTO material (project_id, material_name, num_required, cost) VALUES (?, ?, ?, ?)",
            [(pid, "Pine board", 4, "12.99"), (pid, "Wood screws", 24, "4.50")],
        )
        con.executemany(
            "INSERT INTO step (project_id, step_text, step_order) VALUES (?, ?, ?)",
            [(pid, "Assemble the frame", 2), (pid, "Cut boards to length", 1)],
        )
        con.executemany("INSERT INTO category (category_name) VALUES (?)", [("Woodwork",), ("Indoor",), ("Garden",)])
        con.executemany(
            "INSERT INTO project_category (project_id, category_id) VALUES (?, ?)",
            [(pid, 1), (pid, 2)],
        )
        con.commit()
        return int(pid)
    finally:
        con.close()
