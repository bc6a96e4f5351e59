# Rev 0.2.0
# diyprojects – ProjectRepository (Rev 0.2.0, project/material/step/category schema)
from __future__ import annotations
from decimal import Decimal
from typing import Any, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection

from ..models.db import ConnectionProvider, tx
from ..models.entities import Category, Material, Project, Step, two_places
from ..utils.logging_setup import get_logger

PROJECT_TABLE = "project"
MATERIAL_TABLE = "material"
STEP_TABLE = "step"
CATEGORY_TABLE = "category"
PROJECT_CATEGORY_TABLE = "project_category"


# ---------- row decoding ----------

def project_from_row(row: Mapping[str, Any]) -> Project:
    return Project(
        project_id=int(row["project_id"]),
        project_name=row["project_name"],
        estimated_hours=two_places(row["estimated_hours"]),
        actual_hours=two_places(row["actual_hours"]),
        difficulty=int(row["difficulty"]) if row["difficulty"] is not None else None,
        notes=row["notes"],
    )


def material_from_row(row: Mapping[str, Any]) -> Material:
    return Material(
        material_id=int(row["material_id"]),
        project_id=int(row["project_id"]),
        material_name=row["material_name"],
        num_required=int(row["num_required"]) if row["num_required"] is not None else None,
        cost=two_places(row["cost"]),
    )


def step_from_row(row: Mapping[str, Any]) -> Step:
    return Step(
        step_id=int(row["step_id"]),
        project_id=int(row["project_id"]),
        step_text=row["step_text"],
        step_order=int(row["step_order"]),
    )


def category_from_row(row: Mapping[str, Any]) -> Category:
    return Category(
        category_id=int(row["category_id"]),
        category_name=row["category_name"],
    )


def _decimal_param(value: Optional[Decimal]) -> Optional[str]:
    # bound as text so DECIMAL columns and SQLite NUMERIC affinity both accept it
    value = two_places(value)
    return None if value is None else str(value)


class ProjectRepository:
    """
    Record access for the project table.
    Every public method runs in its own transaction on its own connection.
    """

    def __init__(self, provider: ConnectionProvider):
        self._provider = provider
        self._log = get_logger("ProjectRepository")

    # ---------- public API ----------

    def insert_project(self, project: Project) -> Project:
        """Insert all scalar fields; sets and returns the store-assigned project_id."""
        sql = text(f"""
            INSERT INTO {PROJECT_TABLE}
                (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES
                (:project_name, :estimated_hours, :actual_hours, :difficulty, :notes)
        """)
        with tx(self._provider) as conn:
            result = conn.execute(sql, self._scalar_params(project))
            project_id = result.lastrowid
        project.project_id = int(project_id)
        project.estimated_hours = two_places(project.estimated_hours)
        project.actual_hours = two_places(project.actual_hours)
        self._log.info("Inserted project id=%s name=%r", project.project_id, project.project_name)
        return project

    def fetch_all_projects(self) -> List[Project]:
        """All projects, scalar fields only, in the store's natural order."""
        sql = text(f"""
            SELECT project_id, project_name, estimated_hours, actual_hours, difficulty, notes
            FROM {PROJECT_TABLE}
        """)
        with tx(self._provider) as conn:
            rows = conn.execute(sql).mappings().all()
        return [project_from_row(r) for r in rows]

    def fetch_project_by_id(self, project_id: int) -> Optional[Project]:
        """
        Returns the project with its materials, steps and categories, or None.
        All four queries share one transaction.
        """
        sql = text(f"""
            SELECT project_id, project_name, estimated_hours, actual_hours, difficulty, notes
            FROM {PROJECT_TABLE}
            WHERE project_id = :project_id
        """)
        with tx(self._provider) as conn:
            row = conn.execute(sql, {"project_id": project_id}).mappings().first()
            if row is None:
                return None
            project = project_from_row(row)
            project.materials.extend(self._fetch_materials(conn, project_id))
            project.steps.extend(self._fetch_steps(conn, project_id))
            project.categories.extend(self._fetch_categories(conn, project_id))
        return project

    def modify_project_details(self, project: Project) -> bool:
        """
        Full-column update by project_id.
        True only when exactly one row was affected; a count check cannot tell
        whether it was the intended row.
        """
        sql = text(f"""
            UPDATE {PROJECT_TABLE} SET
                project_name = :project_name,
                estimated_hours = :estimated_hours,
                actual_hours = :actual_hours,
                difficulty = :difficulty,
                notes = :notes
            WHERE project_id = :project_id
        """)
        params = self._scalar_params(project)
        params["project_id"] = project.project_id
        with tx(self._provider) as conn:
            affected = conn.execute(sql, params).rowcount
        self._log.info("Update project id=%s affected %s row(s)", project.project_id, affected)
        return affected == 1

    def delete_project(self, project_id: int) -> bool:
        sql = text(f"DELETE FROM {PROJECT_TABLE} WHERE project_id = :project_id")
        with tx(self._provider) as conn:
            affected = conn.execute(sql, {"project_id": project_id}).rowcount
        self._log.info("Delete project id=%s affected %s row(s)", project_id, affected)
        return affected == 1

    # ---------- internals ----------

    @staticmethod
    def _scalar_params(project: Project) -> dict:
        return {
            "project_name": project.project_name,
            "estimated_hours": _decimal_param(project.estimated_hours),
            "actual_hours": _decimal_param(project.actual_hours),
            "difficulty": project.difficulty,
            "notes": project.notes,
        }

    def _fetch_materials(self, conn: Connection, project_id: int) -> List[Material]:
        sql = text(f"""
            SELECT material_id, project_id, material_name, num_required, cost
            FROM {MATERIAL_TABLE}
            WHERE project_id = :project_id
        """)
        rows = conn.execute(sql, {"project_id": project_id}).mappings().all()
        return [material_from_row(r) for r in rows]

    def _fetch_steps(self, conn: Connection, project_id: int) -> List[Step]:
        sql = text(f"""
            SELECT step_id, project_id, step_text, step_order
            FROM {STEP_TABLE}
            WHERE project_id = :project_id
            ORDER BY step_order
        """)
        rows = conn.execute(sql, {"project_id": project_id}).mappings().all()
        return [step_from_row(r) for r in rows]

    def _fetch_categories(self, conn: Connection, project_id: int) -> List[Category]:
        sql = text(f"""
            SELECT c.category_id, c.category_name
            FROM {CATEGORY_TABLE} c
            JOIN {PROJECT_CATEGORY_TABLE} pc USING (category_id)
            WHERE pc.project_id = :project_id
        """)
        rows = conn.execute(sql, {"project_id": project_id}).mappings().all()
        return [category_from_row(r) for r in rows]
