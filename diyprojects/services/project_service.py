# Rev 0.2.0

"""Project service (Rev 0.2.0)
Turns repository booleans/None into explicit outcomes:
- None from a fetch            -> not_found
- False from update/delete     -> not_found
- PersistenceError             -> persistence_error
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..models.entities import Project
from ..models.errors import PersistenceError
from ..models.types import ResultCode
from ..utils.logging_setup import get_logger


class ProjectRepositoryLike(Protocol):
    def insert_project(self, project: Project) -> Project: ...
    def fetch_all_projects(self) -> List[Project]: ...
    def fetch_project_by_id(self, project_id: int) -> Optional[Project]: ...
    def modify_project_details(self, project: Project) -> bool: ...
    def delete_project(self, project_id: int) -> bool: ...


@dataclass(frozen=True)
class ProjectResult:
    ok: bool
    code: ResultCode
    project: Optional[Project] = None
    message: str = ""

    @classmethod
    def success(cls, project: Optional[Project] = None, message: str = "") -> "ProjectResult":
        return cls(ok=True, code="ok", project=project, message=message)

    @classmethod
    def not_found(cls, message: str) -> "ProjectResult":
        return cls(ok=False, code="not_found", message=message)

    @classmethod
    def failed(cls, error: PersistenceError) -> "ProjectResult":
        return cls(ok=False, code="persistence_error", message=str(error))


def _missing(project_id) -> str:
    return f"Project with project ID={project_id} does not exist."


class ProjectService:
    def __init__(self, repo: ProjectRepositoryLike):
        self._repo = repo
        self._log = get_logger("ProjectService")

    def add_project(self, project: Project) -> ProjectResult:
        try:
            saved = self._repo.insert_project(project)
        except PersistenceError as e:
            self._log.warning("add_project failed: %s", e)
            return ProjectResult.failed(e)
        return ProjectResult.success(saved)

    def fetch_all_projects(self) -> List[Project]:
        # errors propagate; the session loop reports them
        return self._repo.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> ProjectResult:
        try:
            project = self._repo.fetch_project_by_id(project_id)
        except PersistenceError as e:
            self._log.warning("fetch_project_by_id(%s) failed: %s", project_id, e)
            return ProjectResult.failed(e)
        if project is None:
            self._log.info("Project %s not found", project_id)
            return ProjectResult.not_found(_missing(project_id))
        return ProjectResult.success(project)

    def modify_project_details(self, project: Project) -> ProjectResult:
        try:
            ok = self._repo.modify_project_details(project)
        except PersistenceError as e:
            self._log.warning("modify_project_details(%s) failed: %s", project.project_id, e)
            return ProjectResult.failed(e)
        if not ok:
            self._log.info("Update matched no single row for project %s", project.project_id)
            return ProjectResult.not_found(_missing(project.project_id))
        return ProjectResult.success(project)

    def delete_project(self, project_id: int) -> ProjectResult:
        try:
            ok = self._repo.delete_project(project_id)
        except PersistenceError as e:
            self._log.warning("delete_project(%s) failed: %s", project_id, e)
            return ProjectResult.failed(e)
        if not ok:
            return ProjectResult.not_found(
                f"There is no row associated with id {project_id} in the project table, "
                "delete operation unsuccessful."
            )
        self._log.info("Deleted project %s", project_id)
        return ProjectResult.success(message=f"Project {project_id} was deleted successfully.")
