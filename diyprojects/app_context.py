# diyprojects application context
# Rev 0.2.0

from __future__ import annotations
from dataclasses import dataclass
from .utils.logging_setup import get_logger
from .models.db import ConnectionProvider, DbSettings
from .repositories.project_repository import ProjectRepository
from .services.project_service import ProjectService

@dataclass
class AppContext:
    """Central container for shared app resources."""
    settings: DbSettings
    provider: ConnectionProvider
    repo: ProjectRepository
    project_service: ProjectService

    @classmethod
    def create(cls, settings: DbSettings) -> "AppContext":
        """Initialize connection provider, repository, and services."""
        log = get_logger("AppContext")
        provider = ConnectionProvider(settings)
        repo = ProjectRepository(provider)
        service = ProjectService(repo)
        log.info("AppContext initialized with DB=%s", provider.display_url)
        return cls(settings=settings, provider=provider, repo=repo, project_service=service)

    def close(self) -> None:
        self.provider.dispose()
