"""Project registry: append-only storage for accepted specifications."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from ghanabuild.models.project import StoredProject

if TYPE_CHECKING:
    from ghanabuild.models.project import ProjectSpecification

logger = logging.getLogger(__name__)


class ProjectRegistry(Protocol):
    def create(self, specification: ProjectSpecification) -> StoredProject: ...

    def list_projects(self) -> list[StoredProject]: ...


class InMemoryProjectRegistry:
    """Process-local registry with ``proj_<n>`` identifiers.

    Not synchronized: assumes a single writer. Contents are lost on restart.
    """

    def __init__(self) -> None:
        self._projects: list[StoredProject] = []
        self._next_id = 1

    def create(self, specification: ProjectSpecification) -> StoredProject:
        project = StoredProject(
            **specification.model_dump(),
            id=f"proj_{self._next_id}",
            created_at=datetime.now(UTC),
        )
        self._next_id += 1
        self._projects.append(project)
        logger.info("Registered project %s (%s)", project.id, project.region)
        return project

    def list_projects(self) -> list[StoredProject]:
        return list(self._projects)
