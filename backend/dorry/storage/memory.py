"""In-process implementations of the storage interfaces.

Rows are kept in dicts keyed by surrogate integer ids.  Used by the default
app wiring and by the tests; a relational backend would enforce the same
``(project_id, version)`` uniqueness with a database constraint.
"""

from __future__ import annotations

import itertools
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from dorry.exceptions import DuplicateBoqError, NotFoundError, PersistenceConflictError
from dorry.models.boq import Boq
from dorry.models.design import Design
from dorry.models.project import ChatMessage, Project
from dorry.storage.base import VersionStore

if TYPE_CHECKING:
    from dorry.models.boq import BoqItem
    from dorry.models.design import ChangeSummary, DesignData
    from dorry.models.enums import Sender
    from dorry.models.environment import WeatherData
    from dorry.models.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class InMemoryProjectStore:
    def __init__(self) -> None:
        self._rows: dict[int, Project] = {}
        self._ids = itertools.count(1)

    async def create_project(self, data: ProjectCreate) -> Project:
        project = Project(id=next(self._ids), **data.model_dump())
        self._rows[project.id] = project
        return project

    async def get_project(self, project_id: int) -> Project | None:
        return self._rows.get(project_id)

    async def list_projects(self) -> list[Project]:
        return sorted(self._rows.values(), key=lambda p: p.id)

    async def update_project(
        self, project_id: int, data: ProjectUpdate
    ) -> Project | None:
        existing = self._rows.get(project_id)
        if existing is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        changes["updated_at"] = datetime.now(UTC)
        # Re-validated so the merged row obeys the same bounds as a new one.
        updated = Project.model_validate({**existing.model_dump(), **changes})
        self._rows[project_id] = updated
        return updated

    async def delete_project(self, project_id: int) -> bool:
        return self._rows.pop(project_id, None) is not None


class InMemoryDesignLog:
    """Append-only design versions with a unique ``(project_id, version)``."""

    def __init__(self) -> None:
        self._rows: dict[int, Design] = {}
        self._versions: dict[tuple[int, int], int] = {}
        self._ids = itertools.count(1)

    async def create_design(
        self,
        project_id: int,
        design_data: DesignData,
        environmental_data: WeatherData | None,
        version: int,
    ) -> Design:
        key = (project_id, version)
        if key in self._versions:
            logger.warning(
                "Rejected duplicate design version %d for project %d",
                version,
                project_id,
            )
            raise PersistenceConflictError(project_id, version)

        design = Design(
            id=next(self._ids),
            project_id=project_id,
            design_data=design_data,
            environmental_data=environmental_data,
            version=version,
        )
        self._rows[design.id] = design
        self._versions[key] = design.id
        return design

    async def get_design(self, design_id: int) -> Design | None:
        return self._rows.get(design_id)

    async def get_latest_design(self, project_id: int) -> Design | None:
        designs = await self.list_designs(project_id)
        return designs[-1] if designs else None

    async def list_designs(self, project_id: int) -> list[Design]:
        return sorted(
            (d for d in self._rows.values() if d.project_id == project_id),
            key=lambda d: d.version,
        )

    async def delete_for_project(self, project_id: int) -> int:
        doomed = [d for d in self._rows.values() if d.project_id == project_id]
        for design in doomed:
            del self._rows[design.id]
            del self._versions[(project_id, design.version)]
        return len(doomed)


class InMemoryBoqStore:
    """One live BOQ row per project, updated in place."""

    def __init__(self) -> None:
        self._rows: dict[int, Boq] = {}
        self._ids = itertools.count(1)

    async def get_boq(self, project_id: int) -> Boq | None:
        for boq in self._rows.values():
            if boq.project_id == project_id:
                return boq
        return None

    async def create_boq(
        self, project_id: int, items: list[BoqItem], total_cost: float
    ) -> Boq:
        existing = await self.get_boq(project_id)
        if existing is not None:
            raise DuplicateBoqError(project_id, existing.id)
        boq = Boq(
            id=next(self._ids),
            project_id=project_id,
            items=list(items),
            total_cost=total_cost,
        )
        self._rows[boq.id] = boq
        return boq

    async def update_boq(
        self, boq_id: int, items: list[BoqItem], total_cost: float
    ) -> Boq:
        existing = self._rows.get(boq_id)
        if existing is None:
            msg = f"BOQ {boq_id} not found"
            raise NotFoundError(msg)
        updated = Boq(
            id=existing.id,
            project_id=existing.project_id,
            items=list(items),
            total_cost=total_cost,
            created_at=existing.created_at,
            updated_at=datetime.now(UTC),
        )
        self._rows[boq_id] = updated
        return updated

    async def delete_for_project(self, project_id: int) -> int:
        doomed = [b.id for b in self._rows.values() if b.project_id == project_id]
        for boq_id in doomed:
            del self._rows[boq_id]
        return len(doomed)


class InMemoryChatLog:
    def __init__(self) -> None:
        self._rows: dict[int, ChatMessage] = {}
        self._ids = itertools.count(1)

    async def create_chat_message(
        self,
        project_id: int,
        sender: Sender,
        content: str,
        design_changes: ChangeSummary | None = None,
    ) -> ChatMessage:
        message = ChatMessage(
            id=next(self._ids),
            project_id=project_id,
            sender=sender,
            content=content,
            design_changes=design_changes,
        )
        self._rows[message.id] = message
        return message

    async def get_chat_history(self, project_id: int) -> list[ChatMessage]:
        return sorted(
            (m for m in self._rows.values() if m.project_id == project_id),
            key=lambda m: (m.timestamp, m.id),
        )

    async def delete_for_project(self, project_id: int) -> int:
        doomed = [m.id for m in self._rows.values() if m.project_id == project_id]
        for message_id in doomed:
            del self._rows[message_id]
        return len(doomed)


def create_memory_store() -> VersionStore:
    """A fresh, empty in-memory store."""
    return VersionStore(
        projects=InMemoryProjectStore(),
        designs=InMemoryDesignLog(),
        boqs=InMemoryBoqStore(),
        chat=InMemoryChatLog(),
    )
