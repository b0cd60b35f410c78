"""Persistence interfaces for projects, designs, BOQs and chat.

Designs and BOQs use deliberately different primitives:

* :class:`DesignLog` is append-only.  It has no update method; a layout
  change is a new row with the next version number.
* :class:`BoqStore` holds one live row per project and updates it in place.

The relational engine behind these interfaces is outside this package;
:mod:`dorry.storage.memory` provides an in-process implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dorry.models.boq import Boq, BoqItem
    from dorry.models.design import ChangeSummary, Design, DesignData
    from dorry.models.enums import Sender
    from dorry.models.environment import WeatherData
    from dorry.models.project import (
        ChatMessage,
        Project,
        ProjectCreate,
        ProjectUpdate,
    )


class ProjectStore(Protocol):
    async def create_project(self, data: ProjectCreate) -> Project: ...

    async def get_project(self, project_id: int) -> Project | None: ...

    async def list_projects(self) -> list[Project]: ...

    async def update_project(
        self, project_id: int, data: ProjectUpdate
    ) -> Project | None: ...

    async def delete_project(self, project_id: int) -> bool: ...


class DesignLog(Protocol):
    async def create_design(
        self,
        project_id: int,
        design_data: DesignData,
        environmental_data: WeatherData | None,
        version: int,
    ) -> Design:
        """Append a design version.

        Raises:
            PersistenceConflictError: If ``version`` already exists for
                the project.
        """
        ...

    async def get_design(self, design_id: int) -> Design | None: ...

    async def get_latest_design(self, project_id: int) -> Design | None: ...

    async def list_designs(self, project_id: int) -> list[Design]:
        """All versions of a project, oldest first."""
        ...

    async def delete_for_project(self, project_id: int) -> int:
        """Drop every version of a project; returns how many were removed."""
        ...


class BoqStore(Protocol):
    async def get_boq(self, project_id: int) -> Boq | None: ...

    async def create_boq(
        self, project_id: int, items: list[BoqItem], total_cost: float
    ) -> Boq: ...

    async def update_boq(
        self, boq_id: int, items: list[BoqItem], total_cost: float
    ) -> Boq:
        """Replace the items and total of an existing BOQ row.

        Raises:
            NotFoundError: If no BOQ has ``boq_id``.
        """
        ...

    async def delete_for_project(self, project_id: int) -> int: ...


class ChatLog(Protocol):
    async def create_chat_message(
        self,
        project_id: int,
        sender: Sender,
        content: str,
        design_changes: ChangeSummary | None = None,
    ) -> ChatMessage: ...

    async def get_chat_history(self, project_id: int) -> list[ChatMessage]:
        """Messages of a project ordered by timestamp, oldest first."""
        ...

    async def delete_for_project(self, project_id: int) -> int: ...


@dataclass(frozen=True)
class VersionStore:
    """The four collections the pipeline reads and writes."""

    projects: ProjectStore
    designs: DesignLog
    boqs: BoqStore
    chat: ChatLog

    async def delete_project(self, project_id: int) -> bool:
        """Delete a project together with its designs, BOQ and chat history.

        Returns ``False`` if the project did not exist.
        """
        await self.designs.delete_for_project(project_id)
        await self.boqs.delete_for_project(project_id)
        await self.chat.delete_for_project(project_id)
        return await self.projects.delete_project(project_id)
