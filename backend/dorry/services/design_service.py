"""Design generation: the only entrypoint that creates layouts from scratch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dorry.exceptions import InvalidInputError, NotFoundError
from dorry.layout.generator import generate
from dorry.models.enums import Sender
from dorry.services.pricing import reprice
from dorry.services.weather import validate_coordinates

if TYPE_CHECKING:
    from dorry.engine import BoqEngine
    from dorry.models.boq import Boq
    from dorry.models.design import Design
    from dorry.models.environment import WeatherData
    from dorry.models.project import Project
    from dorry.services.weather import EnvironmentalDataProvider
    from dorry.storage.base import VersionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """What a generation run persisted."""

    design: Design
    boq: Boq
    environmental_data: WeatherData


def welcome_message(project: Project, environmental: WeatherData) -> str:
    facing = environmental.wind_direction.lower()
    return (
        f"Welcome to your {project.name} project! I've analyzed the environmental "
        f"conditions for your location and generated an initial conceptual design. "
        f"The main living areas face {facing} to take advantage of natural lighting "
        f"while keeping wet areas opposite to the prevailing wind direction."
    )


class DesignService:
    """Generates a project's next design version from its plot and location.

    Steps:
        1. Validate that the project exists and has land area and coordinates
        2. Fetch environmental data for the coordinates
        3. Generate the layout and append it as version latest + 1
        4. Price it into the project's BOQ row
        5. Post the assistant's welcome message
    """

    def __init__(
        self,
        store: VersionStore,
        engine: BoqEngine,
        environment: EnvironmentalDataProvider,
    ) -> None:
        self._store = store
        self._engine = engine
        self._environment = environment

    async def generate_design(self, project_id: int) -> GenerationResult:
        """Run the generation pipeline for a project.

        Raises
        ------
        NotFoundError
            If the project does not exist.
        InvalidInputError
            If the project lacks land area or coordinates.  Nothing is
            written in that case.
        PersistenceConflictError
            If another request stored the same version first.
        """
        project = await self._store.projects.get_project(project_id)
        if project is None:
            msg = f"Project {project_id} not found"
            raise NotFoundError(msg)

        if not project.land_area:
            msg = "Project must have land area and location coordinates to generate a design"
            raise InvalidInputError(msg)
        lat, lon = validate_coordinates(project.latitude, project.longitude)

        environmental = await self._environment.fetch_environmental_data(lat, lon)
        design_data = generate(project.land_area, environmental)

        latest = await self._store.designs.get_latest_design(project_id)
        version = latest.version + 1 if latest is not None else 1
        design = await self._store.designs.create_design(
            project_id, design_data, environmental, version
        )
        logger.info("Generated design v%d for project %d", version, project_id)

        priced = await reprice(self._engine, self._store.boqs, project_id, design_data)

        await self._store.chat.create_chat_message(
            project_id,
            Sender.ASSISTANT,
            welcome_message(project, environmental),
        )

        return GenerationResult(
            design=design,
            boq=priced.boq,
            environmental_data=environmental,
        )
