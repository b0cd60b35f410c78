"""Tests for DesignService with a mocked environmental provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dorry.exceptions import InvalidInputError, NotFoundError
from dorry.models.enums import Sender
from dorry.services.design_service import DesignService, welcome_message
from tests.factories import make_environment, make_project_create, make_weather

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from dorry.engine import BoqEngine
    from dorry.models.project import Project
    from dorry.storage.base import VersionStore


@pytest.fixture()
def service(store: VersionStore, engine: BoqEngine, environment: MagicMock) -> DesignService:
    return DesignService(store, engine, environment)


class TestGenerateDesign:
    @pytest.mark.asyncio
    async def test_first_generation(
        self,
        service: DesignService,
        store: VersionStore,
        engine: BoqEngine,
        environment: MagicMock,
        project: Project,
    ) -> None:
        result = await service.generate_design(project.id)

        environment.fetch_environmental_data.assert_awaited_once_with(30.03, 31.47)
        assert result.design.version == 1
        assert result.design.design_data.total_area == pytest.approx(450.0)
        assert result.design.environmental_data == make_weather()
        assert result.environmental_data == make_weather()

        items = engine.estimate(
            result.design.design_data.rooms, result.design.design_data.total_area
        )
        assert result.boq.total_cost == engine.total_cost(items)
        assert await store.boqs.get_boq(project.id) == result.boq

    @pytest.mark.asyncio
    async def test_posts_welcome_message(
        self, service: DesignService, store: VersionStore, project: Project
    ) -> None:
        await service.generate_design(project.id)

        history = await store.chat.get_chat_history(project.id)
        assert len(history) == 1
        assert history[0].sender == Sender.ASSISTANT
        assert history[0].content.startswith("Welcome to your Villa Nile project!")
        assert "face north-east" in history[0].content

    @pytest.mark.asyncio
    async def test_regeneration_appends_version_and_reuses_boq(
        self, service: DesignService, store: VersionStore, project: Project
    ) -> None:
        first = await service.generate_design(project.id)
        second = await service.generate_design(project.id)

        assert second.design.version == 2
        assert second.boq.id == first.boq.id
        assert [d.version for d in await store.designs.list_designs(project.id)] == [1, 2]

    @pytest.mark.asyncio
    async def test_wind_drives_orientation(
        self, store: VersionStore, engine: BoqEngine, project: Project
    ) -> None:
        service = DesignService(store, engine, make_environment("East"))
        result = await service.generate_design(project.id)

        kitchen = result.design.design_data.rooms[1]
        assert kitchen.position.x == pytest.approx(10.0)

    @pytest.mark.asyncio
    async def test_missing_project(self, service: DesignService) -> None:
        with pytest.raises(NotFoundError):
            await service.generate_design(404)

    @pytest.mark.asyncio
    async def test_missing_land_area_writes_nothing(
        self, service: DesignService, store: VersionStore, environment: MagicMock
    ) -> None:
        project = await store.projects.create_project(make_project_create(land_area=None))

        with pytest.raises(InvalidInputError):
            await service.generate_design(project.id)

        environment.fetch_environmental_data.assert_not_awaited()
        assert await store.designs.list_designs(project.id) == []
        assert await store.boqs.get_boq(project.id) is None
        assert await store.chat.get_chat_history(project.id) == []

    @pytest.mark.asyncio
    async def test_missing_coordinates(
        self, service: DesignService, store: VersionStore
    ) -> None:
        project = await store.projects.create_project(make_project_create(longitude=None))
        with pytest.raises(InvalidInputError):
            await service.generate_design(project.id)


def test_welcome_message_lowercases_wind() -> None:
    project_name = "Sunset"
    message = welcome_message(
        make_project_create(name=project_name),  # type: ignore[arg-type]
        make_weather("South-Southwest"),
    )
    assert "Welcome to your Sunset project!" in message
    assert "face south-southwest" in message
