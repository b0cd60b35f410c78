"""Shared fixtures for the service, storage and API tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import pytest_asyncio

from dorry.config import Settings
from dorry.factory import create_default_engine
from dorry.storage.memory import create_memory_store
from tests.factories import make_environment, make_project_create

if TYPE_CHECKING:
    from pathlib import Path
    from unittest.mock import MagicMock

    from dorry.engine import BoqEngine
    from dorry.models.project import Project
    from dorry.storage.base import VersionStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings with no provider keys and audio written under tmp_path."""
    return Settings(tts_audio_dir=tmp_path / "audio")


@pytest.fixture()
def store() -> VersionStore:
    return create_memory_store()


@pytest.fixture()
def engine() -> BoqEngine:
    return create_default_engine()


@pytest.fixture()
def environment() -> MagicMock:
    return make_environment()


@pytest_asyncio.fixture()
async def project(store: VersionStore) -> Project:
    return await store.projects.create_project(make_project_create())
