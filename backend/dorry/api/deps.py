"""Dependency wiring for the FastAPI application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dorry.config import Settings
from dorry.factory import create_default_engine
from dorry.services.chat import ChatOrchestrator
from dorry.services.design_service import DesignService
from dorry.services.tts import SpeechSynthesizer
from dorry.services.weather import EnvironmentalDataProvider
from dorry.storage.memory import create_memory_store

if TYPE_CHECKING:
    from dorry.engine import BoqEngine
    from dorry.storage.base import VersionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    """Everything the routes need, built once per app."""

    settings: Settings
    store: VersionStore
    engine: BoqEngine
    environment: EnvironmentalDataProvider
    speech: SpeechSynthesizer
    designs: DesignService
    chat: ChatOrchestrator


def create_services(
    settings: Settings | None = None,
    *,
    store: VersionStore | None = None,
    engine: BoqEngine | None = None,
    environment: EnvironmentalDataProvider | None = None,
    speech: SpeechSynthesizer | None = None,
) -> Services:
    """Build the service graph, filling any missing piece with defaults.

    Settings come from the environment when not given.  The default store is
    in-memory.
    """
    settings = settings or Settings.from_env()
    store = store or create_memory_store()
    engine = engine or create_default_engine()
    environment = environment or EnvironmentalDataProvider(settings)
    speech = speech or SpeechSynthesizer(settings)

    if not settings.weather_api_key and not settings.openweathermap_api_key:
        logger.warning("No weather API keys configured; environmental data will use defaults")

    return Services(
        settings=settings,
        store=store,
        engine=engine,
        environment=environment,
        speech=speech,
        designs=DesignService(store, engine, environment),
        chat=ChatOrchestrator(store, engine, speech),
    )
