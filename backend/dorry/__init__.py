"""Dorry design pipeline.

Generates concept floor plans from a plot and its climate, prices them into
a bill of quantities, and revises them from chat instructions.

Usage::

    from dorry import create_default_engine, generate, mutate

    layout = generate(750.0, weather)
    result = mutate(layout, "make the kitchen bigger")
    engine = create_default_engine()
    items = engine.estimate(result.updated.rooms, result.updated.total_area)
"""

from dorry.engine import BoqEngine
from dorry.exceptions import (
    DorryError,
    InvalidInputError,
    NotFoundError,
    PersistenceConflictError,
    UpstreamDegradedError,
)
from dorry.factory import create_default_engine
from dorry.layout import MutationResult, generate, mutate, resolve_orientation
from dorry.models import (
    Boq,
    BoqCategory,
    BoqItem,
    ChangeSummary,
    Design,
    DesignData,
    Room,
    RoomType,
    WeatherData,
)

__all__ = [
    "Boq",
    "BoqCategory",
    "BoqEngine",
    "BoqItem",
    "ChangeSummary",
    "Design",
    "DesignData",
    "DorryError",
    "InvalidInputError",
    "MutationResult",
    "NotFoundError",
    "PersistenceConflictError",
    "Room",
    "RoomType",
    "UpstreamDegradedError",
    "WeatherData",
    "create_default_engine",
    "generate",
    "mutate",
    "resolve_orientation",
]
