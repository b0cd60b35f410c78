"""Domain models for the Dorry design pipeline."""

from dorry.models.boq import Boq, BoqItem, BudgetWarning
from dorry.models.design import (
    ChangeSummary,
    Design,
    DesignData,
    Dimensions,
    Position,
    Room,
)
from dorry.models.enums import BoqCategory, ProjectStatus, RoomType, Sender
from dorry.models.environment import GeoLocation, WeatherData
from dorry.models.project import ChatMessage, Project, ProjectCreate, ProjectUpdate

__all__ = [
    "Boq",
    "BoqCategory",
    "BoqItem",
    "BudgetWarning",
    "ChangeSummary",
    "ChatMessage",
    "Design",
    "DesignData",
    "Dimensions",
    "GeoLocation",
    "Position",
    "Project",
    "ProjectCreate",
    "ProjectStatus",
    "ProjectUpdate",
    "Room",
    "RoomType",
    "Sender",
    "WeatherData",
]
