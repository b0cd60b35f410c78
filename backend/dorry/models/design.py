"""Layout and versioned design models.

Every model here is frozen.  A layout change produces new objects via
``model_copy`` and a new :class:`Design` version; nothing is edited in place.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dorry.models.enums import RoomType
from dorry.models.environment import WeatherData  # noqa: TCH001


class Position(BaseModel):
    """Offset in meters from the layout origin."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Dimensions(BaseModel):
    """Width and height of the building envelope in meters."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)


class Room(BaseModel):
    """One functional space in a layout.

    ``area`` is tracked independently of ``width * height``; after scaling
    the two drift apart.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: RoomType
    area: float = Field(gt=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    position: Position
    rotation: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_wet_area(self) -> bool:
        return self.type.is_wet_area


class DesignData(BaseModel):
    """A single layout snapshot."""

    model_config = ConfigDict(frozen=True)

    rooms: tuple[Room, ...]
    total_area: float = Field(gt=0)
    dimensions: Dimensions

    def rooms_of_type(self, room_type: RoomType) -> list[Room]:
        return [r for r in self.rooms if r.type == room_type]


class ChangeSummary(BaseModel):
    """What a chat-triggered mutation changed."""

    model_config = ConfigDict(frozen=True)

    room_modified: RoomType
    size_increase: bool


class Design(BaseModel):
    """A persisted, immutable layout version for a project."""

    model_config = ConfigDict(frozen=True)

    id: int
    project_id: int
    design_data: DesignData
    environmental_data: WeatherData | None = None
    version: int = Field(ge=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
