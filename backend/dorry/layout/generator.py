"""Concept layout generation from land area and prevailing wind.

The building footprint covers 60% of the plot as a 1 : 1.5 rectangle.  Four
rooms are laid out inside it; wet rooms (kitchen, bathroom) are pushed to the
side of the envelope away from the prevailing wind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dorry.exceptions import InvalidInputError
from dorry.models.design import DesignData, Dimensions, Position, Room
from dorry.models.enums import RoomType

if TYPE_CHECKING:
    from dorry.models.environment import WeatherData

BUILT_AREA_RATIO = 0.6
ASPECT_RATIO = 1.5

# Margin between the layout origin and the envelope.
_ORIGIN_OFFSET = 10.0

# Checked in order; the first label found in the wind direction wins, so
# "North-East" resolves to 0.
_ORIENTATION_BY_CARDINAL: tuple[tuple[str, int], ...] = (
    ("North", 0),
    ("East", 90),
    ("South", 180),
    ("West", 270),
)


@dataclass(frozen=True)
class _RoomTemplate:
    """Room share of the plot and its size as a fraction of the envelope."""

    id: str
    name: str
    room_type: RoomType
    area_ratio: float
    width_ratio: float
    height_ratio: float


_ROOM_TEMPLATES: tuple[_RoomTemplate, ...] = (
    _RoomTemplate("1", "Living Room", RoomType.LIVING_ROOM, 0.25, 0.7, 0.4),
    _RoomTemplate("2", "Kitchen", RoomType.KITCHEN, 0.10, 0.3, 0.3),
    _RoomTemplate("3", "Bedroom", RoomType.BEDROOM, 0.15, 0.5, 0.3),
    _RoomTemplate("4", "Bathroom", RoomType.BATHROOM, 0.05, 0.3, 0.2),
)


def resolve_orientation(wind_direction: str) -> int:
    """Map a compass label to a placement rotation of 0, 90, 180 or 270.

    This is a literal, case-sensitive substring scan, not a parser.
    """
    for cardinal, degrees in _ORIENTATION_BY_CARDINAL:
        if cardinal in wind_direction:
            return degrees
    return 0


def building_dimensions(land_area: float) -> Dimensions:
    """Envelope for a plot: 60% coverage, height 1.5x width."""
    width = math.sqrt(land_area * BUILT_AREA_RATIO)
    return Dimensions(width=width, height=width * ASPECT_RATIO)


def generate(land_area: float, environmental: WeatherData) -> DesignData:
    """Generate the initial concept layout for a plot.

    Args:
        land_area: Plot area in square meters.
        environmental: Site conditions; only ``wind_direction`` is used.

    Returns:
        A layout with living room, kitchen, bedroom and bathroom in that
        order and ``total_area`` equal to 60% of the plot.

    Raises:
        InvalidInputError: If ``land_area`` is not positive.
    """
    if not land_area or land_area <= 0 or not math.isfinite(land_area):
        msg = f"land_area must be a positive number, got {land_area!r}"
        raise InvalidInputError(msg)

    orientation = resolve_orientation(environmental.wind_direction)
    dims = building_dimensions(land_area)

    rooms = tuple(
        Room(
            id=t.id,
            name=t.name,
            type=t.room_type,
            area=land_area * t.area_ratio,
            width=dims.width * t.width_ratio,
            height=dims.height * t.height_ratio,
            position=_place(t.room_type, orientation, dims),
        )
        for t in _ROOM_TEMPLATES
    )

    return DesignData(
        rooms=rooms,
        total_area=land_area * BUILT_AREA_RATIO,
        dimensions=dims,
    )


def _place(room_type: RoomType, orientation: int, dims: Dimensions) -> Position:
    living_height = dims.height * 0.4
    living_width = dims.width * 0.7
    along_x = orientation in (0, 180)

    if room_type == RoomType.KITCHEN:
        if along_x:
            return Position(x=_ORIGIN_OFFSET + living_width, y=_ORIGIN_OFFSET)
        return Position(x=_ORIGIN_OFFSET, y=_ORIGIN_OFFSET + living_height)

    if room_type == RoomType.BATHROOM:
        # The bathroom offsets are measured from the envelope, not the
        # origin margin; existing layouts depend on these coordinates.
        if along_x:
            return Position(x=living_width, y=_ORIGIN_OFFSET + living_height)
        return Position(x=_ORIGIN_OFFSET, y=living_height)

    if room_type == RoomType.BEDROOM:
        return Position(x=_ORIGIN_OFFSET, y=_ORIGIN_OFFSET + living_height)

    return Position(x=_ORIGIN_OFFSET, y=_ORIGIN_OFFSET)
