"""Keyword-triggered layout changes from chat instructions.

Only enlargement is supported.  Intent detection is a literal substring scan
over the lower-cased instruction; it does not parse language.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dorry.models.design import ChangeSummary, DesignData
from dorry.models.enums import RoomType

logger = logging.getLogger(__name__)

AREA_GROWTH = 1.2
SIDE_GROWTH = 1.1
AREA_DELTA_RATIO = 0.2

_ENLARGE_KEYWORDS: tuple[str, ...] = ("larger", "bigger")

# First phrase found wins.
_ROOM_KEYWORDS: tuple[tuple[str, RoomType], ...] = (
    ("living room", RoomType.LIVING_ROOM),
    ("kitchen", RoomType.KITCHEN),
    ("bedroom", RoomType.BEDROOM),
    ("bathroom", RoomType.BATHROOM),
)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of :func:`mutate`.

    ``change_summary`` is ``None`` when the instruction asked for nothing
    supported; ``updated`` is then the unchanged input layout.
    """

    updated: DesignData
    change_summary: ChangeSummary | None = None

    @property
    def changed(self) -> bool:
        return self.change_summary is not None


def match_room_type(instruction: str) -> RoomType | None:
    text = instruction.lower()
    for phrase, room_type in _ROOM_KEYWORDS:
        if phrase in text:
            return room_type
    return None


def wants_enlargement(instruction: str) -> bool:
    text = instruction.lower()
    return any(keyword in text for keyword in _ENLARGE_KEYWORDS)


def mutate(current: DesignData, instruction: str) -> MutationResult:
    """Apply an enlargement request to a layout.

    Every room of the requested type grows by 20% in area and 10% in each
    side.  ``total_area`` grows by 20% of the first matching room's original
    area only, even when several rooms share the type.

    The input layout is never modified; a new ``DesignData`` is returned.
    """
    if not wants_enlargement(instruction):
        return MutationResult(updated=current)

    room_type = match_room_type(instruction)
    if room_type is None:
        return MutationResult(updated=current)

    targets = current.rooms_of_type(room_type)
    if not targets:
        logger.info("No %s in layout; nothing to enlarge", room_type)
        return MutationResult(updated=current)

    rooms = tuple(
        room.model_copy(
            update={
                "area": room.area * AREA_GROWTH,
                "width": room.width * SIDE_GROWTH,
                "height": room.height * SIDE_GROWTH,
            }
        )
        if room.type == room_type
        else room
        for room in current.rooms
    )

    # TODO: with several rooms of one type the total only grows by
    # one room's delta; confirm the intended aggregate before changing this.
    area_delta = targets[0].area * AREA_DELTA_RATIO

    updated = current.model_copy(
        update={"rooms": rooms, "total_area": current.total_area + area_delta}
    )
    return MutationResult(
        updated=updated,
        change_summary=ChangeSummary(room_modified=room_type, size_increase=True),
    )
