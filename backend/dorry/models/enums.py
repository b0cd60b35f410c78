"""Enums for the Dorry domain models."""

from enum import StrEnum


class RoomType(StrEnum):
    """Closed set of room types a generated layout can contain."""

    LIVING_ROOM = "living_room"
    KITCHEN = "kitchen"
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    OTHER = "other"

    @property
    def is_wet_area(self) -> bool:
        """Rooms needing plumbing, placed away from the prevailing wind."""
        return self in (RoomType.KITCHEN, RoomType.BATHROOM)


class BoqCategory(StrEnum):
    """Bill-of-quantities categories, in display order."""

    CONCRETE_FOUNDATION = "Concrete & Foundation"
    STRUCTURAL_ELEMENTS = "Structural Elements"
    FINISHES_MATERIALS = "Finishes & Materials"


class Sender(StrEnum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ProjectStatus(StrEnum):
    """Lifecycle stage of a project."""

    CONCEPT = "concept"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
