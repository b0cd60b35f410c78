"""Project and chat message models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, model_validator

from dorry.models.design import ChangeSummary  # noqa: TCH001
from dorry.models.enums import ProjectStatus, Sender


def _now() -> datetime:
    return datetime.now(UTC)


class ProjectCreate(BaseModel):
    """Fields a client supplies when creating or updating a project."""

    name: str = Field(min_length=1)
    description: str | None = None
    project_type: str | None = None
    land_area: float | None = Field(default=None, gt=0)
    budget: int | None = Field(default=None, ge=0)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    location: str | None = None
    cultural_style: str | None = None
    status: ProjectStatus = ProjectStatus.CONCEPT


class ProjectUpdate(BaseModel):
    """Partial update; unset fields are left untouched."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    project_type: str | None = None
    land_area: float | None = Field(default=None, gt=0)
    budget: int | None = Field(default=None, ge=0)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    location: str | None = None
    cultural_style: str | None = None
    status: ProjectStatus | None = None

    @model_validator(mode="after")
    def required_fields_not_cleared(self) -> ProjectUpdate:
        for field in ("name", "status"):
            if field in self.model_fields_set and getattr(self, field) is None:
                msg = f"{field} cannot be cleared"
                raise ValueError(msg)
        return self


class Project(ProjectCreate):
    """A persisted project.  Budget is in EGP, land area in square meters."""

    id: int
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class ChatMessage(BaseModel):
    """A persisted chat message tied to a project."""

    id: int
    project_id: int
    sender: Sender
    content: str
    timestamp: datetime = Field(default_factory=_now)
    design_changes: ChangeSummary | None = None
