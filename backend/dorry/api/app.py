"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, Field

# Load .env from the project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from dorry.api.deps import Services, create_services
from dorry.exceptions import (
    DorryError,
    DuplicateBoqError,
    InvalidInputError,
    NotFoundError,
    PersistenceConflictError,
)
from dorry.formatting import format_category_summary, format_egp
from dorry.models.enums import Sender
from dorry.models.project import ProjectCreate, ProjectUpdate  # noqa: TCH001 (FastAPI resolves at runtime)
from dorry.services.chat import TurnOutcome
from dorry.services.weather import validate_coordinates

if TYPE_CHECKING:
    from dorry.models.project import Project

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

_STATUS_BY_ERROR: tuple[tuple[type[DorryError], int], ...] = (
    (InvalidInputError, 400),
    (NotFoundError, 404),
    (PersistenceConflictError, 409),
    (DuplicateBoqError, 409),
)

_AUDIO_FILENAME = re.compile(r"^speech_\d+\.mp3$")


class ChatRequest(BaseModel):
    """Chat message posted by a client."""

    content: str = Field(min_length=1)
    sender: Sender = Sender.USER
    tts: bool = False


def create_app(*, services: Services | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    services
        Optional pre-built service graph for dependency injection (e.g.
        tests).  If not provided, one is built from environment variables
        with an in-memory store.
    """
    services = services or create_services()
    app = FastAPI(title="Dorry", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(services.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.services = services

    @app.exception_handler(DorryError)
    async def dorry_error_handler(request: Request, exc: DorryError) -> JSONResponse:
        status = next(
            (code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type)),
            500,
        )
        if status == 500:
            logger.error("Unhandled pipeline error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status,
            content={
                "detail": str(exc),
                "error": type(exc).__name__,
                "retryable": exc.retryable,
            },
        )

    async def _get_project(project_id: int) -> Project:
        project = await services.store.projects.get_project(project_id)
        if project is None:
            raise HTTPException(status_code=404, detail="Project not found")
        return project

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @app.post("/api/projects", status_code=201)
    async def create_project(data: ProjectCreate) -> dict[str, Any]:
        project = await services.store.projects.create_project(data)
        return project.model_dump(mode="json")

    @app.get("/api/projects")
    async def list_projects() -> list[dict[str, Any]]:
        projects = await services.store.projects.list_projects()
        return [p.model_dump(mode="json") for p in projects]

    @app.get("/api/projects/{project_id}")
    async def get_project(project_id: int) -> dict[str, Any]:
        project = await _get_project(project_id)
        return project.model_dump(mode="json")

    @app.put("/api/projects/{project_id}")
    async def update_project(project_id: int, data: ProjectUpdate) -> dict[str, Any]:
        await _get_project(project_id)
        updated = await services.store.projects.update_project(project_id, data)
        if updated is None:
            raise HTTPException(status_code=404, detail="Project not found")
        return updated.model_dump(mode="json")

    @app.delete("/api/projects/{project_id}", status_code=204)
    async def delete_project(project_id: int) -> Response:
        await _get_project(project_id)
        await services.store.delete_project(project_id)
        return Response(status_code=204)

    # ------------------------------------------------------------------
    # GET /api/environmental-analysis
    # ------------------------------------------------------------------

    @app.get("/api/environmental-analysis")
    async def environmental_analysis(
        latitude: float = Query(...),
        longitude: float = Query(...),
    ) -> dict[str, Any]:
        lat, lon = validate_coordinates(latitude, longitude)
        data = await services.environment.fetch_environmental_data(lat, lon)
        return data.model_dump(mode="json")

    # ------------------------------------------------------------------
    # Designs
    # ------------------------------------------------------------------

    @app.post("/api/projects/{project_id}/generate-design", status_code=201)
    async def generate_design(project_id: int) -> dict[str, Any]:
        result = await services.designs.generate_design(project_id)
        return {
            "design": result.design.model_dump(mode="json"),
            "boq": result.boq.model_dump(mode="json"),
            "environmental_data": result.environmental_data.model_dump(mode="json"),
        }

    @app.get("/api/projects/{project_id}/designs")
    async def list_designs(project_id: int) -> list[dict[str, Any]]:
        await _get_project(project_id)
        designs = await services.store.designs.list_designs(project_id)
        return [d.model_dump(mode="json") for d in designs]

    @app.get("/api/projects/{project_id}/designs/latest")
    async def latest_design(project_id: int) -> dict[str, Any]:
        await _get_project(project_id)
        design = await services.store.designs.get_latest_design(project_id)
        if design is None:
            raise HTTPException(status_code=404, detail="No designs found for this project")
        return design.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/projects/{id}/boq
    # ------------------------------------------------------------------

    @app.get("/api/projects/{project_id}/boq")
    async def get_boq(project_id: int) -> dict[str, Any]:
        project = await _get_project(project_id)
        boq = await services.store.boqs.get_boq(project_id)
        if boq is None:
            raise HTTPException(status_code=404, detail="No BOQ found for this project")

        summary = services.engine.group_by_category(boq.items)
        warning = services.engine.check_budget(boq.total_cost, project.budget)
        return {
            "boq": boq.model_dump(mode="json"),
            "category_summary": {str(k): v for k, v in summary.items()},
            "category_summary_formatted": format_category_summary(summary),
            "total_cost_formatted": format_egp(boq.total_cost),
            "budget_warning": warning.model_dump(mode="json") if warning else None,
        }

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    @app.post("/api/projects/{project_id}/chat", status_code=201)
    async def post_chat(project_id: int, request: ChatRequest) -> dict[str, Any]:
        turn = await services.chat.handle_message(
            project_id, request.sender, request.content, tts=request.tts
        )
        if turn.outcome == TurnOutcome.PASSTHROUGH:
            return {"user_message": None, "assistant_message": turn.message.model_dump(mode="json")}

        return {
            "user_message": turn.message.model_dump(mode="json"),
            "assistant_message": turn.reply.model_dump(mode="json") if turn.reply else None,
            "speech_url": turn.speech_url,
            "outcome": turn.outcome.value,
            "design_version": turn.design.version if turn.design else None,
            "cost_delta": turn.cost_delta,
        }

    @app.get("/api/projects/{project_id}/chat")
    async def chat_history(project_id: int) -> list[dict[str, Any]]:
        await _get_project(project_id)
        messages = await services.store.chat.get_chat_history(project_id)
        return [m.model_dump(mode="json") for m in messages]

    # ------------------------------------------------------------------
    # Text-to-speech
    # ------------------------------------------------------------------

    @app.get("/api/tts/status")
    def tts_status() -> dict[str, bool]:
        return {"available": services.speech.is_available()}

    @app.get("/api/tts/{filename}")
    def tts_audio(filename: str) -> FileResponse:
        if not _AUDIO_FILENAME.match(filename):
            raise HTTPException(status_code=404, detail="Audio not found")
        path = services.speech.audio_dir / filename
        if not path.is_file():
            raise HTTPException(status_code=404, detail="Audio not found")
        return FileResponse(path, media_type="audio/mpeg")

    return app
