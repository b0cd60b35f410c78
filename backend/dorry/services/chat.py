"""Chat orchestrator that turns chat messages into design revisions.

Each turn runs Received -> Classified -> (Mutated | Passthrough) -> Priced
-> Persisted -> Responded.  Writes are strictly ordered: the new design
version, then the BOQ, then the assistant's reply.  A reader may briefly see
a new design before its BOQ, but never a BOQ ahead of its design.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from dorry.exceptions import InvalidInputError, NotFoundError
from dorry.formatting import format_area, format_egp
from dorry.layout.mutator import mutate
from dorry.models.enums import Sender
from dorry.services.pricing import reprice

if TYPE_CHECKING:
    from dorry.engine import BoqEngine
    from dorry.models.boq import Boq
    from dorry.models.design import ChangeSummary, Design
    from dorry.models.project import ChatMessage
    from dorry.services.tts import SpeechSynthesizer
    from dorry.storage.base import VersionStore

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT = "I've received your message and will process it."


class TurnOutcome(StrEnum):
    """How a chat turn was classified."""

    PASSTHROUGH = "passthrough"
    ACKNOWLEDGED = "acknowledged"
    MUTATED = "mutated"


@dataclass(frozen=True)
class ChatTurnResult:
    """Everything a chat turn stored or produced."""

    outcome: TurnOutcome
    message: ChatMessage
    reply: ChatMessage | None = None
    speech_url: str | None = None
    design: Design | None = None
    boq: Boq | None = None
    change_summary: ChangeSummary | None = None
    cost_delta: float = 0.0


class ChatOrchestrator:
    """Handles one chat message at a time for a project.

    Args:
        store: Project, design, BOQ and chat persistence.
        engine: Prices mutated layouts.
        speech: Optional speech synthesizer for spoken replies.
    """

    def __init__(
        self,
        store: VersionStore,
        engine: BoqEngine,
        speech: SpeechSynthesizer | None = None,
    ) -> None:
        self._store = store
        self._engine = engine
        self._speech = speech

    async def handle_message(
        self,
        project_id: int,
        sender: Sender,
        content: str,
        *,
        tts: bool = False,
    ) -> ChatTurnResult:
        """Store a message and, for user messages, act on it.

        Only user messages trigger design work.  A user message on a project
        without any design gets an acknowledgment; designs are never created
        from chat.

        Raises
        ------
        NotFoundError
            If the project does not exist.
        InvalidInputError
            If the message is empty.
        PersistenceConflictError
            If a concurrent turn already stored the next design version.
            The BOQ and reply are not written; the turn can be retried.
        """
        if not content or not content.strip():
            msg = "Message content must not be empty"
            raise InvalidInputError(msg)

        project = await self._store.projects.get_project(project_id)
        if project is None:
            msg = f"Project {project_id} not found"
            raise NotFoundError(msg)

        message = await self._store.chat.create_chat_message(project_id, sender, content)

        if sender != Sender.USER:
            return ChatTurnResult(outcome=TurnOutcome.PASSTHROUGH, message=message)

        outcome = TurnOutcome.ACKNOWLEDGED
        reply_text = ACKNOWLEDGEMENT
        change_summary: ChangeSummary | None = None
        design: Design | None = None
        boq: Boq | None = None
        cost_delta = 0.0

        latest = await self._store.designs.get_latest_design(project_id)
        if latest is None:
            logger.info("Project %d has no design yet; acknowledging message", project_id)
        else:
            result = mutate(latest.design_data, content)
            if result.change_summary is not None:
                change_summary = result.change_summary
                design = await self._store.designs.create_design(
                    project_id,
                    result.updated,
                    latest.environmental_data,
                    latest.version + 1,
                )
                priced = await reprice(self._engine, self._store.boqs, project_id, result.updated)
                boq = priced.boq
                cost_delta = priced.cost_delta

                area_delta = result.updated.total_area - latest.design_data.total_area
                room_name = next(
                    (
                        r.name
                        for r in result.updated.rooms
                        if r.type == change_summary.room_modified
                    ),
                    str(change_summary.room_modified),
                )
                reply_text = (
                    f"I've updated the {room_name.lower()} dimensions. "
                    f"This increased the total built area by {format_area(area_delta)}. "
                    f"The budget has been adjusted accordingly with an increase of "
                    f"{format_egp(cost_delta)}. "
                    f"Would you like to see the modified floor plan?"
                )
                outcome = TurnOutcome.MUTATED
                logger.info(
                    "Enlarged %s in project %d (design v%d)",
                    change_summary.room_modified,
                    project_id,
                    design.version,
                )

        reply = await self._store.chat.create_chat_message(
            project_id, Sender.ASSISTANT, reply_text, change_summary
        )

        speech_url = await self._speak(reply_text) if tts else None

        return ChatTurnResult(
            outcome=outcome,
            message=message,
            reply=reply,
            speech_url=speech_url,
            design=design,
            boq=boq,
            change_summary=change_summary,
            cost_delta=cost_delta,
        )

    async def _speak(self, text: str) -> str | None:
        if self._speech is None:
            return None
        try:
            return await self._speech.synthesize_speech(text)
        except Exception:
            logger.exception("Speech synthesis failed; replying without audio")
            return None
