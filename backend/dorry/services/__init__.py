"""Services orchestrating generation, chat revisions and external providers."""

from dorry.services.chat import ChatOrchestrator, ChatTurnResult, TurnOutcome
from dorry.services.design_service import DesignService, GenerationResult
from dorry.services.tts import SpeechSynthesizer
from dorry.services.weather import EnvironmentalDataProvider

__all__ = [
    "ChatOrchestrator",
    "ChatTurnResult",
    "DesignService",
    "EnvironmentalDataProvider",
    "GenerationResult",
    "SpeechSynthesizer",
    "TurnOutcome",
]
