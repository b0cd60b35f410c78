"""Layout generation and chat-driven layout changes."""

from dorry.layout.generator import generate, resolve_orientation
from dorry.layout.mutator import MutationResult, mutate

__all__ = [
    "MutationResult",
    "generate",
    "mutate",
    "resolve_orientation",
]
