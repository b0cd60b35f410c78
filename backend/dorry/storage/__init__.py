"""Storage interfaces and the in-memory implementation."""

from dorry.storage.base import BoqStore, ChatLog, DesignLog, ProjectStore, VersionStore
from dorry.storage.memory import create_memory_store

__all__ = [
    "BoqStore",
    "ChatLog",
    "DesignLog",
    "ProjectStore",
    "VersionStore",
    "create_memory_store",
]
