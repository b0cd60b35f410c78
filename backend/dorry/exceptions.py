"""Custom exception hierarchy for the Dorry design pipeline."""

from __future__ import annotations


class DorryError(Exception):
    """Base exception for all Dorry errors."""

    retryable: bool = False


class InvalidInputError(DorryError):
    """Raised when land area, coordinates or other inputs are missing or invalid.

    Always raised before anything is written to the store.
    """


class NotFoundError(DorryError):
    """Raised when a referenced project, design or BOQ does not exist."""


class UpstreamDegradedError(DorryError):
    """An environmental or speech provider failed.

    Providers absorb these and fall back to defaults or ``None``; the class
    exists so provider internals can signal a degraded call to their own
    fallback handling.
    """


class PersistenceConflictError(DorryError):
    """Raised when a design version is written twice for the same project.

    Two concurrent turns can both read version N and both try to write
    N + 1.  The second write is rejected; callers may retry the turn.
    """

    retryable = True

    def __init__(self, project_id: int, version: int) -> None:
        self.project_id = project_id
        self.version = version
        super().__init__(
            f"Design version {version} already exists for project {project_id}"
        )


class DuplicateBoqError(DorryError):
    """Raised when a second BOQ row is created for a project.

    Each project has one live BOQ; later pricing runs update it in place.
    """

    def __init__(self, project_id: int, boq_id: int) -> None:
        self.project_id = project_id
        self.boq_id = boq_id
        super().__init__(
            f"Project {project_id} already has BOQ {boq_id}; update it instead"
        )
