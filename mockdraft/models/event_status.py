"""Event lifecycle status enumeration."""

from enum import Enum


class EventStatus(Enum):
    """Lifecycle of a mock draft event.

    PLANNED -> OPEN -> DRAFTING <-> PAUSED -> COMPLETED, with CLOSED
    reachable from any state as a terminal archive.
    """

    PLANNED = "PLANNED"
    OPEN = "OPEN"
    DRAFTING = "DRAFTING"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CLOSED = "CLOSED"

    @property
    def draft_started(self) -> bool:
        """True once predictions for the event are locked."""
        return self in (
            EventStatus.DRAFTING,
            EventStatus.PAUSED,
            EventStatus.COMPLETED,
            EventStatus.CLOSED,
        )
