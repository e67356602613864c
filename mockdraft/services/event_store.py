import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List

from mockdraft.errors import ConflictError, NotFoundError
from mockdraft.models.draft_event import DraftEvent

logger = logging.getLogger(__name__)


class EventStore(ABC):
    """Abstract base class for event persistence.

    Implementations must serialize ``transaction`` blocks per event: two
    picks for the same event may never read the same progression state.
    """

    @abstractmethod
    async def create(self, event: DraftEvent) -> DraftEvent:
        """Store a new event"""
        pass

    @abstractmethod
    async def get(self, event_id: str) -> DraftEvent:
        """Return a snapshot of an event"""
        pass

    @abstractmethod
    async def find_by_code(self, code: str) -> DraftEvent:
        """Return a snapshot of the event with the given join code"""
        pass

    @abstractmethod
    async def list_events(self) -> List[DraftEvent]:
        """Return snapshots of all events"""
        pass

    @abstractmethod
    def transaction(self, event_id: str):
        """Async context manager yielding an event to read-modify-write"""
        pass


class InMemoryEventStore(EventStore):
    """Event store keeping events in a dict, with one asyncio lock per event"""

    def __init__(self):
        self._events: Dict[str, DraftEvent] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, event_id: str) -> asyncio.Lock:
        if event_id not in self._events:
            raise NotFoundError(f"Event {event_id} not found")
        return self._locks.setdefault(event_id, asyncio.Lock())

    async def create(self, event: DraftEvent) -> DraftEvent:
        if event.id in self._events:
            raise ConflictError(f"Event {event.id} already exists")
        if any(existing.code == event.code for existing in self._events.values()):
            raise ConflictError(f"Event code {event.code} already exists")

        self._events[event.id] = event.model_copy(deep=True)
        self._locks[event.id] = asyncio.Lock()
        logger.info(f"Created event {event.id} ({event.code})")
        return event.model_copy(deep=True)

    async def get(self, event_id: str) -> DraftEvent:
        async with self._lock_for(event_id):
            return self._events[event_id].model_copy(deep=True)

    async def find_by_code(self, code: str) -> DraftEvent:
        for event_id, event in list(self._events.items()):
            if event.code == code:
                return await self.get(event_id)
        raise NotFoundError(f"Event with code {code} not found")

    async def list_events(self) -> List[DraftEvent]:
        return [await self.get(event_id) for event_id in list(self._events)]

    @asynccontextmanager
    async def transaction(self, event_id: str) -> AsyncIterator[DraftEvent]:
        """
        Yield a working copy of an event and commit it if the block succeeds.

        Any exception raised inside the block discards the working copy, so a
        failed operation leaves the stored event untouched.
        """
        async with self._lock_for(event_id):
            working = self._events[event_id].model_copy(deep=True)
            yield working
            self._events[event_id] = working


_default_store: EventStore = InMemoryEventStore()


def get_event_store() -> EventStore:
    return _default_store


def set_event_store(store: EventStore) -> None:
    """Replace the store used by the tool layer."""
    global _default_store
    _default_store = store
