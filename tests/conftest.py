"""
Shared pytest fixtures for all tests.
"""

import pytest

from mockdraft.models.draft_event import DraftEvent
from mockdraft.models.event_status import EventStatus
from mockdraft.models.player import Player
from mockdraft.models.team import Team
from mockdraft.services import draft_engine
from mockdraft.services.event_store import InMemoryEventStore, set_event_store
from mockdraft.services.stats_cache import clear_stats_cache
from tests.test_helpers import BASE_ORDER, draft_players_in_order


@pytest.fixture
def teams():
    """Four teams; alphabetical order by name is T4, T1, T2, T3."""
    return [
        Team(id="T1", name="Sunnydale Slayers", captains=["Buffy"]),
        Team(id="T2", name="Willow's Witches", captains=["Willow", "Tara"]),
        Team(id="T3", name="Xander's Xperts", captains=["Xander"]),
        Team(id="T4", name="Giles' Watchers", captains=["Giles"]),
    ]


@pytest.fixture
def players():
    """Eight players, enough for exactly two snake rounds with four teams."""
    names = [
        "Angel",
        "Spike",
        "Cordelia",
        "Oz",
        "Faith",
        "Anya",
        "Dawn",
        "Riley",
    ]
    return [
        Player(id=f"p{index}", name=name, team="Sunnydale")
        for index, name in enumerate(names, start=1)
    ]


@pytest.fixture
def event(teams, players):
    """An open event with teams and players but no draft yet."""
    return DraftEvent(
        id="evt-1",
        name="Sunnydale Mock Draft",
        code="HELLMOUTH",
        status=EventStatus.OPEN,
        teams=teams,
        players=players,
    )


@pytest.fixture
def drafting_event(event):
    """The event with its draft initialized in T1..T4 order."""
    draft_engine.initialize_draft(event, BASE_ORDER)
    return event


@pytest.fixture
def completed_event(drafting_event):
    """Every player drafted in id order: p1..p8 go at picks 1..8."""
    return draft_players_in_order(drafting_event, [f"p{i}" for i in range(1, 9)])


@pytest.fixture
def store():
    """Fresh in-memory store wired into the tool layer, with an empty stats cache."""
    fresh = InMemoryEventStore()
    set_event_store(fresh)
    clear_stats_cache()
    yield fresh
    set_event_store(InMemoryEventStore())
    clear_stats_cache()
