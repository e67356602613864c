"""Tests for event setup and lifecycle."""

from datetime import datetime, timezone

import pytest

from mockdraft.errors import (
    ConflictError,
    DraftValidationError,
    InvalidStateError,
    NotFoundError,
)
from mockdraft.models.event_status import EventStatus
from mockdraft.services import draft_engine, event_admin
from tests.test_helpers import BASE_ORDER, make_submission


class TestNewEvent:
    def test_new_event_is_planned(self):
        event = event_admin.new_event("  Sunnydale Mock Draft ", "HELLMOUTH", event_id="evt-9")

        assert event.id == "evt-9"
        assert event.name == "Sunnydale Mock Draft"
        assert event.status == EventStatus.PLANNED
        assert event.teams == []

    def test_generates_id(self):
        first = event_admin.new_event("Bronze", "BRONZE")
        second = event_admin.new_event("Bronze", "BRONZE")

        assert first.id and first.id != second.id

    @pytest.mark.parametrize("name,code", [("", "CODE"), ("   ", "CODE"), ("Name", "")])
    def test_requires_name_and_code(self, name, code):
        with pytest.raises(DraftValidationError):
            event_admin.new_event(name, code)


class TestTeams:
    def test_add_team(self, event):
        team = event_admin.add_team(event, "Mayor's Minions", ["Wilkins"], team_id="T5")

        assert team.id == "T5"
        assert event.get_team("T5").captains == ["Wilkins"]

    def test_duplicate_team_name(self, event):
        with pytest.raises(ConflictError):
            event_admin.add_team(event, "sunnydale slayers")

    def test_teams_frozen_after_initialization(self, drafting_event):
        with pytest.raises(InvalidStateError):
            event_admin.add_team(drafting_event, "Mayor's Minions")

    def test_add_captain(self, event):
        team = event_admin.add_captain(event, "T1", "Dawn")

        assert team.captains == ["Buffy", "Dawn"]
        assert team.has_captain("dawn")

    def test_add_captain_errors(self, event):
        with pytest.raises(NotFoundError):
            event_admin.add_captain(event, "T9", "Dawn")
        with pytest.raises(ConflictError):
            event_admin.add_captain(event, "T1", "BUFFY")
        with pytest.raises(DraftValidationError):
            event_admin.add_captain(event, "T1", " ")


class TestPlayers:
    def test_add_players(self, event):
        created = event_admin.add_players(
            event,
            [
                {"name": "Glory", "position": "QB", "team": "Hell"},
                {"name": "Adam", "id": "p-adam"},
            ],
        )

        assert [p.name for p in created] == ["Glory", "Adam"]
        assert created[1].id == "p-adam"
        assert len(event.players) == 10

    def test_player_needs_a_name(self, event):
        with pytest.raises(DraftValidationError):
            event_admin.add_players(event, [{"position": "RB"}])
        assert len(event.players) == 8

    def test_duplicate_player_ids(self, event):
        with pytest.raises(ConflictError):
            event_admin.add_players(event, [{"name": "Angelus", "id": "p1"}])

    def test_pool_frozen_after_initialization(self, drafting_event):
        with pytest.raises(InvalidStateError):
            event_admin.add_players(drafting_event, [{"name": "Glory"}])


class TestTeamDraftOrder:
    def test_set_team_draft_order(self, event):
        order = event_admin.set_team_draft_order(event, ["T2", "T4", "T1", "T3"])

        assert order == ["T2", "T4", "T1", "T3"]
        draft_engine.initialize_draft(event)
        assert event.draft_order.base_order == ["T2", "T4", "T1", "T3"]

    def test_must_be_a_permutation(self, event):
        with pytest.raises(DraftValidationError):
            event_admin.set_team_draft_order(event, ["T1", "T2"])

    def test_rejected_after_initialization(self, drafting_event):
        with pytest.raises(ConflictError):
            event_admin.set_team_draft_order(drafting_event, BASE_ORDER)


class TestLifecycle:
    def test_open_event(self):
        event = event_admin.new_event("Bronze", "BRONZE")

        event_admin.open_event(event)

        assert event.status == EventStatus.OPEN
        with pytest.raises(InvalidStateError):
            event_admin.open_event(event)

    def test_close_event_locks_submissions(self, completed_event):
        completed_event.submissions["buffy"] = make_submission("buffy", {"p1": 1})

        event_admin.close_event(completed_event)

        assert completed_event.status == EventStatus.CLOSED
        assert completed_event.submissions["buffy"].locked
        with pytest.raises(InvalidStateError):
            event_admin.close_event(completed_event)


class TestUpdateEvent:
    def test_updates_given_fields_only(self, event):
        deadline = datetime(2026, 9, 1, 18, 0, tzinfo=timezone.utc)

        event_admin.update_event(event, description="Into every generation", draft_deadline=deadline)

        assert event.name == "Sunnydale Mock Draft"
        assert event.description == "Into every generation"
        assert event.draft_deadline == deadline

    def test_rename(self, event):
        event_admin.update_event(event, name=" The Bronze Draft ")

        assert event.name == "The Bronze Draft"

    def test_empty_name(self, event):
        with pytest.raises(DraftValidationError):
            event_admin.update_event(event, name="  ")


class TestRemoveCaptain:
    def test_remove_captain(self, event):
        team = event_admin.remove_captain(event, "T2", "tara")

        assert team.captains == ["Willow"]
        assert not event.get_team("T2").has_captain("Tara")

    def test_unknown_team_or_captain(self, event):
        with pytest.raises(NotFoundError):
            event_admin.remove_captain(event, "T9", "Tara")
        with pytest.raises(NotFoundError, match="Captain not found"):
            event_admin.remove_captain(event, "T1", "Faith")


class TestEventSummaryAndExport:
    def test_summary_counts(self, event):
        event.submissions["buffy"] = make_submission("buffy", {"p1": 1})

        summary = event_admin.event_summary(event)

        assert summary["code"] == "HELLMOUTH"
        assert summary["status"] == "OPEN"
        assert summary["counts"] == {"teams": 4, "players": 8, "submissions": 1}
        assert "players" not in summary

    def test_export_groups_picks_by_team(self, completed_event):
        completed_event.submissions["buffy"] = make_submission(
            "buffy", {"p5": 5, "p1": 1}, BASE_ORDER
        )

        export = event_admin.export_event(completed_event)

        assert export["event"]["id"] == "evt-1"
        assert len(export["players"]) == 8
        slayers = export["teams"][0]
        assert slayers["name"] == "Sunnydale Slayers"
        assert [(p["pick_number"], p["player_name"]) for p in slayers["picks"]] == [
            (1, "Angel"),
            (8, "Riley"),
        ]
        assert [p["team_name"] for p in export["picks"][:2]] == [
            "Sunnydale Slayers",
            "Willow's Witches",
        ]
        submission = export["submissions"][0]
        assert submission["user_id"] == "buffy"
        assert [(p["player_name"], p["slot"]) for p in submission["placements"]] == [
            ("Angel", 1),
            ("Faith", 5),
        ]
