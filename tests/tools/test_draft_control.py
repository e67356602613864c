"""Tests for the live draft control tools."""

import pytest

from mockdraft.models.event_status import EventStatus
from mockdraft.tools import (
    get_draft_state,
    initialize_draft,
    make_pick,
    pause_draft,
    reset_draft,
    resume_draft,
    undo_last_pick,
)
from tests.test_helpers import BASE_ORDER


class TestInitializeDraftTool:
    @pytest.mark.asyncio
    async def test_admin_initializes(self, store, event):
        await store.create(event)

        result = await initialize_draft("evt-1", BASE_ORDER, is_admin=True)

        assert result["success"] is True
        assert result["update"]["kind"] == "draft_initialized"
        assert result["update"]["state"]["status"] == "DRAFTING"
        assert result["update"]["state"]["draft_order"]["current_round"] == 1
        assert result["update"]["state"]["current_team"]["id"] == "T1"

    @pytest.mark.asyncio
    async def test_requires_admin(self, store, event):
        await store.create(event)

        result = await initialize_draft("evt-1", BASE_ORDER)

        assert result["success"] is False
        assert result["error_type"] == "forbidden"
        assert (await store.get("evt-1")).draft_order is None

    @pytest.mark.asyncio
    async def test_second_initialize_conflicts(self, store, drafting_event):
        await store.create(drafting_event)

        result = await initialize_draft("evt-1", BASE_ORDER, is_admin=True)

        assert result["error_type"] == "conflict"

    @pytest.mark.asyncio
    async def test_unknown_event(self, store):
        result = await initialize_draft("evt-404", is_admin=True)

        assert result["success"] is False
        assert result["error_type"] == "not_found"


class TestMakePickTool:
    @pytest.mark.asyncio
    async def test_captain_on_the_clock_can_pick(self, store, drafting_event):
        await store.create(drafting_event)

        result = await make_pick("evt-1", "p1", requester="buffy")

        assert result["success"] is True
        assert result["pick"]["team_id"] == "T1"
        assert result["pick"]["pick_number"] == 1
        assert result["update"]["state"]["current_team"]["id"] == "T2"

        stored = await store.get("evt-1")
        assert stored.draft_order.current_pick == 1

    @pytest.mark.asyncio
    async def test_other_captain_is_forbidden(self, store, drafting_event):
        await store.create(drafting_event)

        result = await make_pick("evt-1", "p1", requester="Willow")

        assert result["error_type"] == "forbidden"
        assert (await store.get("evt-1")).picks == []

    @pytest.mark.asyncio
    async def test_override_team_requires_admin(self, store, drafting_event):
        await store.create(drafting_event)

        forbidden = await make_pick("evt-1", "p1", requester="Buffy", team_id="T3")
        allowed = await make_pick("evt-1", "p1", is_admin=True, team_id="T3")

        assert forbidden["error_type"] == "forbidden"
        assert allowed["pick"]["team_id"] == "T3"

    @pytest.mark.asyncio
    async def test_player_id_required(self, store, drafting_event):
        await store.create(drafting_event)

        result = await make_pick("evt-1", "", is_admin=True)

        assert result["error_type"] == "validation"

    @pytest.mark.asyncio
    async def test_duplicate_pick_conflicts(self, store, drafting_event):
        await store.create(drafting_event)

        await make_pick("evt-1", "p1", is_admin=True)
        result = await make_pick("evt-1", "p1", is_admin=True)

        assert result["error_type"] == "conflict"
        assert (await store.get("evt-1")).draft_order.current_pick == 1

    @pytest.mark.asyncio
    async def test_last_pick_completes_draft(self, store, drafting_event):
        await store.create(drafting_event)

        for i in range(1, 8):
            await make_pick("evt-1", f"p{i}", is_admin=True)
        result = await make_pick("evt-1", "p8", is_admin=True)

        assert result["update"]["kind"] == "draft_completed"
        assert (await store.get("evt-1")).status == EventStatus.COMPLETED

        rejected = await make_pick("evt-1", "p8", is_admin=True)
        assert rejected["error_type"] == "invalid_state"


class TestUndoLastPickTool:
    @pytest.mark.asyncio
    async def test_captain_of_last_pick_can_undo(self, store, drafting_event):
        await store.create(drafting_event)
        await make_pick("evt-1", "p1", requester="Buffy")

        forbidden = await undo_last_pick("evt-1", requester="Willow")
        result = await undo_last_pick("evt-1", requester="Buffy")

        assert forbidden["error_type"] == "forbidden"
        assert result["success"] is True
        assert result["removed_pick"]["player_id"] == "p1"
        assert result["update"]["state"]["current_team"]["id"] == "T1"

    @pytest.mark.asyncio
    async def test_nothing_to_undo(self, store, drafting_event):
        await store.create(drafting_event)

        result = await undo_last_pick("evt-1", is_admin=True)

        assert result["error_type"] == "invalid_state"

    @pytest.mark.asyncio
    async def test_only_latest_pick_can_be_named(self, store, drafting_event):
        await store.create(drafting_event)
        await make_pick("evt-1", "p1", is_admin=True)
        await make_pick("evt-1", "p2", is_admin=True)

        stale = await undo_last_pick("evt-1", is_admin=True, pick_number=1)
        latest = await undo_last_pick("evt-1", is_admin=True, pick_number=2)

        assert stale["error_type"] == "invalid_state"
        assert latest["removed_pick"]["pick_number"] == 2


class TestPauseResumeResetTools:
    @pytest.mark.asyncio
    async def test_pause_and_resume(self, store, drafting_event):
        await store.create(drafting_event)

        paused = await pause_draft("evt-1", is_admin=True)
        resumed = await resume_draft("evt-1", is_admin=True)

        assert paused["update"]["state"]["status"] == "PAUSED"
        assert resumed["update"]["state"]["status"] == "DRAFTING"

    @pytest.mark.asyncio
    async def test_pause_requires_admin(self, store, drafting_event):
        await store.create(drafting_event)

        result = await pause_draft("evt-1")

        assert result["error_type"] == "forbidden"

    @pytest.mark.asyncio
    async def test_reset(self, store, drafting_event):
        await store.create(drafting_event)
        await make_pick("evt-1", "p1", is_admin=True)

        result = await reset_draft("evt-1", is_admin=True)

        assert result["update"]["kind"] == "draft_reset"
        stored = await store.get("evt-1")
        assert stored.draft_order is None
        assert stored.picks == []


class TestGetDraftStateTool:
    @pytest.mark.asyncio
    async def test_reads_board(self, store, drafting_event):
        await store.create(drafting_event)
        for player_id in ["p1", "p2", "p3", "p4"]:
            await make_pick("evt-1", player_id, is_admin=True)

        result = await get_draft_state("evt-1")

        state = result["state"]
        assert state["draft_order"]["current_pick"] == 4
        assert state["draft_order"]["current_round"] == 2
        assert state["draft_order"]["is_reversed"] is True
        assert state["current_team"]["id"] == "T4"
        assert [p["id"] for p in state["available_players"]] == ["p5", "p6", "p7", "p8"]

    @pytest.mark.asyncio
    async def test_unknown_event(self, store):
        result = await get_draft_state("evt-404")

        assert result["error_type"] == "not_found"
