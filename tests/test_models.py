"""Tests for the core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models import (
    NPC,
    START_ROOM,
    DialogueStage,
    FlagId,
    GameState,
    RoomId,
    create_npc,
    room_id,
    set_flag,
)


@pytest.fixture
def carl() -> NPC:
    return create_npc("Carl", key_prefix="npc.carl", location=RoomId.GUARD_ROOM)


# =============================================================================
# World Vocabulary
# =============================================================================


class TestRoomId:
    """Tests for room identifiers."""

    def test_thirteen_rooms_numbered_from_zero(self):
        assert [int(r) for r in RoomId] == list(range(13))

    def test_room_id_coerces_int(self):
        assert room_id(9) is RoomId.COURTYARD

    def test_room_id_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown room"):
            room_id(13)

    def test_flag_values_match_state_fields(self):
        for flag in FlagId:
            assert flag.value in GameState.model_fields


# =============================================================================
# GameState
# =============================================================================


class TestGameState:
    """Tests for GameState and set_flag."""

    def test_new_game_defaults(self):
        state = GameState.new()
        assert state.curr_room == START_ROOM == RoomId.CELL
        assert state.active_flags() == frozenset()
        for flag in FlagId:
            assert state.flag(flag) is False

    def test_state_is_immutable(self):
        state = GameState.new()
        with pytest.raises(ValidationError):
            state.took_key = True

    def test_invalid_room_rejected(self):
        with pytest.raises(ValidationError):
            GameState(curr_room=42)

    def test_set_flag_changes_exactly_one_field(self):
        state = GameState(curr_room=RoomId.STOREROOM, examined_wall=True)
        updated = set_flag(state, FlagId.TOOK_BROOM)

        assert updated.took_broom is True
        assert updated.examined_wall is True
        assert updated.curr_room == RoomId.STOREROOM
        assert updated.active_flags() == {FlagId.EXAMINED_WALL, FlagId.TOOK_BROOM}
        # Original untouched
        assert state.took_broom is False

    def test_set_flag_same_value_returns_same_state(self):
        state = GameState(took_key=True)
        assert set_flag(state, FlagId.TOOK_KEY, True) is state
        assert set_flag(GameState.new(), FlagId.TOOK_KEY, False) == GameState.new()

    def test_flags_cannot_be_cleared(self):
        state = GameState(took_key=True)
        with pytest.raises(ValueError, match="cannot be cleared"):
            set_flag(state, FlagId.TOOK_KEY, False)

    def test_at_moves_without_touching_flags(self):
        state = GameState(took_key=True)
        moved = state.at(RoomId.CORRIDOR)
        assert moved.curr_room == RoomId.CORRIDOR
        assert moved.took_key is True


# =============================================================================
# NPC
# =============================================================================


class TestNPC:
    """Tests for the NPC dialogue stages."""

    def test_create_npc_defaults(self, carl: NPC):
        assert carl.stage == DialogueStage.UNMET
        assert carl.monologue_intro == "npc.carl.intro"
        assert carl.monologue_done == "npc.carl.done"
        assert carl.location == RoomId.GUARD_ROOM

    def test_advance_order(self, carl: NPC):
        met = carl.advance()
        assert met.stage == DialogueStage.MET
        # Talking again without the item doesn't progress
        assert met.advance().stage == DialogueStage.MET

        given = met.receive_item()
        assert given.stage == DialogueStage.ITEM_GIVEN
        done = given.advance()
        assert done.stage == DialogueStage.QUEST_DONE
        assert done.advance() == done

    def test_receive_item_implies_met(self, carl: NPC):
        given = carl.receive_item()
        assert given.has_been_met is True
        assert given.given_quest_item is True
        assert given.quest_done is False

    def test_transitions_do_not_mutate(self, carl: NPC):
        carl.advance()
        carl.receive_item()
        assert carl.stage == DialogueStage.UNMET

    def test_current_monologue_tracks_stage(self, carl: NPC):
        assert carl.current_monologue == "npc.carl.intro"
        assert carl.with_stage(DialogueStage.MET).current_monologue == "npc.carl.neutral"
        assert carl.with_stage(DialogueStage.ITEM_GIVEN).current_monologue == "npc.carl.ending"
        assert carl.with_stage(DialogueStage.QUEST_DONE).current_monologue == "npc.carl.done"

    def test_item_before_meeting_rejected(self):
        with pytest.raises(ValidationError):
            NPC(
                name="Odd",
                has_been_met=False,
                given_quest_item=True,
                monologue_intro="a",
                monologue_neutral="b",
                monologue_ending="c",
                monologue_done="d",
                location=RoomId.CHAPEL,
            )

    def test_done_without_item_rejected(self):
        with pytest.raises(ValidationError):
            NPC(
                name="Odd",
                has_been_met=True,
                quest_done=True,
                monologue_intro="a",
                monologue_neutral="b",
                monologue_ending="c",
                monologue_done="d",
                location=RoomId.CHAPEL,
            )
