"""Tests for the room graph lookups."""

from __future__ import annotations

import pytest

from src.content import EXITS, ROOMS, NarrativeLibrary
from src.models import Direction, ExitStatus, FlagId, RoomId
from src.skills import (
    describe,
    exits_from,
    move_east,
    move_in,
    move_north,
    move_south,
    move_west,
)

ALL_FLAGS = frozenset(FlagId)
NO_FLAGS: frozenset[FlagId] = frozenset()


@pytest.fixture
def narrative() -> NarrativeLibrary:
    return NarrativeLibrary()


class TestMapData:
    """The static tables cover the whole map."""

    def test_every_room_defined(self):
        assert set(ROOMS) == set(RoomId)

    def test_exits_stay_inside_graph(self):
        for origin, exits in EXITS.items():
            assert origin in ROOMS
            for exit_ in exits.values():
                assert exit_.destination in ROOMS


class TestDirectionalMoves:
    """Tests for move_north / move_south / move_east / move_west."""

    @pytest.mark.parametrize("room", list(RoomId))
    @pytest.mark.parametrize("direction", list(Direction))
    def test_total_over_rooms(self, room: RoomId, direction: Direction):
        """Every room/direction pair gives an answer; refusals stay put."""
        result = move_in(room, direction, ALL_FLAGS)
        if direction not in EXITS.get(room, {}):
            assert result.status == ExitStatus.NO_EXIT
            assert result.room == room
        else:
            assert result.status == ExitStatus.MOVED

    def test_cell_door_needs_key(self):
        locked = move_north(RoomId.CELL, NO_FLAGS)
        assert locked.room == RoomId.CELL
        assert locked.status == ExitStatus.GATED
        assert locked.narration_key == "move.cell_door_locked"

        opened = move_north(RoomId.CELL, {FlagId.TOOK_KEY})
        assert opened.room == RoomId.CORRIDOR
        assert opened.moved

    def test_secret_passage_needs_examined_wall(self):
        assert move_south(RoomId.CELL, NO_FLAGS).status == ExitStatus.GATED
        assert move_south(RoomId.CELL, {FlagId.EXAMINED_WALL}).room == RoomId.SECRET_ROOM

    def test_armory_needs_blimpo(self):
        assert move_west(RoomId.COURTYARD, NO_FLAGS).room == RoomId.COURTYARD
        assert move_west(RoomId.COURTYARD, {FlagId.MET_BLIMPO}).room == RoomId.ARMORY

    def test_outer_gate_needs_unlock(self):
        assert move_north(RoomId.GATEHOUSE, {FlagId.MET_BLIMPO}).status == ExitStatus.GATED
        result = move_north(RoomId.GATEHOUSE, {FlagId.FINAL_ROOM_UNLOCKED})
        assert result.room == RoomId.OUTER_GATE

    def test_no_exit_distinct_from_gated(self):
        result = move_east(RoomId.CELL, NO_FLAGS)
        assert result.status == ExitStatus.NO_EXIT
        assert result.narration_key == "move.no_exit"

    def test_unrelated_flags_do_not_open_gates(self):
        flags = ALL_FLAGS - {FlagId.TOOK_KEY}
        assert move_north(RoomId.CELL, flags).room == RoomId.CELL

    def test_invalid_room_is_an_error(self):
        with pytest.raises(ValueError):
            move_north(99, NO_FLAGS)


class TestDescribe:
    """Tests for room descriptions."""

    def test_cell_description_changes_after_wall(self, narrative: NarrativeLibrary):
        before = describe(RoomId.CELL, NO_FLAGS, narrative)
        after = describe(RoomId.CELL, {FlagId.EXAMINED_WALL}, narrative)

        assert before.startswith("Cell\n")
        assert "badly cracked" in before
        assert "narrow passage" in after
        assert before != after

    def test_describe_every_room(self, narrative: NarrativeLibrary):
        for room in RoomId:
            assert describe(room, NO_FLAGS, narrative).startswith(ROOMS[room].name)

    def test_describe_invalid_room(self, narrative: NarrativeLibrary):
        with pytest.raises(ValueError):
            describe(-1, NO_FLAGS, narrative)


class TestExitsFrom:
    """Tests for listing open exits."""

    def test_cell_starts_with_no_open_exits(self):
        assert exits_from(RoomId.CELL, NO_FLAGS) == []

    def test_guard_room_exits_in_compass_order(self):
        assert exits_from(RoomId.GUARD_ROOM, NO_FLAGS) == [
            Direction.NORTH,
            Direction.SOUTH,
            Direction.EAST,
            Direction.WEST,
        ]
