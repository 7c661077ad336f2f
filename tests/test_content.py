"""Tests for the built-in game content."""

from __future__ import annotations

import pytest

from src.content import (
    EXAMINE_TARGETS,
    EXITS,
    NARRATIVE,
    QUEST_HOOKS,
    ROOMS,
    NarrativeLibrary,
    create_npc_roster,
)
from src.models import START_ROOM, Direction, FlagId, GameState, RoomId
from src.skills import move


def _referenced_keys() -> set[str]:
    keys = {"move.moved", "move.no_exit", "talk.nobody", "game.victory"}
    for room in ROOMS.values():
        keys.add(room.description_key)
        if room.alt_description_key:
            keys.add(room.alt_description_key)
    for exits in EXITS.values():
        for exit_ in exits.values():
            keys.add(exit_.locked_key)
            if exit_.travel_key:
                keys.add(exit_.travel_key)
    for target in EXAMINE_TARGETS:
        keys.update({target.discovery_key, target.nothing_new_key})
    for npc in create_npc_roster():
        keys.update(
            {npc.monologue_intro, npc.monologue_neutral, npc.monologue_ending, npc.monologue_done}
        )
    return keys


class TestNarrative:
    """Tests for the narrative table and library."""

    def test_every_referenced_key_exists(self):
        missing = _referenced_keys() - set(NARRATIVE)
        assert not missing

    def test_unknown_key_raises(self):
        library = NarrativeLibrary()
        assert "no.such.key" not in library
        with pytest.raises(KeyError):
            library.get("no.such.key")

    def test_fields_are_filled(self):
        assert NarrativeLibrary().get("move.moved", direction="east") == "You head east."

    def test_from_directory(self, tmp_path):
        (tmp_path / "npc.carl.intro.txt").write_text("Howdy.\n", encoding="utf-8")
        (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")

        library = NarrativeLibrary.from_directory(tmp_path)

        assert library.get("npc.carl.intro") == "Howdy."
        assert library.get("npc.carl.neutral") == NARRATIVE["npc.carl.neutral"]


class TestMap:
    """Tests for the map layout."""

    def test_every_room_reachable_with_all_flags(self):
        seen = {START_ROOM}
        frontier = [START_ROOM]
        while frontier:
            room = frontier.pop()
            for exit_ in EXITS.get(room, {}).values():
                if exit_.destination not in seen:
                    seen.add(exit_.destination)
                    frontier.append(exit_.destination)
        assert seen == set(RoomId)

    def test_gated_flags_are_obtainable(self):
        gates = {
            exit_.requires
            for exits in EXITS.values()
            for exit_ in exits.values()
            if exit_.requires is not None
        }
        obtainable = {t.flag for t in EXAMINE_TARGETS}
        for hook in QUEST_HOOKS.values():
            obtainable.update(f for f in (hook.on_meet, hook.on_complete) if f is not None)
        assert gates <= obtainable
        assert obtainable == set(FlagId)

    def test_npcs_stand_in_hooked_rooms(self):
        assert {npc.location for npc in create_npc_roster()} == set(QUEST_HOOKS)


class TestNarrativeOverridesWithBraces:
    """Override files may contain braces that are not placeholders."""

    def test_unknown_placeholder_left_in_place(self, tmp_path):
        (tmp_path / "move.crawl_through.txt").write_text(
            "You squeeze through {carefully}.", encoding="utf-8"
        )
        library = NarrativeLibrary.from_directory(tmp_path)

        outcome = move(GameState(examined_wall=True), Direction.SOUTH, library)

        assert outcome.state.curr_room == RoomId.SECRET_ROOM
        assert outcome.narrative == "You squeeze through {carefully}."

    def test_known_placeholder_still_filled(self):
        library = NarrativeLibrary({"move.moved": "Off {direction}, {quietly}."})
        assert library.get("move.moved", direction="east") == "Off east, {quietly}."

    @pytest.mark.parametrize("text", ["A lone { brace", "Numbered {0} slot", "{mood.deep}"])
    def test_malformed_format_returned_as_written(self, text):
        library = NarrativeLibrary({"move.no_exit": text})
        assert library.get("move.no_exit", direction="north") == text
