"""
NPC roster for Cell Escape.

The roster is fixed: a fresh copy is created for every new game.
Quest wiring (which item an NPC wants, which global flags their
progress sets) is keyed by location, since location is what ties
an NPC to the map.
"""

from __future__ import annotations

from pydantic import BaseModel

from src.models.npc import NPC, create_npc
from src.models.world import FlagId, RoomId


class QuestHook(BaseModel):
    """How an NPC's quest connects to the player's flags."""

    model_config = {"frozen": True}

    quest_item: FlagId
    """Possession flag the NPC wants handed over."""

    on_meet: FlagId | None = None
    """Set once the NPC has been met."""

    on_complete: FlagId | None = None
    """Set once the NPC's quest is done."""


QUEST_HOOKS: dict[RoomId, QuestHook] = {
    RoomId.GUARD_ROOM: QuestHook(quest_item=FlagId.TOOK_BROOM),
    RoomId.GATEHOUSE: QuestHook(
        quest_item=FlagId.TOOK_NAIL,
        on_meet=FlagId.MET_BLIMPO,
        on_complete=FlagId.FINAL_ROOM_UNLOCKED,
    ),
}


def create_npc_roster() -> list[NPC]:
    """Create the starting roster, every NPC unmet."""
    return [
        create_npc("Carl", key_prefix="npc.carl", location=RoomId.GUARD_ROOM),
        create_npc("Blimpo", key_prefix="npc.blimpo", location=RoomId.GATEHOUSE),
    ]


def quest_hook_for(npc: NPC) -> QuestHook | None:
    return QUEST_HOOKS.get(npc.location)
