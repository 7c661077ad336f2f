"""
Game content for Cell Escape.

The map, the NPC roster, and all narrative text. This is data,
fixed at build time; nothing here changes during play.
"""

from __future__ import annotations

from src.content.narrative import NARRATIVE, NarrativeLibrary
from src.content.npcs import QUEST_HOOKS, QuestHook, create_npc_roster, quest_hook_for
from src.content.rooms import EXAMINE_TARGETS, EXITS, ROOMS

__all__ = [
    "EXAMINE_TARGETS",
    "EXITS",
    "NARRATIVE",
    "NarrativeLibrary",
    "QUEST_HOOKS",
    "QuestHook",
    "ROOMS",
    "create_npc_roster",
    "quest_hook_for",
]
