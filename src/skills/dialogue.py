"""
Dialogue Skills.

Talking to an NPC shows the monologue for its current stage and then
moves it along its arc. Quest-critical NPCs also flip global flags,
which is how conversations open up new parts of the map.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from src.content.narrative import NarrativeLibrary
from src.content.npcs import quest_hook_for
from src.models.npc import NPC, DialogueStage
from src.models.state import GameState, set_flag

logger = logging.getLogger(__name__)


class TalkOutcome(BaseModel):
    """Result of a talk command."""

    npcs: list[NPC]
    state: GameState
    narrative: str
    npc_name: str | None = None


def speak(npc: NPC, narrative: NarrativeLibrary) -> tuple[NPC, str]:
    """
    Have an NPC say their piece.

    The text always reflects the stage *before* this call; the NPC
    returned has been advanced one step (QUEST_DONE stays put).

    Returns:
        Tuple of (updated NPC, monologue text)
    """
    text = narrative.get(npc.current_monologue)
    updated = npc.advance()
    if updated.stage != npc.stage:
        logger.debug("%s: %s -> %s", npc.name, npc.stage.value, updated.stage.value)
    return updated, text


def find_npc_index(npcs: list[NPC], state: GameState) -> int | None:
    """Index of the first NPC standing in the player's room."""
    for index, npc in enumerate(npcs):
        if npc.location == state.curr_room:
            return index
    return None


def talk(npcs: list[NPC], state: GameState, narrative: NarrativeLibrary) -> TalkOutcome:
    """
    Talk to whoever is in the current room.

    If the player carries the NPC's quest item and hasn't handed it
    over yet, it is given before the NPC speaks.

    Args:
        npcs: Current roster (not modified)
        state: Current game state
        narrative: Text lookup

    Returns:
        TalkOutcome with a new roster and state. With nobody present,
        the inputs come back unchanged.
    """
    index = find_npc_index(npcs, state)
    if index is None:
        return TalkOutcome(npcs=npcs, state=state, narrative=narrative.get("talk.nobody"))

    npc = npcs[index]
    hook = quest_hook_for(npc)

    if hook is not None and state.flag(hook.quest_item) and not npc.given_quest_item:
        logger.debug("%s receives %s", npc.name, hook.quest_item.value)
        npc = npc.receive_item()

    npc, text = speak(npc, narrative)

    if hook is not None:
        if hook.on_meet is not None and npc.has_been_met:
            state = set_flag(state, hook.on_meet)
        if hook.on_complete is not None and npc.stage == DialogueStage.QUEST_DONE:
            state = set_flag(state, hook.on_complete)

    updated = list(npcs)
    updated[index] = npc
    return TalkOutcome(npcs=updated, state=state, narrative=text, npc_name=npc.name)
