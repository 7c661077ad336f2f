"""
Examine Skill.

Table-driven: each examinable object lives in one room and sets one
flag the first time it is examined. Looking again changes nothing.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from src.content.narrative import NarrativeLibrary
from src.content.rooms import EXAMINE_TARGETS
from src.models.state import GameState, set_flag
from src.models.world import ExamineTarget

logger = logging.getLogger(__name__)


class ExamineOutcome(BaseModel):
    """Result of examining something."""

    state: GameState
    narrative: str
    discovered: bool = False


def find_target(state: GameState, target: str) -> ExamineTarget | None:
    """Find an examinable object by name in the player's current room."""
    for candidate in EXAMINE_TARGETS:
        if candidate.room == state.curr_room and candidate.matches(target):
            return candidate
    return None


def examine(state: GameState, target: str, narrative: NarrativeLibrary) -> ExamineOutcome:
    """
    Examine an object in the current room.

    Args:
        state: Current game state
        target: Object name as typed by the player
        narrative: Text lookup

    Returns:
        ExamineOutcome. ``discovered`` is True only when a flag was set.
    """
    target = target.strip().lower()
    if not target:
        return ExamineOutcome(state=state, narrative=narrative.get("examine.what"))

    found = find_target(state, target)
    if found is None:
        return ExamineOutcome(
            state=state, narrative=narrative.get("examine.unknown", target=target)
        )

    if state.flag(found.flag):
        return ExamineOutcome(state=state, narrative=narrative.get(found.nothing_new_key))

    logger.debug("Examined %s in %s", found.name, state.curr_room.name)
    return ExamineOutcome(
        state=set_flag(state, found.flag),
        narrative=narrative.get(found.discovery_key),
        discovered=True,
    )
