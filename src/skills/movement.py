"""
Movement Skills.

Applies the room graph to a GameState. Only ``curr_room`` changes;
all flags are carried over. Leaving the final room by the escape
direction wins the game instead of moving.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from src.content.narrative import NarrativeLibrary
from src.models.state import GameState
from src.models.world import (
    ESCAPE_DIRECTION,
    FINAL_ROOM,
    Direction,
    ExitStatus,
)
from src.skills.room_graph import move_in

logger = logging.getLogger(__name__)


class MoveOutcome(BaseModel):
    """Result of trying to move."""

    state: GameState
    status: ExitStatus | None = Field(
        default=None, description="How the move resolved (None on a win)"
    )
    narrative: str = ""
    won: bool = False


def is_escape(state: GameState, direction: Direction) -> bool:
    """Whether this move leaves the prison for good."""
    return state.curr_room == FINAL_ROOM and Direction(direction) == ESCAPE_DIRECTION


def move(state: GameState, direction: Direction, narrative: NarrativeLibrary) -> MoveOutcome:
    """
    Move the player one step.

    Args:
        state: Current game state
        direction: Which way to go
        narrative: Text lookup

    Returns:
        MoveOutcome with the new state. On a blocked or missing exit
        the state is returned unchanged.
    """
    direction = Direction(direction)

    if is_escape(state, direction):
        logger.info("Player escaped from %s", state.curr_room.name)
        return MoveOutcome(state=state, narrative=narrative.get("game.victory"), won=True)

    result = move_in(state.curr_room, direction, state.active_flags())
    text = narrative.get(result.narration_key, direction=direction.value)

    if not result.moved:
        logger.debug(
            "Move %s from %s refused (%s)",
            direction.value,
            state.curr_room.name,
            result.status.value,
        )
        return MoveOutcome(state=state, status=result.status, narrative=text)

    logger.debug("Moved %s: %s -> %s", direction.value, state.curr_room.name, result.room.name)
    return MoveOutcome(state=state.at(result.room), status=result.status, narrative=text)
