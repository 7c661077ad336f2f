"""
Player progress state for Cell Escape.

GameState is an immutable value. Every change produces a new state,
so transitions can be reasoned about (and tested) as pure functions.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from src.models.world import START_ROOM, FlagId, RoomId

logger = logging.getLogger(__name__)


class GameState(BaseModel):
    """Current room plus the one-way progress flags."""

    model_config = {"frozen": True}

    curr_room: RoomId = START_ROOM
    examined_wall: bool = False
    took_key: bool = False
    took_broom: bool = False
    took_nail: bool = False
    met_blimpo: bool = False
    final_room_unlocked: bool = False

    @classmethod
    def new(cls) -> GameState:
        """Fresh game: start room, every flag cleared."""
        return cls()

    def flag(self, flag_id: FlagId) -> bool:
        return getattr(self, flag_id.value)

    def active_flags(self) -> frozenset[FlagId]:
        """Flags that are currently set."""
        return frozenset(f for f in FlagId if self.flag(f))

    def at(self, room: RoomId) -> GameState:
        """Return a copy standing in another room."""
        return self.model_copy(update={"curr_room": RoomId(room)})


def set_flag(state: GameState, flag_id: FlagId, value: bool = True) -> GameState:
    """
    Return a new state with exactly one flag replaced.

    Flags only ever go from False to True during play; a fresh game is
    the only way to clear them.

    Args:
        state: The current state
        flag_id: Which flag to set
        value: New value for the flag

    Returns:
        A new GameState (the same object if nothing changed)

    Raises:
        ValueError: If asked to clear a flag that is already set
    """
    current = state.flag(flag_id)
    if current == value:
        return state
    if current and not value:
        raise ValueError(f"Flag '{flag_id.value}' cannot be cleared once set")

    logger.debug("Flag %s set", flag_id.value)
    return state.model_copy(update={flag_id.value: value})
