"""
Core Data Models for Cell Escape.

These models define the ontology of the game: rooms and directions,
progress flags, the player's state, and NPCs with their quest arcs.

All models are immutable; transitions return new values.
"""

from src.models.npc import NPC, DialogueStage, create_npc
from src.models.state import GameState, set_flag
from src.models.world import (
    ESCAPE_DIRECTION,
    FINAL_ROOM,
    START_ROOM,
    Direction,
    ExamineTarget,
    Exit,
    ExitStatus,
    FlagId,
    MoveResult,
    RoomDef,
    RoomId,
    room_id,
)

__all__ = [
    # World
    "RoomId",
    "Direction",
    "FlagId",
    "ExitStatus",
    "Exit",
    "RoomDef",
    "MoveResult",
    "ExamineTarget",
    "START_ROOM",
    "FINAL_ROOM",
    "ESCAPE_DIRECTION",
    "room_id",
    # State
    "GameState",
    "set_flag",
    # NPC
    "NPC",
    "DialogueStage",
    "create_npc",
]
