"""
Stateless Skills for Cell Escape.

Skills are pure functions that:
- Take structured input (Pydantic models)
- Execute game logic (room graph, flags, dialogue)
- Return structured output
- NEVER maintain state between calls
"""

from src.skills.dialogue import TalkOutcome, find_npc_index, speak, talk
from src.skills.examine import ExamineOutcome, examine, find_target
from src.skills.movement import MoveOutcome, is_escape, move
from src.skills.room_graph import (
    describe,
    exits_from,
    get_room,
    move_east,
    move_in,
    move_north,
    move_south,
    move_west,
)

__all__ = [
    # Room graph
    "describe",
    "exits_from",
    "get_room",
    "move_in",
    "move_north",
    "move_south",
    "move_east",
    "move_west",
    # Movement
    "MoveOutcome",
    "is_escape",
    "move",
    # Examine
    "ExamineOutcome",
    "examine",
    "find_target",
    # Dialogue
    "TalkOutcome",
    "find_npc_index",
    "speak",
    "talk",
]
