"""
World vocabulary for Cell Escape.

Defines the fixed identifiers the rest of the game speaks in:
rooms, directions, progress flags, and the shape of exits in the room graph.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field


class RoomId(IntEnum):
    """Every room in the prison. Values are the on-disk room numbers."""

    CELL = 0
    SECRET_ROOM = 1
    CORRIDOR = 2
    STOREROOM = 3
    LAUNDRY = 4
    GUARD_ROOM = 5
    MESS_HALL = 6
    KITCHEN = 7
    CHAPEL = 8
    COURTYARD = 9
    GATEHOUSE = 10
    ARMORY = 11
    OUTER_GATE = 12


class Direction(str, Enum):
    """Compass directions the player can move in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class FlagId(str, Enum):
    """
    Named progress flags.

    Values match the GameState field names, and declaration order
    is the order flags are written to the save file.
    """

    EXAMINED_WALL = "examined_wall"
    TOOK_KEY = "took_key"
    TOOK_BROOM = "took_broom"
    TOOK_NAIL = "took_nail"
    MET_BLIMPO = "met_blimpo"
    FINAL_ROOM_UNLOCKED = "final_room_unlocked"


START_ROOM = RoomId.CELL
FINAL_ROOM = RoomId.OUTER_GATE
ESCAPE_DIRECTION = Direction.NORTH


def room_id(value: int | RoomId) -> RoomId:
    """
    Coerce a raw room number into a RoomId.

    Raises:
        ValueError: If the value is not a room in the graph.
    """
    try:
        return RoomId(value)
    except ValueError:
        raise ValueError(f"Unknown room identifier: {value!r}") from None


class ExitStatus(str, Enum):
    """How an attempted move resolved."""

    MOVED = "moved"
    NO_EXIT = "no_exit"  # Nothing in that direction
    GATED = "gated"  # Exit exists but a flag is unmet


class Exit(BaseModel):
    """A directed edge in the room graph."""

    model_config = {"frozen": True}

    destination: RoomId
    requires: FlagId | None = None
    """Flag that must be set before the exit opens."""

    locked_key: str = "move.locked"
    """Narrative key shown while the exit is gated."""

    travel_key: str | None = None
    """Narrative key shown when passing through (optional flavour)."""


class RoomDef(BaseModel):
    """Static definition of a room."""

    model_config = {"frozen": True}

    id: RoomId
    name: str
    description_key: str
    alt_description_key: str | None = None
    alt_flag: FlagId | None = None
    """When this flag is set, the alternate description is shown."""


class MoveResult(BaseModel):
    """Result of a directional lookup in the room graph."""

    model_config = {"frozen": True}

    room: RoomId = Field(description="Room the player ends up in")
    status: ExitStatus
    narration_key: str = Field(description="Narrative key explaining the outcome")

    @property
    def moved(self) -> bool:
        return self.status == ExitStatus.MOVED


class ExamineTarget(BaseModel):
    """An object that can be examined in exactly one room."""

    model_config = {"frozen": True}

    name: str
    aliases: tuple[str, ...] = ()
    room: RoomId
    flag: FlagId
    discovery_key: str
    nothing_new_key: str

    def matches(self, target: str) -> bool:
        target = target.lower()
        return target == self.name or target in self.aliases
