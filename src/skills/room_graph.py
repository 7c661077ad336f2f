"""
Room Graph lookups.

Pure functions over the static map in ``src.content.rooms``. Every
directional function is total over RoomId: a missing exit and a
gated exit both leave the player where they are, but come back as
distinct ExitStatus values so callers can explain why.
"""

from __future__ import annotations

from collections.abc import Collection

from src.content.narrative import NarrativeLibrary
from src.content.rooms import EXITS, ROOMS
from src.models.world import (
    Direction,
    ExitStatus,
    FlagId,
    MoveResult,
    RoomDef,
    RoomId,
    room_id,
)


def get_room(room: int | RoomId) -> RoomDef:
    """
    Look up a room definition.

    Raises:
        ValueError: If the room is not in the graph. Gameplay can never
            reach such a room, so this signals a bug in the map itself.
    """
    return ROOMS[room_id(room)]


def describe(
    room: int | RoomId,
    flags: Collection[FlagId],
    narrative: NarrativeLibrary,
) -> str:
    """Return the room's name and its description for the given flags."""
    definition = get_room(room)
    key = definition.description_key
    if definition.alt_flag is not None and definition.alt_flag in flags:
        key = definition.alt_description_key or key
    return f"{definition.name}\n{narrative.get(key)}"


def _move(room: int | RoomId, direction: Direction, flags: Collection[FlagId]) -> MoveResult:
    origin = room_id(room)
    exit_ = EXITS.get(origin, {}).get(direction)

    if exit_ is None:
        return MoveResult(room=origin, status=ExitStatus.NO_EXIT, narration_key="move.no_exit")

    if exit_.requires is not None and exit_.requires not in flags:
        return MoveResult(room=origin, status=ExitStatus.GATED, narration_key=exit_.locked_key)

    return MoveResult(
        room=exit_.destination,
        status=ExitStatus.MOVED,
        narration_key=exit_.travel_key or "move.moved",
    )


def move_north(room: int | RoomId, flags: Collection[FlagId]) -> MoveResult:
    return _move(room, Direction.NORTH, flags)


def move_south(room: int | RoomId, flags: Collection[FlagId]) -> MoveResult:
    return _move(room, Direction.SOUTH, flags)


def move_east(room: int | RoomId, flags: Collection[FlagId]) -> MoveResult:
    return _move(room, Direction.EAST, flags)


def move_west(room: int | RoomId, flags: Collection[FlagId]) -> MoveResult:
    return _move(room, Direction.WEST, flags)


_DIRECTIONAL = {
    Direction.NORTH: move_north,
    Direction.SOUTH: move_south,
    Direction.EAST: move_east,
    Direction.WEST: move_west,
}


def move_in(
    room: int | RoomId,
    direction: Direction,
    flags: Collection[FlagId],
) -> MoveResult:
    """Dispatch to the directional lookup for ``direction``."""
    return _DIRECTIONAL[Direction(direction)](room, flags)


def exits_from(room: int | RoomId, flags: Collection[FlagId]) -> list[Direction]:
    """Directions the player can currently leave by, in compass order."""
    return [d for d in Direction if move_in(room, d, flags).moved]
