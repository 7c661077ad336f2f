"""
The prison map for Cell Escape.

Static, read-only tables:
- ROOMS: name and description keys per room
- EXITS: the directed room graph, with flag-gated edges
- EXAMINE_TARGETS: objects that can be examined, one room each

Layout (north is up, gates in parentheses)::

                              [12 Outer Gate]
                                     | (final_room_unlocked)
                              [10 Gatehouse]
                                     |
    [11 Armory] -(met_blimpo)- [9 Courtyard]
                                     |
               [8 Chapel] --- [5 Guard Room] --- [6 Mess Hall] --- [7 Kitchen]
                                     |
               [4 Laundry] --- [2 Corridor] --- [3 Storeroom]
                                     | (took_key)
                                 [0 Cell]
                                     | (examined_wall)
                              [1 Secret Room]
"""

from __future__ import annotations

from src.models.world import (
    Direction,
    ExamineTarget,
    Exit,
    FlagId,
    RoomDef,
    RoomId,
)

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


# =============================================================================
# Rooms
# =============================================================================

ROOMS: dict[RoomId, RoomDef] = {
    room.id: room
    for room in [
        RoomDef(
            id=RoomId.CELL,
            name="Cell",
            description_key="room.cell",
            alt_description_key="room.cell.opened",
            alt_flag=FlagId.EXAMINED_WALL,
        ),
        RoomDef(id=RoomId.SECRET_ROOM, name="Secret Room", description_key="room.secret_room"),
        RoomDef(id=RoomId.CORRIDOR, name="Corridor", description_key="room.corridor"),
        RoomDef(id=RoomId.STOREROOM, name="Storeroom", description_key="room.storeroom"),
        RoomDef(id=RoomId.LAUNDRY, name="Laundry", description_key="room.laundry"),
        RoomDef(id=RoomId.GUARD_ROOM, name="Guard Room", description_key="room.guard_room"),
        RoomDef(id=RoomId.MESS_HALL, name="Mess Hall", description_key="room.mess_hall"),
        RoomDef(id=RoomId.KITCHEN, name="Kitchen", description_key="room.kitchen"),
        RoomDef(id=RoomId.CHAPEL, name="Chapel", description_key="room.chapel"),
        RoomDef(id=RoomId.COURTYARD, name="Courtyard", description_key="room.courtyard"),
        RoomDef(id=RoomId.GATEHOUSE, name="Gatehouse", description_key="room.gatehouse"),
        RoomDef(id=RoomId.ARMORY, name="Armory", description_key="room.armory"),
        RoomDef(id=RoomId.OUTER_GATE, name="Outer Gate", description_key="room.outer_gate"),
    ]
}


# =============================================================================
# Room Graph
# =============================================================================

EXITS: dict[RoomId, dict[Direction, Exit]] = {
    RoomId.CELL: {
        N: Exit(
            destination=RoomId.CORRIDOR,
            requires=FlagId.TOOK_KEY,
            locked_key="move.cell_door_locked",
            travel_key="move.cell_door_unlocked",
        ),
        S: Exit(
            destination=RoomId.SECRET_ROOM,
            requires=FlagId.EXAMINED_WALL,
            locked_key="move.cell_wall_solid",
            travel_key="move.crawl_through",
        ),
    },
    RoomId.SECRET_ROOM: {
        N: Exit(destination=RoomId.CELL, travel_key="move.crawl_through"),
    },
    RoomId.CORRIDOR: {
        N: Exit(destination=RoomId.GUARD_ROOM),
        S: Exit(destination=RoomId.CELL),
        E: Exit(destination=RoomId.STOREROOM),
        W: Exit(destination=RoomId.LAUNDRY),
    },
    RoomId.STOREROOM: {
        W: Exit(destination=RoomId.CORRIDOR),
    },
    RoomId.LAUNDRY: {
        E: Exit(destination=RoomId.CORRIDOR),
    },
    RoomId.GUARD_ROOM: {
        N: Exit(destination=RoomId.COURTYARD),
        S: Exit(destination=RoomId.CORRIDOR),
        E: Exit(destination=RoomId.MESS_HALL),
        W: Exit(destination=RoomId.CHAPEL),
    },
    RoomId.MESS_HALL: {
        E: Exit(destination=RoomId.KITCHEN),
        W: Exit(destination=RoomId.GUARD_ROOM),
    },
    RoomId.KITCHEN: {
        W: Exit(destination=RoomId.MESS_HALL),
    },
    RoomId.CHAPEL: {
        E: Exit(destination=RoomId.GUARD_ROOM),
    },
    RoomId.COURTYARD: {
        N: Exit(destination=RoomId.GATEHOUSE),
        S: Exit(destination=RoomId.GUARD_ROOM),
        W: Exit(
            destination=RoomId.ARMORY,
            requires=FlagId.MET_BLIMPO,
            locked_key="move.armory_barred",
        ),
    },
    RoomId.GATEHOUSE: {
        N: Exit(
            destination=RoomId.OUTER_GATE,
            requires=FlagId.FINAL_ROOM_UNLOCKED,
            locked_key="move.portcullis_down",
        ),
        S: Exit(destination=RoomId.COURTYARD),
    },
    RoomId.ARMORY: {
        E: Exit(destination=RoomId.COURTYARD),
    },
    RoomId.OUTER_GATE: {
        # North is the escape itself, handled before the graph is consulted
        S: Exit(destination=RoomId.GATEHOUSE),
    },
}


# =============================================================================
# Examinable Objects
# =============================================================================

EXAMINE_TARGETS: list[ExamineTarget] = [
    ExamineTarget(
        name="wall",
        aliases=("walls", "crack", "cracks"),
        room=RoomId.CELL,
        flag=FlagId.EXAMINED_WALL,
        discovery_key="examine.wall.discovery",
        nothing_new_key="examine.wall.nothing_new",
    ),
    ExamineTarget(
        name="table",
        room=RoomId.SECRET_ROOM,
        flag=FlagId.TOOK_KEY,
        discovery_key="examine.table.discovery",
        nothing_new_key="examine.table.nothing_new",
    ),
    ExamineTarget(
        name="closet",
        aliases=("cupboard",),
        room=RoomId.STOREROOM,
        flag=FlagId.TOOK_BROOM,
        discovery_key="examine.closet.discovery",
        nothing_new_key="examine.closet.nothing_new",
    ),
    ExamineTarget(
        name="rack",
        aliases=("racks",),
        room=RoomId.ARMORY,
        flag=FlagId.TOOK_NAIL,
        discovery_key="examine.rack.discovery",
        nothing_new_key="examine.rack.nothing_new",
    ),
]
