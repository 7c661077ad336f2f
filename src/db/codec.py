"""
Save record codec for Cell Escape.

The save file is plain, newline-delimited text::

    <curr_room>
    <flag>            one line per FlagId, in declaration order
    ...
    ~                 end of the game-state block
    ^                 start of an NPC record
    <name>
    <has_been_met>
    <given_quest_item>
    <quest_done>
    <monologue_intro>
    <monologue_neutral>
    <monologue_ending>
    <monologue_done>
    <location>
    ^
    ...

Booleans are the literals ``true`` and ``false``. Anything that does
not match this shape is rejected with SaveFormatError; there is no
partial recovery.
"""

from __future__ import annotations

from pydantic import ValidationError

from src.models.npc import NPC
from src.models.state import GameState
from src.models.world import FlagId, RoomId

STATE_DELIMITER = "~"
NPC_DELIMITER = "^"

_NPC_TEXT_FIELDS = (
    "monologue_intro",
    "monologue_neutral",
    "monologue_ending",
    "monologue_done",
)
_NPC_LINE_COUNT = 9
_FORBIDDEN = ("\n", "\r", STATE_DELIMITER, NPC_DELIMITER)


class SaveFormatError(ValueError):
    """Raised when save data cannot be parsed."""


# =============================================================================
# Field Helpers
# =============================================================================


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_bool(raw: str, field: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise SaveFormatError(f"Expected 'true' or 'false' for {field}, got {raw!r}")


def _parse_room(raw: str, field: str) -> RoomId:
    if not raw.isdigit():
        raise SaveFormatError(f"Expected a room number for {field}, got {raw!r}")
    try:
        return RoomId(int(raw))
    except ValueError:
        raise SaveFormatError(f"Unknown room {raw} for {field}") from None


def _check_text(value: str, field: str) -> str:
    if not value or any(ch in value for ch in _FORBIDDEN):
        raise ValueError(f"{field} cannot be saved: {value!r}")
    return value


# =============================================================================
# GameState
# =============================================================================


def serialize_state(state: GameState) -> str:
    """Game-state block, terminated by the ``~`` delimiter."""
    lines = [str(int(state.curr_room))]
    lines.extend(_format_bool(state.flag(flag)) for flag in FlagId)
    lines.append(STATE_DELIMITER)
    return "\n".join(lines)


def deserialize_state(block: str) -> GameState:
    """Parse the text before the ``~`` delimiter."""
    lines = block.strip("\n").split("\n")
    expected = 1 + len(FlagId)
    if len(lines) != expected:
        raise SaveFormatError(
            f"Game state block has {len(lines)} lines, expected {expected}"
        )

    fields: dict[str, object] = {"curr_room": _parse_room(lines[0], "curr_room")}
    for flag, raw in zip(FlagId, lines[1:]):
        fields[flag.value] = _parse_bool(raw, flag.value)
    return GameState(**fields)


# =============================================================================
# NPC Roster
# =============================================================================


def serialize_npc(npc: NPC) -> str:
    """One NPC record, starting with the ``^`` delimiter."""
    lines = [
        NPC_DELIMITER,
        _check_text(npc.name, "name"),
        _format_bool(npc.has_been_met),
        _format_bool(npc.given_quest_item),
        _format_bool(npc.quest_done),
    ]
    lines.extend(_check_text(getattr(npc, name), name) for name in _NPC_TEXT_FIELDS)
    lines.append(str(int(npc.location)))
    return "\n".join(lines)


def deserialize_npc(record: str) -> NPC:
    """Parse one NPC record (the text after a ``^``)."""
    lines = record.strip("\n").split("\n")
    if len(lines) != _NPC_LINE_COUNT:
        raise SaveFormatError(
            f"NPC record has {len(lines)} lines, expected {_NPC_LINE_COUNT}: {lines[:1]}"
        )

    name = lines[0]
    if not name:
        raise SaveFormatError("NPC record has an empty name")

    fields: dict[str, object] = {
        "name": name,
        "has_been_met": _parse_bool(lines[1], f"{name}.has_been_met"),
        "given_quest_item": _parse_bool(lines[2], f"{name}.given_quest_item"),
        "quest_done": _parse_bool(lines[3], f"{name}.quest_done"),
        "location": _parse_room(lines[8], f"{name}.location"),
    }
    for field, raw in zip(_NPC_TEXT_FIELDS, lines[4:8]):
        if not raw:
            raise SaveFormatError(f"{name}.{field} is empty")
        fields[field] = raw

    try:
        return NPC(**fields)
    except ValidationError as e:
        raise SaveFormatError(f"Inconsistent NPC record for {name}: {e}") from e


def serialize_npcs(npcs: list[NPC]) -> str:
    return "\n".join(serialize_npc(npc) for npc in npcs)


def deserialize_npcs(segment: str) -> list[NPC]:
    """Parse the roster segment. An empty segment is an empty roster."""
    if not segment.strip():
        return []

    head, *records = segment.split(NPC_DELIMITER)
    if head.strip():
        raise SaveFormatError(f"Unexpected text before first NPC record: {head.strip()!r}")
    return [deserialize_npc(record) for record in records]


# =============================================================================
# Full Save Record
# =============================================================================


def serialize(state: GameState, npcs: list[NPC]) -> str:
    """
    Convert a game state and roster into a save record.

    Raises:
        ValueError: If an NPC's name or monologue key contains a
            newline or a delimiter character
    """
    parts = [serialize_state(state)]
    if npcs:
        parts.append(serialize_npcs(npcs))
    return "\n".join(parts) + "\n"


def deserialize(data: str) -> tuple[GameState, list[NPC]]:
    """
    Parse a save record.

    Raises:
        SaveFormatError: If the record is malformed in any way
    """
    data = data.replace("\r\n", "\n")
    if STATE_DELIMITER not in data:
        raise SaveFormatError(f"Save data has no '{STATE_DELIMITER}' delimiter")

    state_block, roster = data.split(STATE_DELIMITER, 1)
    return deserialize_state(state_block), deserialize_npcs(roster)
