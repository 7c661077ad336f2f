"""
In-memory implementation of the save repository for testing.

Stores the serialized record as a string, so tests exercise exactly
the same codec as the file-backed repository.
"""

from __future__ import annotations

import logging

from src.content.npcs import create_npc_roster
from src.db.codec import deserialize, serialize
from src.models import NPC, GameState

logger = logging.getLogger(__name__)


class InMemorySaveRepository:
    """
    In-memory implementation of SaveRepository for testing.

    ``history`` keeps every record written, newest last.
    """

    def __init__(self, record: str | None = None) -> None:
        self.record = record
        self.history: list[str] = []

    def exists(self) -> bool:
        return self.record is not None

    def load(self) -> tuple[GameState, list[NPC]]:
        if self.record is None:
            raise FileNotFoundError("No saved game in memory")
        return deserialize(self.record)

    def save(self, state: GameState, npcs: list[NPC]) -> None:
        self.record = serialize(state, npcs)
        self.history.append(self.record)
        logger.info("Game saved in memory (room %d)", state.curr_room)

    def reset(self) -> None:
        self.save(GameState.new(), create_npc_roster())
