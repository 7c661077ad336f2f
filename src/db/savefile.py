"""
File-backed save repository for Cell Escape.

The save is a single plain-text file. Every save writes a complete
record to a temporary file next to it and then swaps it into place,
so an interrupted write never leaves half a record behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from src.content.npcs import create_npc_roster
from src.db.codec import SaveFormatError, deserialize, serialize
from src.models import NPC, GameState

logger = logging.getLogger(__name__)


class FileSaveRepository:
    """SaveRepository backed by a text file on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> tuple[GameState, list[NPC]]:
        """
        Load and parse the save file.

        Raises:
            FileNotFoundError: If the file does not exist
            SaveFormatError: If the contents are malformed or not UTF-8
        """
        try:
            data = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SaveFormatError(f"Save file {self.path} is not valid UTF-8: {e}") from e
        state, npcs = deserialize(data)
        logger.info("Loaded save from %s (room %d)", self.path, state.curr_room)
        return state, npcs

    def save(self, state: GameState, npcs: list[NPC]) -> None:
        self._write(serialize(state, npcs))
        logger.info("Saved game to %s (room %d)", self.path, state.curr_room)

    def reset(self) -> None:
        self._write(serialize(GameState.new(), create_npc_roster()))
        logger.info("Reset save at %s", self.path)

    def _write(self, record: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(record)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
