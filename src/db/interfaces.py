"""
Persistence interface definitions for Cell Escape.

Uses Protocol classes to define the contract for save storage.
Implementations can write real files or keep everything in memory
for testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.models import NPC, GameState


class SaveRepository(Protocol):
    """
    Interface for saved-game storage.

    A repository holds at most one save. Saving always replaces the
    whole record; nothing is patched in place.
    """

    def exists(self) -> bool:
        """Check whether a saved game is available."""
        ...

    def load(self) -> tuple[GameState, list[NPC]]:
        """
        Load the saved game.

        Raises:
            FileNotFoundError: If there is no save
            SaveFormatError: If the save is malformed
        """
        ...

    def save(self, state: GameState, npcs: list[NPC]) -> None:
        """Overwrite the save with this state and roster."""
        ...

    def reset(self) -> None:
        """Overwrite the save with the canonical new-game record."""
        ...
