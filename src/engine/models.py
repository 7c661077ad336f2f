"""
Engine Data Models for Cell Escape.

Defines the core data structures for the game loop:
- Command: Parsed player input (verb + argument)
- TurnResult: New state, roster and narrative for one command
- EngineConfig: Runtime settings
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from src.models import NPC, GameState

DEFAULT_SAVE_PATH = Path("data") / "savedgame.txt"


class Verb(str, Enum):
    """Commands the engine understands."""

    GO = "go"
    EXAMINE = "examine"
    TALK = "talk"
    LOOK = "look"
    EXITS = "exits"
    HELP = "help"
    SAVE = "save"
    QUIT = "quit"
    UNKNOWN = "unknown"


class Command(BaseModel):
    """Parsed player command."""

    verb: Verb
    argument: str = Field(default="", description="Lower-cased argument, may be empty")
    raw_verb: str = Field(default="", description="The verb as typed (for error messages)")
    original_input: str = Field(default="", description="The player's original input")


class TurnResult(BaseModel):
    """Result of processing one command."""

    state: GameState
    npcs: list[NPC]
    narrative: str = Field(default="", description="Text to show the player")

    # Signals for the command loop
    won: bool = False
    quit: bool = False
    save_requested: bool = False
    state_changes: list[str] = Field(default_factory=list)


class EngineConfig(BaseModel):
    """Engine configuration."""

    save_path: Path = DEFAULT_SAVE_PATH
    narrative_dir: Path | None = None
    """Optional directory of ``<key>.txt`` narrative overrides."""

    show_exits: bool = True
    """List open exits after looking or moving."""

    @classmethod
    def from_env(cls, **overrides: object) -> EngineConfig:
        """
        Build a config from environment variables.

        Environment variables:
            CELL_ESCAPE_SAVE_PATH: Where the save file lives
            CELL_ESCAPE_NARRATIVE_DIR: Narrative override directory

        Explicit keyword overrides that are not None win over the environment.
        """
        values: dict[str, object] = {}
        if os.getenv("CELL_ESCAPE_SAVE_PATH"):
            values["save_path"] = os.getenv("CELL_ESCAPE_SAVE_PATH")
        if os.getenv("CELL_ESCAPE_NARRATIVE_DIR"):
            values["narrative_dir"] = os.getenv("CELL_ESCAPE_NARRATIVE_DIR")
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
