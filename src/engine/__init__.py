"""
Core Engine for Cell Escape.

The engine orchestrates:
- Command parsing (understanding player input)
- Skill dispatch (movement, examine, dialogue)
- Narrative assembly (responding to player)

State is threaded through explicitly; the engine itself keeps none.
"""

from __future__ import annotations

from src.engine.game import HELP_TEXT, GameEngine
from src.engine.intent import (
    DIRECTION_ALIASES,
    VERB_ALIASES,
    CommandParser,
    parse_direction,
)
from src.engine.models import (
    DEFAULT_SAVE_PATH,
    Command,
    EngineConfig,
    TurnResult,
    Verb,
)

__all__ = [
    # Main engine
    "GameEngine",
    "HELP_TEXT",
    # Models
    "Command",
    "DEFAULT_SAVE_PATH",
    "EngineConfig",
    "TurnResult",
    "Verb",
    # Parsing
    "CommandParser",
    "DIRECTION_ALIASES",
    "VERB_ALIASES",
    "parse_direction",
]
