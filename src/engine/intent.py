"""
Command Parser for Cell Escape.

Splits player input into a verb and an argument. Only the first two
words matter; everything is lower-cased. Bare directions ("north",
"n") are accepted as movement.
"""

from __future__ import annotations

from src.engine.models import Command, Verb
from src.models.world import Direction

VERB_ALIASES: dict[str, Verb] = {
    "go": Verb.GO,
    "move": Verb.GO,
    "walk": Verb.GO,
    "examine": Verb.EXAMINE,
    "x": Verb.EXAMINE,
    "inspect": Verb.EXAMINE,
    "search": Verb.EXAMINE,
    "talk": Verb.TALK,
    "speak": Verb.TALK,
    "look": Verb.LOOK,
    "l": Verb.LOOK,
    "exits": Verb.EXITS,
    "help": Verb.HELP,
    "?": Verb.HELP,
    "save": Verb.SAVE,
    "quit": Verb.QUIT,
    "exit": Verb.QUIT,
    "q": Verb.QUIT,
}

DIRECTION_ALIASES: dict[str, Direction] = {
    "north": Direction.NORTH,
    "n": Direction.NORTH,
    "up": Direction.NORTH,
    "forward": Direction.NORTH,
    "south": Direction.SOUTH,
    "s": Direction.SOUTH,
    "down": Direction.SOUTH,
    "back": Direction.SOUTH,
    "east": Direction.EAST,
    "e": Direction.EAST,
    "right": Direction.EAST,
    "west": Direction.WEST,
    "w": Direction.WEST,
    "left": Direction.WEST,
}

# Filler words skipped before the argument: "talk to", "examine the table"
_FILLER = {"to", "the", "a", "an", "at", "with"}


def parse_direction(text: str) -> Direction | None:
    """Resolve a direction word or alias."""
    return DIRECTION_ALIASES.get(text.strip().lower())


class CommandParser:
    """Turns free text into a Command."""

    def parse(self, player_input: str) -> Command:
        words = player_input.lower().split()
        if not words:
            return Command(verb=Verb.UNKNOWN, original_input=player_input)

        first, rest = words[0], [w for w in words[1:] if w not in _FILLER]
        argument = rest[0] if rest else ""

        if first in DIRECTION_ALIASES:
            return Command(
                verb=Verb.GO,
                argument=first,
                raw_verb=first,
                original_input=player_input,
            )

        verb = VERB_ALIASES.get(first, Verb.UNKNOWN)
        return Command(
            verb=verb,
            argument=argument,
            raw_verb=first,
            original_input=player_input,
        )
